"""
Core infrastructure: configuration, logging and database handling.
"""
