"""
School enrollment demo: students and subjects linked many-to-many,
persisted to SQLite through SQLAlchemy.
"""

__version__ = "0.1.0"
