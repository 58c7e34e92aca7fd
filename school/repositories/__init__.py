"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating database access from the driver and callers.
"""

from school.repositories.school import SchoolRepository

__all__ = ["SchoolRepository"]
