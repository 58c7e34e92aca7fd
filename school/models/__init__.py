"""
SQLAlchemy ORM models for the school enrollment database.

Import models from this module to ensure they're registered with the
declarative base before the schema is created.
"""

from school.models.base import Base, IntegerIDMixin, ModelMixin
from school.models.enrollment import student_subjects
from school.models.student import Student
from school.models.subject import Subject

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "ModelMixin",
    # Models
    "Student",
    "Subject",
    "student_subjects",
]
