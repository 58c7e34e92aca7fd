"""
Base model and mixins for SQLAlchemy ORM.

Provides the declarative base, an integer primary key mixin and common
utilities shared by all school models.
"""

from typing import Any

from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


class IntegerIDMixin:
    """
    Mixin that adds an autoincrement integer primary key column.

    The value is assigned by the database on insert and never changed
    afterwards.

    Attributes:
        id: Integer primary key
    """

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Database-generated primary key"
    )


class ModelMixin:
    """
    Column-only helpers for Student and Subject.

    Neither helper touches ``students`` / ``subjects``, which are
    ``lazy="raise"`` and may be unloaded.
    """

    # Columns shown by __repr__; models override with their label column
    __repr_columns__ = ("id",)

    def to_dict(self) -> dict[str, Any]:
        """Column name to value, e.g. {"id": 1, "title": "Mathematics", "maximum_capacity": 30}."""
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        attrs = ", ".join(
            f"{name}={getattr(self, name)!r}" for name in self.__repr_columns__
        )
        return f"{self.__class__.__name__}({attrs})"
