"""
Student model.
"""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from school.models.base import Base, IntegerIDMixin, ModelMixin
from school.models.enrollment import student_subjects


class Student(Base, IntegerIDMixin, ModelMixin):
    """
    A student who may be enrolled in any number of subjects.

    Attributes:
        id: Integer primary key
        name: Student's name
        enrollment_date: When the student enrolled
        subjects: Subjects the student is enrolled in (loaded on request only)
    """

    __tablename__ = "students"
    __repr_columns__ = ("id", "name")

    name = Column(
        String(255),
        nullable=False,
        doc="Student's name"
    )

    enrollment_date = Column(
        DateTime,
        nullable=False,
        doc="When the student enrolled"
    )

    # Never lazy loaded; repository methods request the collection explicitly
    subjects = relationship(
        "Subject",
        secondary=student_subjects,
        back_populates="students",
        lazy="raise",
    )
