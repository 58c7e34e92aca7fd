"""
Subject model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from school.models.base import Base, IntegerIDMixin, ModelMixin
from school.models.enrollment import student_subjects


class Subject(Base, IntegerIDMixin, ModelMixin):
    """
    A subject students can enroll in.

    ``maximum_capacity`` is informational only; enrollment never checks
    it against the number of enrolled students.

    Attributes:
        id: Integer primary key
        title: Subject title
        maximum_capacity: Advertised seat count
        students: Enrolled students (loaded on request only)
    """

    __tablename__ = "subjects"
    __repr_columns__ = ("id", "title")

    title = Column(
        String(255),
        nullable=False,
        doc="Subject title"
    )

    maximum_capacity = Column(
        Integer,
        nullable=False,
        doc="Advertised seat count (not enforced)"
    )

    students = relationship(
        "Student",
        secondary=student_subjects,
        back_populates="subjects",
        lazy="raise",
    )
