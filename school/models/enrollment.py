"""
Association table linking students to subjects.

A link row carries no payload: it only records that one student is
enrolled in one subject. The composite primary key allows each pair at
most once.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from school.models.base import Base


student_subjects = Table(
    "student_subjects",
    Base.metadata,
    Column(
        "student_id",
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "subject_id",
        Integer,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
