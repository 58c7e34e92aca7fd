"""
School repository for student and subject operations.

Provides the data access layer over Student, Subject and their
enrollment links. Every mutating call commits before returning; callers
never issue queries themselves.
"""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.orm import Session, joinedload

from school.core.logging_config import get_logger
from school.models.enrollment import student_subjects
from school.models.student import Student
from school.models.subject import Subject

logger = get_logger(__name__)


class SchoolRepository:
    """
    Repository for school data access.

    Related collections are populated only by the methods documented as
    loading them; other methods return entities whose collections are
    unloaded.

    Attributes:
        session: SQLAlchemy session for database operations
    """

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session
        """
        self.session = session

    def _commit(self) -> None:
        """Commit the session, rolling back and re-raising on failure."""
        try:
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.error(f"Failed to commit: {e}")
            raise

    # ── CREATE ────────────────────────────────────────────

    def add_subject(self, subject: Subject) -> Subject:
        """
        Insert a new subject.

        Args:
            subject: Transient Subject to persist

        Returns:
            The same Subject with its ``id`` populated

        Example:
            >>> math = repo.add_subject(Subject(title="Mathematics", maximum_capacity=30))
            >>> math.id
            1
        """
        self.session.add(subject)
        self._commit()
        logger.info(
            f"Added subject '{subject.title}'",
            extra={"subject_id": subject.id}
        )
        return subject

    def add_student(self, student: Student) -> Student:
        """
        Insert a new student.

        Args:
            student: Transient Student to persist

        Returns:
            The same Student with its ``id`` populated
        """
        self.session.add(student)
        self._commit()
        logger.info(
            f"Added student '{student.name}'",
            extra={"student_id": student.id}
        )
        return student

    # ── READ ──────────────────────────────────────────────

    def get_student(self, student_id: int) -> Optional[Student]:
        """Look up a student by primary key; ``subjects`` is not loaded."""
        return self.session.get(Student, student_id)

    def get_subject(self, subject_id: int) -> Optional[Subject]:
        """Look up a subject by primary key; ``students`` is not loaded."""
        return self.session.get(Subject, subject_id)

    def get_all_subjects(self) -> list[Subject]:
        """
        Get every subject with its students.

        Returns:
            List of all Subject instances, each with ``students`` eagerly
            populated by a single joined query. No ordering is applied.
        """
        stmt = (
            select(Subject)
            .options(joinedload(Subject.students))
            .execution_options(populate_existing=True)
        )
        result = self.session.execute(stmt)
        return list(result.unique().scalars().all())

    def get_students_for_subject(self, subject_id: int) -> Optional[list[Student]]:
        """
        Get the students enrolled in a subject.

        Args:
            subject_id: Primary key of the subject

        Returns:
            List of enrolled students (possibly empty), or None if no
            subject has that id
        """
        stmt = (
            select(Subject)
            .where(Subject.id == subject_id)
            .options(joinedload(Subject.students))
            .execution_options(populate_existing=True)
        )
        result = self.session.execute(stmt)
        subject = result.unique().scalar_one_or_none()
        if subject is None:
            return None
        return list(subject.students)

    def is_enrolled(self, student_id: int, subject_id: int) -> bool:
        """Check whether a link row exists for the student and subject."""
        stmt = select(student_subjects).where(
            student_subjects.c.student_id == student_id,
            student_subjects.c.subject_id == subject_id,
        )
        return self.session.execute(stmt).first() is not None

    # ── ASSOCIATE ─────────────────────────────────────────

    def enroll_student_to_subject(self, student_id: int, subject_id: int) -> None:
        """
        Enroll a student in a subject.

        Args:
            student_id: Primary key of the student
            subject_id: Primary key of the subject

        Note:
            - If either id does not exist nothing happens: no error is
              raised and nothing is reported
            - Enrolling an already enrolled pair is also a no-op, so a
              pair is never linked twice
        """
        if self.get_student(student_id) is None or self.get_subject(subject_id) is None:
            return

        # Checked against the link table; the ORM collections may be unloaded
        if self.is_enrolled(student_id, subject_id):
            return

        self.session.execute(
            insert(student_subjects).values(
                student_id=student_id,
                subject_id=subject_id,
            )
        )
        self._commit()
        logger.info(
            "Student enrolled",
            extra={"student_id": student_id, "subject_id": subject_id}
        )
