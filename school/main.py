"""
School enrollment demo entry point.

Resets the database, creates one subject and two students, enrolls both
students and prints every subject followed by its students.

Usage:
    python -m school.main
"""

import sys
from datetime import datetime
from typing import Optional, TextIO

from school.core.config import settings
from school.core.database import Database
from school.core.logging_config import setup_logging
from school.models import Student, Subject
from school.repositories import SchoolRepository


def run(database_url: str, out: Optional[TextIO] = None, echo: bool = False) -> None:
    """
    Run the fixed demo sequence against ``database_url``.

    The report goes to ``out`` (stdout by default). Any failure propagates
    to the caller; the engine is disposed either way.
    """
    if out is None:
        out = sys.stdout

    with Database(database_url, echo=echo) as db:
        # Clean slate for demo
        db.reset_and_create_schema()

        with db.session() as session:
            repository = SchoolRepository(session)

            math = repository.add_subject(
                Subject(title="Mathematics", maximum_capacity=30)
            )

            alice = repository.add_student(
                Student(name="Alice", enrollment_date=datetime.now())
            )
            bob = repository.add_student(
                Student(name="Bob", enrollment_date=datetime.now())
            )

            repository.enroll_student_to_subject(alice.id, math.id)
            repository.enroll_student_to_subject(bob.id, math.id)

            for subject in repository.get_all_subjects():
                out.write(f"Subject: {subject.title}\n")
                for student in subject.students:
                    out.write(f" - {student.name}\n")


def main() -> None:
    """Configure logging from settings and run the demo."""
    setup_logging(level=settings.log_level, json_format=settings.log_json)
    run(settings.database_url, echo=settings.sql_echo)


if __name__ == "__main__":
    main()
