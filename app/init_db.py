"""
Schema creation and seed data.

`init_db` is run once at startup, before the app accepts requests. It is safe
to call on every process start: tables are only created when missing and
seed rows are only inserted into an empty roster, so they land exactly once.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import Base, engine as default_engine
from app.models import Classroom, Student
from app.utils.exceptions import StorageInitializationFailedException

logger = logging.getLogger(__name__)

SEED_CLASSROOM_COUNT      = 5
SEED_STUDENTS_PER_CLASS   = 4


def seed_classrooms() -> list[dict]:
    return [
        {"id": class_id, "name": f"Class {class_id}"}
        for class_id in range(1, SEED_CLASSROOM_COUNT + 1)
    ]


def seed_students() -> list[dict]:
    """Students 1..20 in ascending id order, four per classroom."""
    rows = []
    student_id = 1
    for class_id in range(1, SEED_CLASSROOM_COUNT + 1):
        for _ in range(SEED_STUDENTS_PER_CLASS):
            rows.append({
                "id": student_id,
                "name": f"Student {student_id}",
                "classroomId": class_id,
            })
            student_id += 1
    return rows


def _already_seeded(db: Session) -> bool:
    return (
        db.query(Classroom.id).first() is not None
        or db.query(Student.id).first() is not None
    )


def _advance_sequences(db: Session) -> None:
    # Explicit ids bypass SERIAL sequences; move them past the seeded ids
    if db.get_bind().dialect.name != "postgresql":
        return
    for table in (Classroom.__tablename__, Student.__tablename__):
        db.execute(text(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
            f"(SELECT COALESCE(MAX(id), 1) FROM {table}))"
        ))


def init_db(engine=None) -> None:
    """
    Create the roster tables if needed and seed them if both are empty.
    Rows deleted after the first seed stay deleted.
    Raises StorageInitializationFailedException on any database error.
    """
    bind = engine or default_engine
    try:
        Base.metadata.create_all(bind=bind)
        with Session(bind=bind) as db:
            if _already_seeded(db):
                logger.info("Seed data already present, nothing to insert")
                return
            classrooms = [Classroom(**row) for row in seed_classrooms()]
            students = [Student(**row) for row in seed_students()]
            db.add_all(classrooms)
            db.flush()
            db.add_all(students)
            db.flush()
            _advance_sequences(db)
            db.commit()
    except SQLAlchemyError as e:
        raise StorageInitializationFailedException(
            f"Storage initialization failed: {e}"
        ) from e

    logger.info(f"Seeded {len(classrooms)} classrooms and {len(students)} students")


def initialize_storage(engine=None) -> bool:
    """
    Startup wrapper around init_db.
    Failures are logged and the app keeps running degraded, unless
    DATABASE_INIT_STRICT is set, in which case the error propagates.
    """
    try:
        init_db(engine)
    except StorageInitializationFailedException as e:
        logger.exception(f"[{e.error_code}] An error occurred while initializing the database")
        if settings.DATABASE_INIT_STRICT:
            raise
        return False
    logger.info("Database initialized successfully")
    return True
