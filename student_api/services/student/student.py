import logging
from typing import List, Optional

from sqlalchemy import insert, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from student_api.core.exceptions import DatabaseException
from student_api.models.student import Student
from student_api.schemas.student import StudentRecord

logger = logging.getLogger(__name__)

# Column order matches the field order of StudentRecord
STUDENT_COLUMNS = (
    Student.name,
    Student.class_,
    Student.age,
    Student.email,
    Student.phone_number,
    Student.nationality,
)


def _to_record(row) -> StudentRecord:
    name, class_, age, email, phone_number, nationality = row
    return StudentRecord(
        name=name,
        class_=class_,
        age=age,
        email=email,
        phone_number=phone_number,
        nationality=nationality,
    )


def _fetch(db: Session, stmt) -> List[StudentRecord]:
    try:
        return [_to_record(row) for row in db.execute(stmt)]
    except SQLAlchemyError as e:
        logger.error(f"Query error: {e}")
        raise DatabaseException(str(e)) from e


def list_students(db: Session) -> List[StudentRecord]:
    """Every stored student, in whatever order the database returns them."""
    return _fetch(db, select(*STUDENT_COLUMNS))


def insert_student(db: Session, student: StudentRecord) -> int:
    """
    Insert one student and return the number of rows affected.

    Raises:
        DatabaseException: the statement failed or inserted nothing
    """
    stmt = insert(Student.__table__).values({
        "name": student.name,
        "class": student.class_,
        "age": student.age,
        "email": student.email,
        "phone_number": student.phone_number,
        "nationality": student.nationality,
    })
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error executing query: {stmt} | Error: {e}")
        raise DatabaseException("Error inserting into database") from e

    if result.rowcount == 0:
        logger.error("No rows were inserted")
        raise DatabaseException("No rows inserted")
    return result.rowcount


def search_students(
    db: Session,
    name: Optional[str] = None,
    nationality: Optional[str] = None,
) -> List[StudentRecord]:
    """
    Students whose name and/or nationality contain the given text.

    Empty filters are ignored, so a call without filters returns the same
    rows as list_students. Filter values are bound as ``%value%`` LIKE
    parameters.
    """
    stmt = select(*STUDENT_COLUMNS).where(true())
    if name:
        stmt = stmt.where(Student.name.like(f"%{name}%"))
    if nationality:
        stmt = stmt.where(Student.nationality.like(f"%{nationality}%"))

    logger.debug(f"Executing query: {stmt} with name={name!r} nationality={nationality!r}")
    return _fetch(db, stmt)
