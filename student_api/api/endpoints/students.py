import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from student_api.api.deps import first_query_value, get_db, get_student_payload
from student_api.api.routing import ANY_METHOD, AnyMethodRoute
from student_api.schemas.student import StudentRecord, encode_student, encode_students
from student_api.services.student import student as crud_student

logger = logging.getLogger(__name__)

router = APIRouter(route_class=AnyMethodRoute)


@router.api_route("/students", methods=ANY_METHOD)
def get_students(db: Session = Depends(get_db)):
    """
    List every student.

    Returns an empty array when the table is empty.
    """
    return encode_students(crud_student.list_students(db))


@router.api_route("/addStudents", methods=ANY_METHOD)
def add_student(
    student: StudentRecord = Depends(get_student_payload),
    db: Session = Depends(get_db)
):
    """
    Insert one student and echo it back.

    Missing fields are stored as empty strings / 0.
    Responds 200 (not 201) on success.
    """
    logger.info(f"Decoded student: {student!r}")
    crud_student.insert_student(db, student)
    logger.info("Successfully inserted student")
    return encode_student(student)


@router.api_route("/search", methods=ANY_METHOD)
def search_students(request: Request, db: Session = Depends(get_db)):
    """
    Search students by substring of name and/or nationality.

    - **name**: matched with LIKE '%name%' (optional)
    - **nationality**: matched with LIKE '%nationality%' (optional)

    A repeated parameter uses its first value.
    """
    students = crud_student.search_students(
        db,
        name=first_query_value(request, "name"),
        nationality=first_query_value(request, "nationality"),
    )
    return encode_students(students)
