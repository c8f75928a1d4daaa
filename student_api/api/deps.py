from typing import Generator, Optional

from fastapi import Request
from sqlalchemy.orm import Session

from student_api.core.database import StudentStorage
from student_api.schemas.student import StudentRecord, decode_student


def get_storage(request: Request) -> StudentStorage:
    """The storage handle the application was started with."""
    return request.app.state.storage


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency that yields a database session.
    The session is closed once the request has been handled.
    """
    db = get_storage(request).session()
    try:
        yield db
    finally:
        db.close()


async def get_student_payload(request: Request) -> StudentRecord:
    """Decode the request body, whatever the HTTP method."""
    return decode_student(await request.body())


def first_query_value(request: Request, key: str) -> Optional[str]:
    """First value of a query parameter, or None when it is absent."""
    values = request.query_params.getlist(key)
    return values[0] if values else None
