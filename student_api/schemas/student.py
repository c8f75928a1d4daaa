import json
from typing import Any, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from student_api.core.exceptions import BadRequestException

INVALID_PAYLOAD = "Invalid request payload"

# age is stored as a signed 64-bit SQLite INTEGER
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


class StudentRecord(BaseModel):
    """
    Wire representation of a student.

    Every field is optional on input. A field that is missing (or null)
    takes the zero value of its type: ``""`` for text, ``0`` for age.
    The database id is never part of the record.
    """
    name: str = ""
    class_: str = Field(default="", alias="class")
    age: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    email: str = ""
    phone_number: str = ""
    nationality: str = ""

    model_config = ConfigDict(
        # class_= is accepted in code; decode_student only accepts "class"
        validate_by_name=True,
        validate_by_alias=True,
        strict=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_to_zero_value(cls, v: Any, info):
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


def decode_student(raw: bytes) -> StudentRecord:
    """
    Decode a JSON request body into a StudentRecord.

    Raises:
        BadRequestException: body is not JSON, not an object, or a field
            has the wrong JSON type or an out-of-range age
    """
    try:
        payload = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise BadRequestException(INVALID_PAYLOAD) from e

    if payload is None:
        return StudentRecord()
    if not isinstance(payload, dict):
        raise BadRequestException(INVALID_PAYLOAD)

    try:
        return StudentRecord.model_validate(payload, by_alias=True, by_name=False)
    except ValidationError as e:
        raise BadRequestException(INVALID_PAYLOAD) from e


def encode_student(record: StudentRecord) -> dict:
    return record.model_dump(by_alias=True)


def encode_students(records: Iterable[StudentRecord]) -> List[dict]:
    return [encode_student(record) for record in records]
