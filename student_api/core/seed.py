import logging

from student_api.core.database import StudentStorage
from student_api.core.exceptions import DatabaseException
from student_api.schemas.student import StudentRecord
from student_api.services.student import student as crud_student

logger = logging.getLogger(__name__)

SEED_STUDENTS = [
    StudentRecord(
        name="Alice Johnson",
        class_="Grade 10",
        age=15,
        email="alice@example.com",
        phone_number="1234567890",
        nationality="American",
    ),
    StudentRecord(
        name="Bob Smith",
        class_="Grade 12",
        age=17,
        email="bob@example.com",
        phone_number="0987654321",
        nationality="British",
    ),
    StudentRecord(
        name="Charlie Brown",
        class_="Grade 11",
        age=16,
        email="charlie@example.com",
        phone_number="1122334455",
        nationality="Canadian",
    ),
]


def seed_data(storage: StudentStorage, students=SEED_STUDENTS) -> int:
    """
    Insert the sample students.

    There is no existence check: seeding an already seeded database
    duplicates the rows. A failing row is logged and skipped.

    Returns:
        int: number of rows inserted
    """
    logger.info("Seeding data...")
    inserted = 0
    db = storage.session()
    try:
        for student in students:
            try:
                inserted += crud_student.insert_student(db, student)
            except DatabaseException as e:
                logger.error(f"❌ Error inserting initial data for {student.name}: {e}")
    finally:
        db.close() # Always close the connection

    logger.info(f"✅ Seeded {inserted} students")
    return inserted
