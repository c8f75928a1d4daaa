from fastapi import APIRouter
from student_api.api.endpoints import students
from student_api.api.endpoints import welcome

api_router = APIRouter()

api_router.include_router(
    students.router,
    tags=["students"]
)

# Catch-all, must stay last
api_router.include_router(
    welcome.router,
    tags=["welcome"]
)
