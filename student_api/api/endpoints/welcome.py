from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from student_api.api.routing import ANY_METHOD, AnyMethodRoute

router = APIRouter(route_class=AnyMethodRoute)


@router.api_route("/{path:path}", methods=ANY_METHOD, response_class=PlainTextResponse)
def welcome(request: Request):
    """Greets any path that no other route claims, "/" included."""
    return f"Student API - Welcome to {request.url.path[1:]}!"
