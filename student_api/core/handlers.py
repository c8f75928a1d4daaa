# student_api/core/handlers.py
from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from student_api.core.exceptions import BaseAPIException
from student_api.core.logging import logger

# 1. Handle errors raised by the handlers and the query layer
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)

# 2. Handle everything else (bugs, library errors)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
