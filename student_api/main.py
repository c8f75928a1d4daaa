from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from student_api.api.router import api_router
from student_api.core.config import Settings, settings as default_settings
from student_api.core.database import StudentStorage
from student_api.core.exceptions import BaseAPIException, StorageError
from student_api.core.handlers import custom_api_exception_handler, general_exception_handler
from student_api.core.logging import logger
from student_api.core.seed import seed_data


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    storage = StudentStorage(settings.DATABASE_URL, echo=settings.DB_ECHO_SQL)
    try:
        storage.open()
    except StorageError as e:
        logger.critical(f"Cannot start: {e}")
        raise

    if settings.SEED_ON_STARTUP:
        seed_data(storage)

    app.state.storage = storage
    try:
        yield
    finally:
        # Flush and release the database file on shutdown
        storage.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        # Only the four student routes are served
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(api_router)
    return app


app = create_app()


def run():
    logger.info(f"Server listening on port {default_settings.PORT}...")
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
