"""
Main entrypoint for the Student Records API.

This module assembles the FastAPI application: it sets up logging,
creates the JSON store and the service that wraps it, registers the
error handlers and includes the routers.  ``create_app`` does the
work and the module‑level ``app`` makes the result available to
uvicorn::

    uvicorn student_records_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings
from .core.errors import PersistenceFailure, StudentRecordsError
from .core.logging_config import setup_logging
from .core.storage import JsonStudentStore
from .services.student_service import StudentService


logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map service errors and unexpected failures to JSON responses."""

    @app.exception_handler(StudentRecordsError)
    async def handle_service_error(request: Request, exc: StudentRecordsError) -> JSONResponse:
        if isinstance(exc, PersistenceFailure):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if any(err.get("type") == "json_invalid" for err in errors):
            messages = ["request body must be valid JSON"]
        else:
            messages = [str(err.get("msg")) for err in errors]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": messages})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error"},
        )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.
        Tests pass their own to point the store at a temporary file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(
        app_settings.log_level,
        app_settings.log_file,
        max_bytes=app_settings.log_max_bytes,
        backup_count=app_settings.log_backup_count,
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )

    data_path = app_settings.get_data_path()
    app.state.student_service = StudentService(JsonStudentStore(data_path))
    logger.info("Using data file %s", data_path)

    register_exception_handlers(app)
    app.include_router(router)
    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
