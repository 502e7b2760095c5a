# api/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import books, topics
from core import errors
from core.config import settings
from core.logging_config import setup_logging
from core.sa.database import db

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"

# Domain error -> HTTP status; checked in order so subclasses map with their parent
ERROR_STATUS_CODES = (
    (errors.ValidationError, status.HTTP_400_BAD_REQUEST),
    (errors.NotFoundError, status.HTTP_404_NOT_FOUND),
    (errors.ConflictError, status.HTTP_409_CONFLICT),
)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Name each offending field and the reason it was rejected"""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts) or "Invalid request"


async def domain_error_handler(request: Request, exc: errors.DomainError):
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
            return error_response(status_code, exc.message)
    logger.error(f"Unmapped domain error on {request.method} {request.url.path}: {exc.message}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNKNOWN_ERROR_MESSAGE)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_errors(exc)
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    # The detail stays in the log; callers only get the generic message
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNKNOWN_ERROR_MESSAGE)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        description="API for managing books and their topics",
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/api",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(errors.DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(topics.router)
    app.include_router(books.router)

    # Initialize database on startup
    @app.on_event("startup")
    async def startup_event():
        db.init_db()
        logger.info(f"{settings.project_name} started")

    @app.get("/")
    async def root():
        return {"status": "success", "message": f"{settings.project_name} is running"}

    return app


app = create_app()


# Main execution
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # Enable auto-reload
        reload_dirs=["api", "core"]  # Watch both api and core directories for changes
    )
