"""ASGI entry point: ``uvicorn main:app``."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic_core import ValidationError as PydanticCoreValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import health, validate
from api.routes.health import SERVICE_VERSION
from compliance.core.exceptions import BaseError
from compliance.core.logging_config import configure_structured_logging
from core import error_handlers
from core.middleware import trace_id_middleware
from core.settings import app_settings
from core.validation import validate_all_settings

logger = logging.getLogger(__name__)

# Most specific first; ``Exception`` catches whatever is left
_EXCEPTION_HANDLERS = (
    (RequestValidationError, error_handlers.handle_validation_error),
    (PydanticCoreValidationError, error_handlers.handle_pydantic_error),
    (StarletteHTTPException, error_handlers.handle_http_error),
    (BaseError, error_handlers.handle_app_error),
    (Exception, error_handlers.handle_unknown_error),
)


def create_app() -> FastAPI:
    """Configure logging, check settings and assemble the application.

    Raises:
        RuntimeError: If the environment holds an invalid setting
    """
    configure_structured_logging(level=app_settings.LOG_LEVEL, json_format=app_settings.LOG_JSON)
    validate_all_settings()

    application = FastAPI(
        title="Document Compliance Validation API",
        version=SERVICE_VERSION,
        description="Validates New Jersey business certificates against document-type rule sets",
        docs_url="/docs",
        redoc_url="/redoc",
        root_path=app_settings.APP_ROOT_PATH,
    )
    application.middleware("http")(trace_id_middleware)

    for exc_class, handler in _EXCEPTION_HANDLERS:
        application.add_exception_handler(exc_class, handler)

    application.include_router(health.router)
    application.include_router(validate.router)

    logger.info("Service ready", extra={"path": app_settings.APP_ROOT_PATH or "/"})
    return application


app = create_app()
