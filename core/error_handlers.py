"""Exception handlers that render every failure as RFC 7807 Problem Details.

Failed compliance checks never reach these handlers: they are part of a
normal 200 response. Only malformed requests, oversized documents and
unexpected crashes end up here.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic_core import ValidationError as PydanticCoreValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.schemas import ProblemDetail
from compliance.core.exceptions import BaseError, ErrorCategory
from core.utils import TRACE_ID_HEADER, ensure_trace_id

logger = logging.getLogger(__name__)


def _respond(request: Request, trace_id: str, **problem_fields) -> JSONResponse:
    problem = ProblemDetail(instance=request.url.path, trace_id=trace_id, **problem_fields)
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        headers={TRACE_ID_HEADER: trace_id},
    )


def _invalid_request(request: Request, trace_id: str, detail: str) -> JSONResponse:
    return _respond(
        request,
        trace_id,
        type="/errors/VALIDATION_ERROR",
        title="Request validation failed",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=detail,
        code="VALIDATION_ERROR",
        category=ErrorCategory.CLIENT_ERROR.value,
    )


def _describe(error: dict) -> tuple[str, str]:
    """Dotted field path (without the ``body`` prefix) and a readable message."""
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    msg = error.get("msg", "Validation failed")
    return field, (f"{field}: {msg}" if field else msg)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Malformed request body (bad FEIN, missing analysisResult, wrong types)."""
    trace_id = ensure_trace_id(request)
    errors = exc.errors()
    field, detail = _describe(errors[0] if errors else {})

    logger.warning(
        "Rejected request body: %s",
        detail,
        extra={
            "trace_id": trace_id,
            "field": field,
            "error_type": errors[0].get("type", "") if errors else "",
        },
    )
    return _invalid_request(request, trace_id, detail)


async def handle_pydantic_error(request: Request, exc: PydanticCoreValidationError):
    """Model validation that failed after request parsing."""
    trace_id = ensure_trace_id(request)
    errors = exc.errors()
    _, detail = _describe(errors[0] if errors else {})

    logger.warning(
        "Model validation failed: %s",
        detail,
        extra={"trace_id": trace_id, "path": request.url.path},
    )
    return _invalid_request(request, trace_id, detail)


async def handle_app_error(request: Request, exc: BaseError):
    """Known service errors such as an oversized or non-object analysis result."""
    trace_id = ensure_trace_id(request)

    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level,
        "%s (%s)",
        exc.message,
        exc.error_code,
        extra={
            "trace_id": trace_id,
            "error_code": exc.error_code,
            "http_status": exc.http_status,
            "path": request.url.path,
        },
    )
    return _respond(request, trace_id, **exc.to_dict())


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    """Routing-level errors: unknown path, wrong method."""
    trace_id = ensure_trace_id(request)
    code = f"HTTP_{exc.status_code}"

    logger.warning(
        "HTTP %d on %s",
        exc.status_code,
        request.url.path,
        extra={"trace_id": trace_id, "http_status": exc.status_code, "path": request.url.path},
    )
    category = ErrorCategory.SERVER_ERROR if exc.status_code >= 500 else ErrorCategory.CLIENT_ERROR
    return _respond(
        request,
        trace_id,
        type=f"/errors/{code}",
        title=str(exc.detail),
        status=exc.status_code,
        detail=str(exc.detail),
        code=code,
        category=category.value,
    )


async def handle_unknown_error(request: Request, exc: Exception):
    """Anything else is a bug; the trace ID lets support find the traceback."""
    trace_id = ensure_trace_id(request)

    logger.exception(
        "Unhandled error while processing request",
        extra={"trace_id": trace_id, "path": request.url.path, "error_type": type(exc).__name__},
    )
    return _respond(
        request,
        trace_id,
        type="/errors/INTERNAL_SERVER_ERROR",
        title="Internal server error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with trace ID.",
        code="INTERNAL_SERVER_ERROR",
        category=ErrorCategory.SERVER_ERROR.value,
    )
