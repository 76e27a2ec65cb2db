"""Request tracing middleware."""

import logging
import time

from fastapi import Request

from core.utils import TRACE_ID_HEADER, ensure_trace_id

logger = logging.getLogger(__name__)


async def trace_id_middleware(request: Request, call_next):
    """Tag the request with a trace ID, echo it back and log the request duration."""
    trace_id = ensure_trace_id(request)
    started = time.perf_counter()

    response = await call_next(request)

    response.headers[TRACE_ID_HEADER] = trace_id
    logger.debug(
        "%s %s -> %d",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "trace_id": trace_id,
            "path": request.url.path,
            "http_status": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response
