import uuid

from fastapi import Request

TRACE_ID_HEADER = "X-Trace-ID"


def ensure_trace_id(request: Request) -> str:
    """Trace ID of this request, created once and stored on ``request.state``.

    A caller-supplied ``X-Trace-ID`` header is honoured so that a trace can
    span the upload front end and this service.
    """
    existing = getattr(request.state, "trace_id", None)
    if existing:
        return existing
    trace_id = request.headers.get(TRACE_ID_HEADER) or uuid.uuid4().hex
    request.state.trace_id = trace_id
    return trace_id
