"""Errors raised at the edges of the compliance service.

Only input that cannot be interpreted at all is an error. A document that
fails its checklist is a normal result (see ``ValidationOutcome``), so the
rule engine itself raises nothing from this module.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCategory(str, Enum):
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


class BaseError(Exception):
    """Root of the service error hierarchy.

    Every subclass knows its HTTP status and error code so the API layer can
    render it as a Problem Details body without a lookup table.

    Attributes:
        message: Short human-readable summary (becomes the problem ``title``)
        error_code: Stable machine-readable code, e.g. ``PAYLOAD_TOO_LARGE``
        category: Coarse classification used in logs
        http_status: Status code of the HTTP response
        details: Extra context; ``details["detail"]`` becomes the problem ``detail``
        retryable: Whether repeating the same request could succeed
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        http_status: int,
        details: Optional[dict[str, Any]] = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.http_status = http_status
        self.details = dict(details) if details else {}
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Problem Details (RFC 7807) members for this error."""
        problem: dict[str, Any] = {
            "type": f"/errors/{self.error_code}",
            "title": self.message,
            "status": self.http_status,
            "detail": self.details.get("detail"),
        }
        problem.update(
            code=self.error_code,
            category=self.category.value,
            retryable=self.retryable,
        )
        return problem


class ClientError(BaseError):
    """The request itself is wrong; repeating it unchanged cannot help."""

    def __init__(
        self,
        message: str,
        error_code: str,
        http_status: int = 400,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.CLIENT_ERROR,
            http_status=http_status,
            details=details,
            retryable=False,
        )


class ValidationError(ClientError):
    """A request member could not be interpreted (HTTP 422).

    Args:
        message: What is wrong with the value
        field: Request member at fault, in its JSON (camelCase) spelling
        details: Extra context merged into the error details
    """

    def __init__(self, message: str, field: str, details: Optional[dict[str, Any]] = None):
        merged = dict(details or {})
        merged["field"] = field
        merged.setdefault("detail", f"{field}: {message}")
        super().__init__(message, "VALIDATION_ERROR", http_status=422, details=merged)


class PayloadTooLargeError(ClientError):
    """Extracted document text is longer than the service accepts (HTTP 413)."""

    def __init__(self, max_length: int, actual_length: int):
        super().__init__(
            f"Document text too large: {actual_length} characters (max: {max_length})",
            "PAYLOAD_TOO_LARGE",
            http_status=413,
            details={"max_length": max_length, "actual_length": actual_length},
        )

