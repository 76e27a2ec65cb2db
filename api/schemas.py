"""Request and response bodies of the HTTP API."""

import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from compliance.core.config import FEIN_MAX_LENGTH, ORG_NAME_MAX_LENGTH
from compliance.models.dto import ValidationReport

_FEIN_RE = re.compile(r"^[0-9\- ]+$")


class ProblemDetail(BaseModel):
    """Error body in the RFC 7807 ``application/problem+json`` shape.

    ``code``, ``category``, ``retryable`` and ``trace_id`` are extension members.
    """

    type: str = Field(..., description="Problem type, e.g. /errors/PAYLOAD_TOO_LARGE")
    title: str = Field(..., description="One-line summary")
    status: int = Field(..., description="HTTP status of the response")
    detail: Optional[str] = Field(None, description="What went wrong with this request")
    instance: Optional[str] = Field(None, description="Request path")

    code: str = Field(..., description="Stable error code")
    category: str = Field(..., description="client_error or server_error")
    retryable: bool = Field(default=False, description="True if resending may succeed")
    trace_id: Optional[str] = Field(None, description="Same value as the X-Trace-ID header")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "/errors/VALIDATION_ERROR",
                "title": "Request validation failed",
                "status": 422,
                "detail": "fein: FEIN may only contain digits and dashes",
                "instance": "/v1/validate",
                "code": "VALIDATION_ERROR",
                "category": "client_error",
                "retryable": False,
                "trace_id": "5f0c9e8a2b7d4c1e9a3f6b8d0e2c4a61",
            }
        }
    )


class ValidateRequest(BaseModel):
    """Document analysis result plus the values the user entered.

    ``documentType`` is not restricted here: an unsupported type is reported
    in the validation result rather than rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "documentType": "tax-clearance-online",
                "organizationName": "Acme Widgets LLC",
                "fein": "12-3456789",
                "analysisResult": {
                    "content": "STATE OF NEW JERSEY\nACME WIDGETS LLC\n"
                    "BUSINESS ASSISTANCE OR INCENTIVE\nCLEARANCE CERTIFICATE",
                    "pages": [{"pageNumber": 1, "words": []}],
                    "keyValuePairs": [],
                    "styles": [],
                    "languages": [{"locale": "en", "confidence": 1.0}],
                },
            }
        },
    )

    document_type: Optional[str] = Field(
        default=None, description="Document type tag; the configured default when omitted"
    )
    analysis_result: dict[str, Any] = Field(
        ..., description="Raw result returned by the document-analysis service"
    )
    organization_name: Optional[str] = Field(
        default=None,
        max_length=ORG_NAME_MAX_LENGTH,
        description="Organization name entered by the user",
    )
    fein: Optional[str] = Field(
        default=None,
        max_length=FEIN_MAX_LENGTH,
        description="Federal Employer Identification Number",
    )

    @field_validator("organization_name", "fein", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator("fein")
    @classmethod
    def validate_fein(cls, fein: Optional[str]) -> Optional[str]:
        if fein is not None and not _FEIN_RE.match(fein):
            raise ValueError("FEIN may only contain digits and dashes")
        return fein


class ValidateResponse(ValidationReport):
    """Validation report plus request bookkeeping."""

    trace_id: Optional[str] = None
    processing_time_seconds: float = 0.0


class DocumentTypeItem(BaseModel):
    value: str
    label: str


class DocumentTypesResponse(BaseModel):
    document_types: List[DocumentTypeItem]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
