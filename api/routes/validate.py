"""Document compliance validation endpoints."""

import logging
import time

from fastapi import APIRouter, Request

from api.mappers import build_document_types_response, build_validate_response
from api.schemas import DocumentTypesResponse, ProblemDetail, ValidateRequest, ValidateResponse
from compliance.models.dto import UserFields
from compliance.processors.filter_analysis_result import parse_analysis_result
from compliance.processors.validator import validate_and_report
from core.logging_utils import sanitize_fein, sanitize_org_name
from core.settings import app_settings, validation_settings
from core.utils import ensure_trace_id

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/v1/validate",
    response_model=ValidateResponse,
    tags=["validation"],
    responses={
        413: {"description": "Extracted text too large", "model": ProblemDetail},
        422: {"description": "Validation Error", "model": ProblemDetail},
    },
)
def validate_document(request: Request, payload: ValidateRequest):
    start_time = time.time()
    trace_id = ensure_trace_id(request)
    document_type = payload.document_type or validation_settings.DEFAULT_DOCUMENT_TYPE

    logger.info(
        "[NEW REQUEST] type=%s org=%s fein=%s",
        document_type,
        sanitize_org_name(payload.organization_name),
        sanitize_fein(payload.fein),
        extra={"trace_id": trace_id, "document_type": document_type},
    )

    content = parse_analysis_result(
        payload.analysis_result, max_text_length=validation_settings.MAX_TEXT_LENGTH
    )
    fields = UserFields(organization_name=payload.organization_name, fein=payload.fein)

    report = validate_and_report(
        document_type,
        content,
        fields,
        window_months=validation_settings.RECENCY_WINDOW_MONTHS,
        tz_name=app_settings.COMPLIANCE_TZ,
    )

    response = build_validate_response(
        report,
        processing_time=time.time() - start_time,
        trace_id=trace_id,
    )

    logger.info(
        "[RESPONSE] success=%s missing=%d name_matches=%s time=%.3fs",
        response.success,
        len(response.missing_elements),
        response.organization_name_matches,
        response.processing_time_seconds,
        extra={
            "trace_id": trace_id,
            "document_type": document_type,
            "missing_count": len(response.missing_elements),
        },
    )
    return response


@router.get(
    "/v1/document-types",
    response_model=DocumentTypesResponse,
    tags=["validation"],
)
def list_document_types():
    return build_document_types_response()
