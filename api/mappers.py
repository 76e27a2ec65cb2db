from api.schemas import DocumentTypeItem, DocumentTypesResponse, ValidateResponse
from compliance.core.const import DOCUMENT_TYPE_LABELS
from compliance.models.dto import ValidationReport
from compliance.rulesets.registry import supported_document_types


def build_validate_response(
    report: ValidationReport,
    processing_time: float,
    trace_id: str | None = None,
) -> ValidateResponse:
    """Attach request bookkeeping to a validation report. Pure transformation."""
    return ValidateResponse(
        **report.model_dump(),
        trace_id=trace_id,
        processing_time_seconds=round(processing_time, 4),
    )


def build_document_types_response() -> DocumentTypesResponse:
    return DocumentTypesResponse(
        document_types=[
            DocumentTypeItem(value=tag, label=DOCUMENT_TYPE_LABELS.get(tag, tag))
            for tag in supported_document_types()
        ]
    )
