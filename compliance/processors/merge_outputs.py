from compliance.core.const import NAME_MISMATCH_MARKER
from compliance.models.dto import (
    DocumentContent,
    DocumentInfo,
    ValidationOutcome,
    ValidationReport,
)


def organization_name_matches(outcome: ValidationOutcome) -> bool:
    """
    Derived flag: False only when a missing element reports a name mismatch.
    """
    return not any(NAME_MISMATCH_MARKER in element for element in outcome.missing_elements)


def build_document_info(
    document_type: str,
    content: DocumentContent,
    outcome: ValidationOutcome,
) -> DocumentInfo:
    return DocumentInfo(
        page_count=content.page_count,
        word_count=content.word_count,
        language_info=list(content.languages),
        contains_handwriting=content.contains_handwriting,
        document_type=document_type,
        detected_organization_name=outcome.detected_organization_name,
    )


def build_validation_report(
    document_type: str,
    content: DocumentContent,
    outcome: ValidationOutcome,
) -> ValidationReport:
    """
    Combine a rule-set outcome with the analysis metadata into the final report.
    - success: no missing elements
    - document_info: page/word counts, languages and handwriting from the analysis
    - organization_name_matches: derived from the missing elements
    """
    return ValidationReport(
        success=outcome.passed,
        missing_elements=list(outcome.missing_elements),
        suggested_actions=list(outcome.suggested_actions),
        document_info=build_document_info(document_type, content, outcome),
        organization_name_matches=organization_name_matches(outcome),
    )
