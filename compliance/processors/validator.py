"""
Document-level validation entry points.

Dispatches a document to the rule set registered for its type and returns the
outcome. Unknown types are reported as an ordinary failed outcome, never as
an exception.
"""

import logging
import time
from datetime import date, datetime

from compliance.core.config import RECENCY_WINDOW_MONTHS
from compliance.core.const import UNKNOWN_DOCUMENT_TYPE_ACTION, UNKNOWN_DOCUMENT_TYPE_MESSAGE
from compliance.core.dates import DEFAULT_TZ, as_date
from compliance.models.dto import (
    DocumentContent,
    UserFields,
    ValidationOutcome,
    ValidationReport,
)
from compliance.processors.merge_outputs import build_validation_report
from compliance.rulesets.base import evaluate
from compliance.rulesets.registry import get_ruleset

logger = logging.getLogger(__name__)


def unknown_document_type_outcome() -> ValidationOutcome:
    return ValidationOutcome(
        missing_elements=[UNKNOWN_DOCUMENT_TYPE_MESSAGE],
        suggested_actions=[UNKNOWN_DOCUMENT_TYPE_ACTION],
        detected_organization_name=None,
        failed_checks=["document_type"],
    )


def validate_document_by_type(
    document_type: str,
    content: DocumentContent,
    fields: UserFields | None = None,
    now: date | datetime | None = None,
    *,
    window_months: int = RECENCY_WINDOW_MONTHS,
    tz_name: str = DEFAULT_TZ,
) -> ValidationOutcome:
    """
    Run the rule set registered for ``document_type`` against the content.

    Args:
      document_type: One of the supported document-type tags.
      content: Extracted text and metadata of the document.
      fields: Organization name and FEIN entered by the user.
      now: Reference "now" for recency checks; defaults to today in ``tz_name``.
      window_months: Length of the recency window.
      tz_name: Timezone used to resolve "today".

    Returns:
      The validation outcome. Identical inputs always give identical outcomes.
    """
    fields = fields or UserFields()
    ruleset = get_ruleset(document_type)
    if ruleset is None:
        logger.warning(
            "Unknown document type: %r",
            document_type,
            extra={"document_type": document_type},
        )
        return unknown_document_type_outcome()

    logger.debug(
        "Dispatching to rule set %s (%d checks)",
        ruleset.document_type,
        len(ruleset.checks),
        extra={"document_type": ruleset.document_type},
    )
    return evaluate(ruleset, content, fields, as_date(now, tz_name), window_months)


def validate(
    document_type: str,
    content: DocumentContent,
    fields: UserFields | None = None,
    now: date | datetime | None = None,
    **options,
) -> ValidationOutcome:
    """Core entry point: validate one document and log a summary."""
    started = time.perf_counter()
    outcome = validate_document_by_type(document_type, content, fields, now, **options)
    logger.info(
        "Validated document: passed=%s missing=%d",
        outcome.passed,
        len(outcome.missing_elements),
        extra={
            "document_type": document_type,
            "missing_count": len(outcome.missing_elements),
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return outcome


def validate_and_report(
    document_type: str,
    content: DocumentContent,
    fields: UserFields | None = None,
    now: date | datetime | None = None,
    **options,
) -> ValidationReport:
    """Validate one document and fold the outcome into the final report."""
    outcome = validate(document_type, content, fields, now, **options)
    return build_validation_report(document_type, content, outcome)
