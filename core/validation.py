"""Application startup validation checks.

Validates settings before the application starts serving requests, so a
misconfigured deployment fails at boot instead of on the first request.
"""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def validate_all_settings() -> None:
    """Validate all critical settings at application startup.

    Raises:
        RuntimeError: If any setting is invalid
    """
    from compliance.rulesets.registry import supported_document_types
    from core.settings import app_settings, validation_settings

    problems = []

    if app_settings.LOG_LEVEL.upper() not in _LOG_LEVELS:
        problems.append(f"  - LOG_LEVEL={app_settings.LOG_LEVEL} (expected one of {sorted(_LOG_LEVELS)})")

    try:
        ZoneInfo(app_settings.COMPLIANCE_TZ)
    except (ZoneInfoNotFoundError, ValueError):
        problems.append(f"  - COMPLIANCE_TZ={app_settings.COMPLIANCE_TZ} (unknown IANA timezone)")

    if validation_settings.RECENCY_WINDOW_MONTHS < 1:
        problems.append(
            f"  - RECENCY_WINDOW_MONTHS={validation_settings.RECENCY_WINDOW_MONTHS} (must be >= 1)"
        )

    if validation_settings.DEFAULT_DOCUMENT_TYPE not in supported_document_types():
        problems.append(
            f"  - DEFAULT_DOCUMENT_TYPE={validation_settings.DEFAULT_DOCUMENT_TYPE} "
            "(not a supported document type)"
        )

    if validation_settings.MAX_TEXT_LENGTH < 1:
        problems.append(f"  - MAX_TEXT_LENGTH={validation_settings.MAX_TEXT_LENGTH} (must be >= 1)")

    if problems:
        error_msg = "Invalid configuration:\n" + "\n".join(problems)
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    logger.info("All settings validated successfully")
    logger.info(f"  - Timezone: {app_settings.COMPLIANCE_TZ}")
    logger.info(f"  - Recency window: {validation_settings.RECENCY_WINDOW_MONTHS} months")
    logger.info(f"  - Document types: {len(supported_document_types())}")
