"""Environment-driven settings, read once when this module is imported.

Values come from the process environment or a ``.env`` file next to the
service. Names are case-sensitive; unknown variables are ignored.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from compliance.core.config import MAX_TEXT_LENGTH, RECENCY_WINDOW_MONTHS
from compliance.core.const import DEFAULT_DOCUMENT_TYPE

_ENV = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")


class AppSettings(BaseSettings):
    """Process-level knobs: logging, clock and mount point."""

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    # IANA zone used for "today" when the caller gives no reference time
    COMPLIANCE_TZ: str = "America/New_York"
    APP_ROOT_PATH: str = ""

    model_config = _ENV


class ValidationSettings(BaseSettings):
    RECENCY_WINDOW_MONTHS: int = RECENCY_WINDOW_MONTHS
    DEFAULT_DOCUMENT_TYPE: str = DEFAULT_DOCUMENT_TYPE
    MAX_TEXT_LENGTH: int = MAX_TEXT_LENGTH

    model_config = _ENV


app_settings = AppSettings()
validation_settings = ValidationSettings()
