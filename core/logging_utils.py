"""Masking helpers for values that identify a taxpayer.

Request logs carry only these masked forms of the organization name and
FEIN, never the raw values.
"""

_MASK = "***"


def sanitize_org_name(name: str | None) -> str:
    """Keep two characters at each end of the name, e.g. ``Ac***LC``.

    Names shorter than four characters are masked entirely.
    """
    stripped = (name or "").strip()
    if len(stripped) < 4:
        return _MASK
    return f"{stripped[:2]}{_MASK}{stripped[-2:]}"


def sanitize_fein(fein: str | None) -> str:
    """Keep the last three digits, e.g. ``***789``."""
    digits = "".join(ch for ch in (fein or "") if ch.isdigit())
    if len(digits) < 5:
        return _MASK
    return f"{_MASK}{digits[-3:]}"
