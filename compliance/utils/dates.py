"""
Date discovery in free-form document text.

Two questions are answered independently:

* ``contains_any_date`` - is there anything date-shaped in the text at all
  (numeric, written, ordinal, or a year introduced by a cue word)?
* ``has_date_within_window`` - does any date in the text fall inside the
  recency window ending today?

Only the first few matches of each syntax are inspected (see
``compliance.core.config``) so that very large or adversarial texts stay cheap.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from itertools import islice
from typing import Iterator

from dateutil.relativedelta import relativedelta

from compliance.core.config import (
    MAX_NUMERIC_DATE_MATCHES,
    MAX_ORDINAL_DATE_MATCHES,
    MAX_PLAUSIBLE_YEAR,
    MAX_WRITTEN_DATE_MATCHES,
    MIN_DATE_TEXT_LENGTH,
    MIN_PLAUSIBLE_YEAR,
    RECENCY_WINDOW_MONTHS,
    TWO_DIGIT_YEAR_BASE,
)
from compliance.core.const import MONTH_NAMES, YEAR_CUE_WORDS
from compliance.core.dates import as_date

_MONTHS = "|".join(MONTH_NAMES)

NUMERIC_DATE_RE = re.compile(r"(?<!\d)(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4}|\d{2})(?!\d)")
WRITTEN_DATE_RE = re.compile(
    rf"\b({_MONTHS})\s+(\d{{1,2}})(?:st|nd|rd|th)?[,\s]+(\d{{4}})\b"
    rf"|\b(\d{{1,2}})(?:st|nd|rd|th)?\s+({_MONTHS})[,\s]+(\d{{4}})\b",
    re.IGNORECASE,
)
ORDINAL_DATE_RE = re.compile(
    r"\b(\d{1,2})(?:st|nd|rd|th)?\s+day\s+of\s+([a-z]+),?\s*(\d{4})\b",
    re.IGNORECASE,
)
YEAR_CUE_RE = re.compile(
    r"(?:" + "|".join(re.escape(cue) for cue in YEAR_CUE_WORDS) + r")\s*(\d{4})\b",
    re.IGNORECASE,
)
BARE_DATE_LINE_RE = re.compile(r"^\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}$")


def _expand_year(raw: str) -> int:
    year = int(raw)
    return TWO_DIGIT_YEAR_BASE + year if len(raw) == 2 else year


def _month_number(name: str) -> int | None:
    try:
        return MONTH_NAMES.index(name.lower()) + 1
    except ValueError:
        return None


def safe_date(year: int, month: int | None, day: int) -> date | None:
    """Build a calendar date, or None when the parts do not form one."""
    if month is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def iter_numeric_dates(text: str) -> Iterator[tuple[date | None, date | None]]:
    """
    Yield ``(month_first, day_first)`` interpretations of numeric dates.

    Either side is None when that reading is not a real calendar date.
    """
    for match in islice(NUMERIC_DATE_RE.finditer(text), MAX_NUMERIC_DATE_MATCHES):
        first, second = int(match.group(1)), int(match.group(2))
        year = _expand_year(match.group(3))
        yield safe_date(year, first, second), safe_date(year, second, first)


def iter_written_dates(text: str) -> Iterator[date]:
    """Yield valid dates written as "January 15, 2024" or "15th January 2024"."""
    for match in islice(WRITTEN_DATE_RE.finditer(text), MAX_WRITTEN_DATE_MATCHES):
        if match.group(1):
            month, day, year = match.group(1), match.group(2), match.group(3)
        else:
            day, month, year = match.group(4), match.group(5), match.group(6)
        parsed = safe_date(int(year), _month_number(month), int(day))
        if parsed is not None:
            yield parsed


def iter_ordinal_dates(text: str) -> Iterator[date]:
    """Yield valid dates written as "13th day of May, 2024"."""
    for match in islice(ORDINAL_DATE_RE.finditer(text), MAX_ORDINAL_DATE_MATCHES):
        parsed = safe_date(
            int(match.group(3)), _month_number(match.group(2)), int(match.group(1))
        )
        if parsed is not None:
            yield parsed


def window_start(now: date, window_months: int = RECENCY_WINDOW_MONTHS) -> date:
    """First day of the recency window, by calendar-month arithmetic."""
    return now - relativedelta(months=window_months)


def is_within_window(
    candidate: date | None, now: date, window_months: int = RECENCY_WINDOW_MONTHS
) -> bool:
    if candidate is None:
        return False
    return window_start(now, window_months) <= candidate <= now


def has_date_within_window(
    text: str | None,
    window_months: int = RECENCY_WINDOW_MONTHS,
    now: date | datetime | None = None,
) -> bool:
    """
    Whether any date in the text falls inside the recency window.

    The window is ``[now - window_months, now]``, inclusive at both ends and
    compared on calendar dates. An ambiguous numeric date passes if either its
    month-first or its day-first reading is inside the window.

    Args:
      text: Raw document text.
      window_months: Length of the window in calendar months.
      now: Reference point; defaults to today in the configured timezone.

    Returns:
      True on the first date found inside the window, otherwise False.
    """
    if not text or len(text) < MIN_DATE_TEXT_LENGTH:
        return False

    today = as_date(now)

    for month_first, day_first in iter_numeric_dates(text):
        if is_within_window(month_first, today, window_months) or is_within_window(
            day_first, today, window_months
        ):
            return True

    for parsed in iter_written_dates(text):
        if is_within_window(parsed, today, window_months):
            return True

    for parsed in iter_ordinal_dates(text):
        if is_within_window(parsed, today, window_months):
            return True

    return False


def _numeric_date_plausible(match: re.Match[str]) -> bool:
    first, second = int(match.group(1)), int(match.group(2))
    year = _expand_year(match.group(3))
    return (
        MIN_PLAUSIBLE_YEAR <= year <= MAX_PLAUSIBLE_YEAR
        and 1 <= first <= 31
        and 1 <= second <= 31
    )


def contains_any_date(text: str | None) -> bool:
    """
    Whether the text contains anything date-shaped.

    Numeric candidates only need plausible parts, not a real calendar date.
    A bare four-digit year counts only after a cue word such as "adopted" or
    "copyright".
    """
    if not text or len(text) < MIN_DATE_TEXT_LENGTH:
        return False

    numeric = islice(NUMERIC_DATE_RE.finditer(text), MAX_NUMERIC_DATE_MATCHES)
    if any(_numeric_date_plausible(match) for match in numeric):
        return True

    if WRITTEN_DATE_RE.search(text) or ORDINAL_DATE_RE.search(text):
        return True

    return YEAR_CUE_RE.search(text) is not None


def is_bare_date(line: str) -> bool:
    return BARE_DATE_LINE_RE.match(line.strip()) is not None
