"""Locate short name-like values printed near known anchor phrases.

Certificates rarely label the organization name. Instead it sits a line or
two above or below a fixed title such as "CLEARANCE CERTIFICATE". The helpers
here find that line, and fall back to the key/value pairs produced by the
document-analysis service when the text layout gives nothing usable.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Literal, Sequence

from compliance.core.config import (
    MAX_ANCHOR_LINES,
    MIN_CANDIDATE_LINE_LENGTH,
    MIN_UPPERCASE_NAME_LENGTH,
)
from compliance.core.const import IDENTIFIER_LABELS, NAME_LABEL_SYNONYMS
from compliance.models.dto import DocumentContent, KeyValuePair
from compliance.utils.dates import is_bare_date
from compliance.utils.text import first_phrase_position, split_lines

logger = logging.getLogger(__name__)

Direction = Literal["before", "after"]
Exclusion = Callable[[str], bool]

ENTITY_SUFFIX_RE = re.compile(r"\b(?:LLC|INC|CORP|CORPORATION|COMPANY|LP|LLP)\b", re.IGNORECASE)
APPLICANT_ID_RE = re.compile(r"applicant\s+id[#:]?\s*:?\s*(.*?)$", re.IGNORECASE | re.MULTILINE)
APPLICANT_ID_LABELS = ("applicant id", "id #")

LABELED_NAME_PATTERNS = (
    re.compile(r"name:\s*([^\r\n]+)", re.IGNORECASE),
    re.compile(r"name of domestic corporation:\s*([^\r\n]+)", re.IGNORECASE),
    re.compile(r"the name of the limited liability company is\s*([^\r\n]+)", re.IGNORECASE),
    re.compile(r"above-named\s+([^\r\n]+?)\s+was\b", re.IGNORECASE),
)


def phrase_exclusion(*phrases: str) -> Exclusion:
    """Exclude lines containing any of the phrases (case-insensitive)."""
    lowered = tuple(p.lower() for p in phrases)

    def _excluded(line: str) -> bool:
        line_lower = line.lower()
        return any(p in line_lower for p in lowered)

    return _excluded


def pattern_exclusion(pattern: str, flags: int = re.IGNORECASE) -> Exclusion:
    """Exclude lines matching the regex."""
    compiled = re.compile(pattern, flags)
    return lambda line: compiled.search(line) is not None


def is_high_confidence_name(line: str) -> bool:
    """All-caps lines and lines carrying a legal-entity suffix are almost always the name."""
    if line.isupper() and len(line) >= MIN_UPPERCASE_NAME_LENGTH:
        return True
    return ENTITY_SUFFIX_RE.search(line) is not None


def _is_candidate(line: str, exclusions: Sequence[Exclusion]) -> bool:
    if len(line) < MIN_CANDIDATE_LINE_LENGTH or is_bare_date(line):
        return False
    return not any(excluded(line) for excluded in exclusions)


def _anchor_offsets(raw_text: str, lower_text: str, anchor: str, index: int) -> tuple[int, int]:
    # lower() can change the length of some non-ASCII characters
    if len(raw_text) == len(lower_text):
        return index, index + len(anchor)
    match = re.search(re.escape(anchor), raw_text, re.IGNORECASE)
    if match is None:
        return index, index + len(anchor)
    return match.start(), match.end()


def _window(raw_text: str, start: int, end: int, direction: Direction, max_lines: int) -> list[str]:
    """Non-empty lines nearest the anchor, in reading order."""
    if direction == "before":
        line_start = raw_text.rfind("\n", 0, start) + 1
        lines = split_lines(raw_text[:line_start])
        non_empty = [line for line in lines if line]
        return non_empty[-max_lines:] if max_lines > 0 else []

    lines = split_lines(raw_text[end:])
    return [line for line in lines if line][:max_lines]


def find_value_in_key_values(
    key_value_pairs: Iterable[KeyValuePair],
    labels: Sequence[str] = NAME_LABEL_SYNONYMS,
    skip_labels: Sequence[str] = IDENTIFIER_LABELS,
) -> str | None:
    """Value of the first pair whose key contains a label, labels tried in priority order."""
    pairs = [
        pair
        for pair in key_value_pairs
        if pair.value is not None and pair.value.content.strip()
    ]
    for label in labels:
        for pair in pairs:
            key = pair.key.content.lower()
            if label in key and not any(skip in key for skip in skip_labels):
                return pair.value.content.strip()
    return None


def find_value_near_anchor(
    text: str,
    anchors: Sequence[str],
    direction: Direction,
    max_lines: int = MAX_ANCHOR_LINES,
    exclusions: Sequence[Exclusion] = (),
    *,
    lower_text: str | None = None,
    key_value_pairs: Iterable[KeyValuePair] = (),
    kv_labels: Sequence[str] | None = NAME_LABEL_SYNONYMS,
) -> str | None:
    """Find a name-like line next to the first anchor phrase present in the text.

    Up to ``max_lines`` non-empty lines on the requested side of the anchor are
    scanned in reading order. Lines that are too short, bare dates or matched by
    an exclusion are skipped. The first high-confidence line (all caps, or a
    legal-entity suffix) is returned at once; otherwise the surviving line
    nearest the anchor is kept as a low-confidence answer.

    Args:
        text: Raw document text (case preserved)
        anchors: Anchor phrases in priority order, lowercase
        direction: Whether the value sits "before" or "after" the anchor
        max_lines: Number of non-empty lines to inspect
        exclusions: Predicates rejecting boilerplate lines
        lower_text: Precomputed ``text.lower()``
        key_value_pairs: Pairs scanned when the text yields nothing
        kv_labels: Key labels for the fallback, or None to disable it

    Returns:
        The located value, or None
    """
    text = text or ""
    lower_text = lower_text if lower_text is not None else text.lower()

    found = first_phrase_position(lower_text, anchors)
    if found is not None:
        anchor, index = found
        start, end = _anchor_offsets(text, lower_text, anchor, index)

        fallback = None
        for line in _window(text, start, end, direction, max_lines):
            if not _is_candidate(line, exclusions):
                continue
            if is_high_confidence_name(line):
                return line
            if fallback is None or direction == "before":
                fallback = line

        if fallback is not None:
            return fallback

    if kv_labels:
        value = find_value_in_key_values(key_value_pairs, kv_labels)
        if value is not None:
            logger.debug("Name located via key-value fallback (anchor_found=%s)", found is not None)
        return value
    return None


def extract_applicant_id(content: DocumentContent) -> str | None:
    """Applicant ID printed on a tax clearance certificate, if any."""
    match = APPLICANT_ID_RE.search(content.raw_text)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return find_value_in_key_values(
        content.key_value_pairs, APPLICANT_ID_LABELS, skip_labels=()
    )


def extract_labeled_name(content: DocumentContent) -> str | None:
    """Entity name introduced by a label such as "Name:" or "The above-named ... was"."""
    for pattern in LABELED_NAME_PATTERNS:
        match = pattern.search(content.raw_text)
        if match and match.group(1).strip():
            return match.group(1).strip()

    for pair in content.key_value_pairs:
        if pair.key.content.lower().strip() == "name:" and pair.value is not None:
            value = pair.value.content.strip()
            if value:
                return value
    return None
