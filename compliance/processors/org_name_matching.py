from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from rapidfuzz import fuzz

from compliance.core.const import (
    COMPATIBLE_ENTITY_TYPES,
    ENTITY_ABBREVIATIONS,
    ENTITY_TYPES,
)
from compliance.processors.org_name_matching_strategies import (
    build_no_match_result,
    try_containment_match,
    try_core_name_match,
    try_exact_match,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrgName:
    normalized: str
    entity_type: str | None
    core: str


_PUNCT_RE = re.compile(r"[,.]")
_WS_RE = re.compile(r"\s+")
_ABBREVIATION_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"\b{abbr}\.?(?=\s|$|[,;])"), full)
    for abbr, full in ENTITY_ABBREVIATIONS.items()
)
_ENTITY_SUFFIX_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"(?:^|\s){re.escape(entity)}$"), entity) for entity in ENTITY_TYPES
)


def normalize_org_name(name: str | None) -> str:
    """Canonical comparison form of an organization name.

    Lowercases, drops commas and periods, collapses whitespace and expands
    legal-entity abbreviations ("Acme, LLC." -> "acme limited liability company").
    Abbreviations are only expanded as whole tokens, so "Coast" stays "coast".
    """
    if not name or not isinstance(name, str):
        return ""
    text = _PUNCT_RE.sub("", name.lower())
    text = _WS_RE.sub(" ", text).strip()
    for pattern, full in _ABBREVIATION_PATTERNS:
        text = pattern.sub(full, text)
    return text


def detect_entity_type(normalized: str) -> str | None:
    """Longest canonical entity type the normalized name ends with."""
    for pattern, entity in _ENTITY_SUFFIX_PATTERNS:
        if pattern.search(normalized):
            return entity
    return None


def strip_entity_suffix(normalized: str, entity_type: str | None) -> str:
    if not entity_type:
        return normalized
    return normalized[: -len(entity_type)].strip()


def parse_org_name(raw: str | None) -> OrgName:
    normalized = normalize_org_name(raw)
    entity_type = detect_entity_type(normalized)
    return OrgName(
        normalized=normalized,
        entity_type=entity_type,
        core=strip_entity_suffix(normalized, entity_type),
    )


def entity_types_compatible(a: str | None, b: str | None) -> bool:
    """Whether two entity types may belong to the same organization.

    A missing type is compatible with anything (partial names such as "Acme").
    """
    if a is None or b is None or a == b:
        return True
    return frozenset({a, b}) in COMPATIBLE_ENTITY_TYPES


def similarity_score(a: str, b: str) -> float:
    """Token-order-insensitive similarity in [0, 100]. Used for audit logs only."""
    if not a or not b:
        return 0.0
    return float(fuzz.token_sort_ratio(a, b))


def org_name_match_with_diagnostics(
    user_name: str | None,
    doc_name: str | None,
) -> tuple[bool, dict[str, object]]:
    """Match organization names using the strategy chain.

    Strategies are tried in order (exact, containment, core name); the first
    one that accepts wins. The fuzzy score in the diagnostics never affects the
    decision.

    Args:
        user_name: Name entered by the user
        doc_name: Name located on the document

    Returns:
        (matched, diagnostics) where diagnostics names the deciding strategy
        and carries both normalized forms for logging.
    """
    user = parse_org_name(user_name)
    doc = parse_org_name(doc_name)

    diagnostics: dict[str, object] = {
        "user_normalized": user.normalized,
        "doc_normalized": doc.normalized,
        "user_entity_type": user.entity_type,
        "doc_entity_type": doc.entity_type,
        "fuzzy_score": similarity_score(user.normalized, doc.normalized),
    }

    if not user.normalized or not doc.normalized:
        return False, {**diagnostics, "reason": "empty_name"}

    strategies = [
        lambda: try_exact_match(user, doc),
        lambda: try_containment_match(user, doc),
        lambda: try_core_name_match(user, doc),
    ]

    for strategy in strategies:
        result = strategy()
        if result is not None:
            matched, meta = result
            return matched, {**diagnostics, **meta}

    return build_no_match_result(user, doc, diagnostics)


def org_name_match(user_name: str | None, doc_name: str | None) -> bool:
    matched, _ = org_name_match_with_diagnostics(user_name, doc_name)
    return matched
