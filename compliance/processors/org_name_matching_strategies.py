"""Organization name matching strategies.

Each strategy attempts one kind of match and returns ``(True, metadata)`` on
success or None to hand over to the next strategy.
"""

from typing import Optional, Tuple

from compliance.core.config import MIN_CORE_NAME_LENGTH


def try_exact_match(user: "OrgName", doc: "OrgName") -> Optional[Tuple[bool, dict]]:
    """Strategy 1: normalized forms are identical.

    Covers abbreviation variance ("Acme LLC" vs "Acme Limited Liability
    Company") since both sides are already expanded.
    """
    if user.normalized == doc.normalized:
        return True, {"matched_strategy": "exact"}
    return None


def try_containment_match(
    user: "OrgName", doc: "OrgName"
) -> Optional[Tuple[bool, dict]]:
    """Strategy 2: one normalized name contains the other.

    Accepts partial names ("Acme" inside "Acme Holdings LLC") as long as the
    entity types on both sides are compatible.

    Args:
        user: Parsed user-entered name
        doc: Parsed document name

    Returns:
        (True, metadata) if matched, None if not matched
    """
    from compliance.processors.org_name_matching import entity_types_compatible

    if user.normalized not in doc.normalized and doc.normalized not in user.normalized:
        return None

    if not entity_types_compatible(user.entity_type, doc.entity_type):
        return None

    return True, {"matched_strategy": "containment"}


def try_core_name_match(
    user: "OrgName", doc: "OrgName"
) -> Optional[Tuple[bool, dict]]:
    """Strategy 3: names agree once the entity suffix is removed.

    Handles "Acme Corp" vs "Acme Incorporated". Both cores must be at least
    ``MIN_CORE_NAME_LENGTH`` characters so that very short names do not
    collapse onto each other.

    Args:
        user: Parsed user-entered name
        doc: Parsed document name

    Returns:
        (True, metadata) if matched, None if not matched
    """
    from compliance.processors.org_name_matching import entity_types_compatible

    if len(user.core) < MIN_CORE_NAME_LENGTH or len(doc.core) < MIN_CORE_NAME_LENGTH:
        return None

    if user.core != doc.core:
        return None

    if not entity_types_compatible(user.entity_type, doc.entity_type):
        return None

    return True, {"matched_strategy": "core_name", "core": user.core}


def build_no_match_result(
    user: "OrgName", doc: "OrgName", diagnostics: dict
) -> Tuple[bool, dict]:
    """Final no-match result with the reason that blocked the match."""
    from compliance.processors.org_name_matching import entity_types_compatible

    if user.core == doc.core and not entity_types_compatible(
        user.entity_type, doc.entity_type
    ):
        reason = "entity_type_conflict"
    else:
        reason = "no_strategy_matched"

    return False, {**diagnostics, "matched_strategy": None, "reason": reason}
