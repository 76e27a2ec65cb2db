"""Declarative rule-set model.

A rule set is a table: an optional organization-name locator followed by an
ordered tuple of checks. Changing what a document type requires means editing
its table, not its control flow.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Optional, Sequence

from compliance.core.config import MAX_ANCHOR_LINES, RECENCY_WINDOW_MONTHS
from compliance.core.const import (
    NAME_LABEL_SYNONYMS,
    NAME_MISMATCH_ACTION,
    NAME_MISMATCH_MESSAGE,
)
from compliance.models.dto import DocumentContent, UserFields, ValidationOutcome
from compliance.processors.field_locator import (
    Direction,
    Exclusion,
    extract_applicant_id,
    find_value_near_anchor,
)
from compliance.processors.org_name_matching import org_name_match_with_diagnostics
from compliance.utils.dates import contains_any_date, has_date_within_window
from compliance.utils.text import PatternLike, compile_pattern, contains_all, contains_any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Everything a check predicate may look at."""

    content: DocumentContent
    fields: UserFields
    today: date
    detected_name: Optional[str] = None
    window_months: int = RECENCY_WINDOW_MONTHS

    @property
    def raw_text(self) -> str:
        return self.content.raw_text

    @property
    def lower_text(self) -> str:
        return self.content.lower_text


Predicate = Callable[[RuleContext], bool]
NameLocator = Callable[[DocumentContent], Optional[str]]


class CheckKind(str, Enum):
    REQUIRE = "require"  # fails when the predicate is false
    REJECT = "reject"  # fails when the predicate is true


@dataclass(frozen=True)
class Check:
    check_id: str
    predicate: Predicate
    failure_message: str
    suggested_action: Optional[str] = None
    kind: CheckKind = CheckKind.REQUIRE

    def fails(self, ctx: RuleContext) -> bool:
        present = bool(self.predicate(ctx))
        return not present if self.kind is CheckKind.REQUIRE else present


@dataclass(frozen=True)
class AnchorNameLocator:
    """Organization name printed next to one of a set of anchor phrases."""

    anchors: tuple[str, ...]
    direction: Direction
    exclusions: tuple[Exclusion, ...] = ()
    max_lines: int = MAX_ANCHOR_LINES
    use_key_values: bool = True

    def __call__(self, content: DocumentContent) -> Optional[str]:
        return find_value_near_anchor(
            content.raw_text,
            self.anchors,
            self.direction,
            self.max_lines,
            self.exclusions,
            lower_text=content.lower_text,
            key_value_pairs=content.key_value_pairs,
            kv_labels=NAME_LABEL_SYNONYMS if self.use_key_values else None,
        )


@dataclass(frozen=True)
class RuleSet:
    document_type: str
    checks: tuple[Check, ...]
    locate_name: Optional[NameLocator] = None
    echo_detected_name: bool = False
    description: str = ""

    @property
    def require_count(self) -> int:
        return sum(1 for check in self.checks if check.kind is CheckKind.REQUIRE)

    def check_ids(self) -> list[str]:
        return [check.check_id for check in self.checks]


# ---------------------------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------------------------


def phrase(*phrases: str) -> Predicate:
    """Any of the phrases appears (case-insensitive)."""
    lowered = tuple(p.lower() for p in phrases)
    return lambda ctx: contains_any(ctx.lower_text, lowered)


def all_phrases(*phrases: str) -> Predicate:
    lowered = tuple(p.lower() for p in phrases)
    return lambda ctx: contains_all(ctx.lower_text, lowered)


def pattern(regex: PatternLike, flags: int = re.IGNORECASE) -> Predicate:
    compiled = compile_pattern(regex, flags)
    return lambda ctx: compiled.search(ctx.raw_text) is not None


def any_of(*predicates: Predicate) -> Predicate:
    return lambda ctx: any(p(ctx) for p in predicates)


def date_within_window() -> Predicate:
    return lambda ctx: has_date_within_window(ctx.raw_text, ctx.window_months, ctx.today)


def any_date() -> Predicate:
    return lambda ctx: contains_any_date(ctx.raw_text)


def detected_name_present() -> Predicate:
    return lambda ctx: bool(ctx.detected_name)


def key_label_present(*labels: str) -> Predicate:
    lowered = tuple(label.lower() for label in labels)
    return lambda ctx: any(
        contains_any(pair.key.content.lower(), lowered)
        for pair in ctx.content.key_value_pairs
    )


def fein_mismatches_applicant_id() -> Predicate:
    """True only when both a FEIN and an applicant ID exist and disagree.

    The last three characters of the FEIN must appear in the applicant ID.
    A FEIN shorter than three characters or a missing applicant ID makes the
    check not applicable.
    """

    def _mismatch(ctx: RuleContext) -> bool:
        fein = (ctx.fields.fein or "").strip()
        if len(fein) < 3:
            return False
        applicant_id = extract_applicant_id(ctx.content)
        if not applicant_id:
            return False
        return fein[-3:] not in applicant_id

    return _mismatch


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def _name_mismatch_action(ruleset: RuleSet, detected_name: str) -> str:
    if ruleset.echo_detected_name:
        return f'{NAME_MISMATCH_ACTION}. Certificate shows: "{detected_name}"'
    return NAME_MISMATCH_ACTION


def evaluate(
    ruleset: RuleSet,
    content: DocumentContent,
    fields: UserFields,
    today: date,
    window_months: int = RECENCY_WINDOW_MONTHS,
) -> ValidationOutcome:
    """Run a rule set against one document.

    Name reconciliation comes first, then the checks in table order. Missing
    optional data (no detected name, no FEIN, no key-value pairs) makes the
    related check not applicable; nothing here raises for absent input.
    """
    detected_name = ruleset.locate_name(content) if ruleset.locate_name else None
    ctx = RuleContext(
        content=content,
        fields=fields,
        today=today,
        detected_name=detected_name,
        window_months=window_months,
    )

    missing: list[str] = []
    actions: list[str] = []
    failed: list[str] = []

    user_name = (fields.organization_name or "").strip()
    if user_name and detected_name:
        matched, diagnostics = org_name_match_with_diagnostics(user_name, detected_name)
        if not matched:
            logger.debug(
                "Organization name mismatch: strategy=%s reason=%s score=%.1f",
                diagnostics.get("matched_strategy"),
                diagnostics.get("reason"),
                diagnostics.get("fuzzy_score", 0.0),
                extra={"document_type": ruleset.document_type},
            )
            missing.append(NAME_MISMATCH_MESSAGE)
            actions.append(_name_mismatch_action(ruleset, detected_name))
            failed.append("organization_name")

    for check in ruleset.checks:
        if check.fails(ctx):
            missing.append(check.failure_message)
            if check.suggested_action:
                actions.append(check.suggested_action)
            failed.append(check.check_id)

    return ValidationOutcome(
        missing_elements=missing,
        suggested_actions=actions,
        detected_organization_name=detected_name,
        failed_checks=failed,
    )


def build_locator(
    anchors: Sequence[str],
    direction: Direction,
    exclusions: Sequence[Exclusion] = (),
    *,
    use_key_values: bool = True,
) -> AnchorNameLocator:
    return AnchorNameLocator(
        anchors=tuple(a.lower() for a in anchors),
        direction=direction,
        exclusions=tuple(exclusions),
        use_key_values=use_key_values,
    )
