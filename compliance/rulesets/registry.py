"""Document-type tag to rule set lookup."""

from types import MappingProxyType
from typing import Mapping

from compliance.rulesets.authority import CERT_AUTHORITY, CERT_AUTHORITY_AUTO
from compliance.rulesets.base import RuleSet
from compliance.rulesets.corporate_records import BYLAWS, IRS_DETERMINATION, OPERATING_AGREEMENT
from compliance.rulesets.formation import (
    CERT_FORMATION,
    CERT_FORMATION_INDEPENDENT,
    CERT_INCORPORATION,
)
from compliance.rulesets.good_standing import CERT_GOOD_STANDING_LONG, CERT_GOOD_STANDING_SHORT
from compliance.rulesets.names import CERT_ALTERNATIVE_NAME, CERT_TRADE_NAME
from compliance.rulesets.tax_clearance import TAX_CLEARANCE_MANUAL, TAX_CLEARANCE_ONLINE

RULESETS: Mapping[str, RuleSet] = MappingProxyType(
    {
        ruleset.document_type: ruleset
        for ruleset in (
            TAX_CLEARANCE_ONLINE,
            TAX_CLEARANCE_MANUAL,
            CERT_ALTERNATIVE_NAME,
            CERT_TRADE_NAME,
            CERT_FORMATION,
            CERT_FORMATION_INDEPENDENT,
            CERT_GOOD_STANDING_LONG,
            CERT_GOOD_STANDING_SHORT,
            OPERATING_AGREEMENT,
            CERT_INCORPORATION,
            IRS_DETERMINATION,
            BYLAWS,
            CERT_AUTHORITY,
            CERT_AUTHORITY_AUTO,
        )
    }
)


def get_ruleset(document_type: str | None) -> RuleSet | None:
    if not isinstance(document_type, str):
        return None
    return RULESETS.get(document_type.strip())


def supported_document_types() -> list[str]:
    return list(RULESETS)
