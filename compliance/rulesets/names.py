"""Alternate name and trade name certificates."""

from compliance.processors.field_locator import phrase_exclusion
from compliance.rulesets.base import Check, RuleSet, build_locator, phrase

ALTERNATE_NAME_TITLES = (
    "certificate of alternate name",
    "certificate of renewal of alternate name",
    "registration of alternate name",
)

CERT_ALTERNATIVE_NAME = RuleSet(
    document_type="cert-alternative-name",
    description="Certificate of Alternate Name (Division of Revenue)",
    locate_name=build_locator(
        anchors=(
            "certificate of alternate name",
            "certificate of renewal of alternate name",
            "name of corporation/business:",
        ),
        direction="after",
        exclusions=(
            phrase_exclusion(
                "state of",
                "department of",
                "division of",
                "new jersey",
                "treasury",
                "revenue",
            ),
        ),
        use_key_values=False,
    ),
    echo_detected_name=True,
    checks=(
        Check(
            "alternate_name_title",
            phrase(*ALTERNATE_NAME_TITLES),
            "Required keyword: 'Certificate of Alternate Name'",
        ),
        Check(
            "division_of_revenue",
            phrase("division of revenue"),
            "Required keyword: 'Division of Revenue'",
            "Verify document has been issued by the Division of Revenue",
        ),
        Check(
            "treasury_date_stamp",
            phrase("state treasurer", "great seal", "seal at trenton"),
            "Date stamp by Department of Treasury is missing",
            "Verify document has been properly stamped by the Department of Treasury",
        ),
    ),
)


CERT_TRADE_NAME = RuleSet(
    document_type="cert-trade-name",
    description="Certificate of Trade Name",
    checks=(
        Check(
            "trade_name_title",
            phrase("certificate of trade name"),
            "Required keyword: 'Certificate of Trade Name'",
            "Verify that the document is a Certificate of Trade Name",
        ),
    ),
)
