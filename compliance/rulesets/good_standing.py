"""Certificates of Good Standing (long and short form)."""

from compliance.rulesets.base import Check, RuleSet, all_phrases, build_locator, pattern, phrase

ACTIVE_GOOD_STANDING = Check(
    "active_good_standing",
    all_phrases("good standing", "active"),
    "Active and good standing status",
    "Verify entity is active and in good standing with the State of NJ",
)
TREASURY_REFERENCE = Check(
    "treasury_reference",
    phrase(
        "department of treasury",
        "department of the treasury",
        "dept. of treasury",
        "dept of treasury",
        "treasurer of the state",
    ),
    "Department of Treasury reference",
    "Verify certificate is issued by NJ Department of Treasury",
)
REVENUE_DIVISION = Check(
    "revenue_enterprise_services",
    phrase(
        "division of revenue & enterprise services",
        "division of revenue and enterprise services",
    ),
    "Division of Revenue & Enterprise Services",
    "Verify certificate mentions Division of Revenue & Enterprise Services",
)
STATE_SEAL = Check(
    "state_seal",
    phrase("official seal", "seal at trenton", "great seal", "testimony whereof"),
    "State seal",
    "Verify the certificate has the State seal affixed",
)
TREASURER_SIGNATURE = Check(
    "treasurer_signature",
    phrase("state treasurer", "treasurer of the state"),
    "State Treasurer signature",
    "Verify the certificate is signed by the State Treasurer",
)


CERT_GOOD_STANDING_LONG = RuleSet(
    document_type="cert-good-standing-long",
    description="Long Form Standing with Officers and Directors",
    locate_name=build_locator(
        anchors=("long form standing with officers and directors",),
        direction="after",
        use_key_values=False,
    ),
    checks=(
        Check(
            "long_form_title",
            phrase("long form standing", "long form certificate", "with officers and directors"),
            "Long Form Standing declaration",
            "Verify this is a Long Form Certificate of Good Standing with Officers and Directors",
        ),
        ACTIVE_GOOD_STANDING,
        TREASURY_REFERENCE,
        REVENUE_DIVISION,
        Check(
            "officers_directors",
            all_phrases("officers", "directors"),
            "Officers/Directors information",
            "Verify the certificate includes information about officers and directors",
        ),
        Check(
            "registered_agent",
            phrase("registered agent", "registered office"),
            "Registered agent/office information",
            "Verify the certificate includes registered agent and office information",
        ),
        STATE_SEAL,
        TREASURER_SIGNATURE,
        Check(
            "certificate_number",
            pattern(r"certificate\s+number|cert\.\s*no\."),
            "Certificate number",
            "Verify the certificate has a certificate number",
        ),
        Check(
            "verification_url",
            phrase("verify this certificate", "http", "www"),
            "Verification URL",
            "Verify the certificate includes a verification URL",
        ),
    ),
)


CERT_GOOD_STANDING_SHORT = RuleSet(
    document_type="cert-good-standing-short",
    description="Short Form Standing",
    locate_name=build_locator(
        anchors=("short form standing",),
        direction="after",
        use_key_values=False,
    ),
    checks=(
        ACTIVE_GOOD_STANDING,
        TREASURY_REFERENCE,
        REVENUE_DIVISION,
        STATE_SEAL,
        TREASURER_SIGNATURE,
    ),
)
