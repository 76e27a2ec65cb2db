"""New Jersey Business Assistance or Incentive tax clearance certificates.

The online variant carries a serial number; the manual variant is issued by
the BATC unit and has no serial number. Both must be recent, signed by a
named Division of Taxation official, and must not come from the Department of
Environmental Protection.
"""

from compliance.processors.field_locator import pattern_exclusion, phrase_exclusion
from compliance.rulesets.base import (
    Check,
    CheckKind,
    RuleSet,
    build_locator,
    date_within_window,
    fein_mismatches_applicant_id,
    pattern,
    phrase,
)

NAMED_OFFICIALS_RE = r"Marita\s+R\.\s+Sciarrotta|John\s+J\.\s+Ficara"

TAX_CLEARANCE_NAME_LOCATOR = build_locator(
    anchors=("business assistance or incentive", "clearance certificate"),
    direction="before",
    exclusions=(
        phrase_exclusion("state of", "department of", "division of", "governor"),
        pattern_exclusion(r"^attn:"),
    ),
)

CLEARANCE_KEYWORD = Check(
    "clearance_certificate_keyword",
    phrase("clearance certificate"),
    "Required keyword: 'Clearance Certificate'",
)
TREASURY = Check(
    "department_of_treasury",
    phrase("department of the treasury"),
    "Required keyword: Department of the Treasury",
)
TAXATION = Check(
    "division_of_taxation",
    phrase("division of taxation"),
    "Required keyword: Division of Taxation",
)
FEIN_MATCHES_APPLICANT_ID = Check(
    "fein_applicant_id",
    fein_mismatches_applicant_id(),
    "FEIN last three digits don't match the Applicant ID on the certificate",
    "Verify that the correct FEIN was entered",
    kind=CheckKind.REJECT,
)
NOT_ENVIRONMENTAL_PROTECTION = Check(
    "rejected_agency",
    phrase("department of environmental protection", "environmental protection"),
    "Tax Clearance Certificate is issued by the Department of Environmental Protection",
    "This agency is not accepted. Please provide a valid tax clearance certificate "
    "from a different agency",
    kind=CheckKind.REJECT,
)
RECENT = Check(
    "dated_within_window",
    date_within_window(),
    "Certificate must be dated within the past six months",
    "Obtain a more recent tax clearance certificate",
)
SIGNATURE_ACTION = "Verify the certificate has been signed by an authorized official"


TAX_CLEARANCE_ONLINE = RuleSet(
    document_type="tax-clearance-online",
    description="Online-generated tax clearance certificate",
    locate_name=TAX_CLEARANCE_NAME_LOCATOR,
    checks=(
        CLEARANCE_KEYWORD,
        Check(
            "serial_number",
            pattern(r"serial\s?#|serial number|serial[\s#]*:?\s*\d+"),
            "Serial Number is missing",
            "Verify this is an online-generated certificate with a Serial Number",
        ),
        Check(
            "state_of_new_jersey",
            phrase("state of new jersey", "new jersey"),
            "Required keyword: 'State of New Jersey'",
        ),
        TREASURY,
        TAXATION,
        FEIN_MATCHES_APPLICANT_ID,
        NOT_ENVIRONMENTAL_PROTECTION,
        RECENT,
        Check(
            "official_signature",
            pattern(rf"acting director|{NAMED_OFFICIALS_RE}"),
            "Signature is missing",
            SIGNATURE_ACTION,
        ),
    ),
)


TAX_CLEARANCE_MANUAL = RuleSet(
    document_type="tax-clearance-manual",
    description="Manually generated (BATC) tax clearance certificate",
    locate_name=TAX_CLEARANCE_NAME_LOCATOR,
    checks=(
        CLEARANCE_KEYWORD,
        Check(
            "state_of_new_jersey",
            phrase("state of new jersey"),
            "Required keyword: 'State of New Jersey'",
        ),
        Check(
            "batc_manual_marker",
            phrase("batc", "manual"),
            "Required keyword: 'BATC - Manual'",
            "Verify this is a manually generated tax clearance certificate",
        ),
        TREASURY,
        TAXATION,
        FEIN_MATCHES_APPLICANT_ID,
        NOT_ENVIRONMENTAL_PROTECTION,
        RECENT,
        Check(
            "official_signature",
            pattern(rf"acting director|director of taxation|{NAMED_OFFICIALS_RE}"),
            "Signature is missing",
            SIGNATURE_ACTION,
        ),
    ),
)
