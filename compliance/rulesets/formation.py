"""Formation and incorporation certificates.

Formation certificates label the entity name ("Name:", "The above-named ...
was"), so the name is read from the label rather than from an anchor line.
Incorporation certificates are checked for structure only.
"""

from compliance.processors.field_locator import extract_labeled_name
from compliance.rulesets.base import Check, RuleSet, any_date, pattern, phrase

FORMATION_TITLE = Check(
    "formation_title",
    phrase("certificate of formation", "short form standing", "long form standing"),
    "Required keyword: 'Certificate of Formation'",
)
STATE_OFFICIAL_SIGNATURE = Check(
    "state_official_signature",
    pattern(r"signature|signed|authorized representative|state treasurer|organizer|treasurer"),
    "Signature of authorized state official is missing",
    "Verify document has been signed by an authorized state official",
)


CERT_FORMATION = RuleSet(
    document_type="cert-formation",
    description="Certificate of Formation issued by the NJ Department of the Treasury",
    locate_name=extract_labeled_name,
    checks=(
        FORMATION_TITLE,
        Check(
            "nj_treasury_reference",
            phrase("new jersey department of the treasury", "new jersey", "division of revenue"),
            "Certificate is not issued by the NJ Department of the Treasury",
            "Verify certificate is issued by the NJ Department of the Treasury",
        ),
        STATE_OFFICIAL_SIGNATURE,
        Check(
            "date_present",
            any_date(),
            "Document must contain a date",
            "Verify that the document includes a stamped date",
        ),
        Check(
            "verification_info",
            pattern(r"verify this certificate|verification|certification"),
            "Certificate verification information is missing",
            "Verify document contains certificate verification information",
        ),
    ),
)


CERT_FORMATION_INDEPENDENT = RuleSet(
    document_type="cert-formation-independent",
    description="Certificate of Formation filed independently (stamped copy)",
    locate_name=extract_labeled_name,
    checks=(
        Check(
            "formation_title",
            phrase("certificate of formation"),
            "Required keyword: 'Certificate of Formation'",
        ),
        Check(
            "filed_stamp",
            pattern(r"filed"),
            "Required keyword: 'Filed'",
            "Verify document is stamped by the Department of the Treasury",
        ),
        STATE_OFFICIAL_SIGNATURE,
        Check(
            "date_present",
            any_date(),
            "Document must contain a date",
            "Verify that the document includes a stamped date",
        ),
    ),
)


CERT_INCORPORATION = RuleSet(
    document_type="cert-incorporation",
    description="Certificate of Incorporation",
    checks=(
        Check(
            "incorporation_title",
            phrase("certificate of inc"),
            "Required text: 'Certificate of Incorporation'",
        ),
        Check(
            "board_of_directors",
            phrase("directors", "incorporators", "trustees", "shareholders"),
            "Board of Directors section is missing",
            "Verify the certificate lists the Board of Directors",
        ),
    ),
)
