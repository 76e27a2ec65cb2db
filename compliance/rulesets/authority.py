"""Certificates of Authority issued by the NJ Division of Taxation.

The automatic variant is generated online and prints the applicant's name
right after the authorization disclaimer, so it is also reconciled against
the organization name the user entered.
"""

from compliance.processors.field_locator import phrase_exclusion
from compliance.rulesets.base import (
    Check,
    RuleSet,
    any_of,
    build_locator,
    detected_name_present,
    key_label_present,
    phrase,
)

AUTHORIZATION_DISCLAIMER = (
    "this authorization is good only for the named person at the location "
    "specified herein this authorization is null and void if any change of "
    "ownership or address is effected"
)

AUTHORITY_CHECKS = (
    Check(
        "authority_title",
        phrase("certificate of authority"),
        "Required keyword: 'Certificate of Authority'",
    ),
    Check(
        "state_of_new_jersey",
        phrase("state of new jersey", "new jersey"),
        "Required keyword: 'State of New Jersey'",
        "Verify the certificate mentions State of New Jersey",
    ),
    Check(
        "taxation_or_treasury",
        phrase("division of taxation", "department of the treasury"),
        "Required keyword: 'Division of Taxation' or 'Department of the Treasury'",
        "Verify the certificate is issued by the Division of Taxation or Department "
        "of the Treasury",
    ),
)


CERT_AUTHORITY = RuleSet(
    document_type="cert-authority",
    description="Certificate of Authority (manually issued)",
    checks=AUTHORITY_CHECKS,
)


CERT_AUTHORITY_AUTO = RuleSet(
    document_type="cert-authority-auto",
    description="Certificate of Authority (automatically generated)",
    locate_name=build_locator(
        anchors=(
            AUTHORIZATION_DISCLAIMER,
            "change in ownership or address.",
            "certificate of authority",
        ),
        direction="after",
        exclusions=(
            phrase_exclusion(
                "tax registration",
                "tax effective date",
                "document locator",
                "date issued",
                "state of",
                "department of",
                "division of",
            ),
        ),
    ),
    echo_detected_name=True,
    checks=AUTHORITY_CHECKS
    + (
        Check(
            "applicant_name",
            any_of(detected_name_present(), key_label_present("name", "entity")),
            "Applicant's name",
            "Verify the certificate includes the applicant's name",
        ),
    ),
)
