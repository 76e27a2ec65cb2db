"""Internal corporate records and federal letters (no name reconciliation)."""

import re

from compliance.rulesets.base import Check, RuleSet, any_date, any_of, pattern, phrase

OPERATING_AGREEMENT = RuleSet(
    document_type="operating-agreement",
    description="LLC Operating Agreement",
    checks=(
        Check(
            "operating_agreement_keyword",
            phrase("operating agreement"),
            "Required keyword: 'Operating Agreement'",
        ),
        Check(
            "member_signatures",
            any_of(
                phrase("signature", "signed by", "undersigned"),
                pattern(r"s\/?\/|_+\s*name"),
            ),
            "Member signatures are missing",
            "Verify the operating agreement is signed by all members",
        ),
        Check(
            "date_present",
            any_of(any_date(), pattern(r"dated?(\s*on)?:|dated|executed on")),
            "Date is missing",
            "Verify the operating agreement is dated",
        ),
        Check(
            "new_jersey_reference",
            any_of(phrase("new jersey"), pattern(r"\bnj\b")),
            "New Jersey state reference is missing",
            "Verify the agreement references New Jersey state law",
        ),
    ),
)


IRS_DETERMINATION = RuleSet(
    document_type="irs-determination",
    description="IRS Determination Letter",
    checks=(
        Check(
            "irs_letterhead",
            phrase("internal revenue service", "department of the treasury"),
            "IRS letterhead is missing",
            "Verify the letter is on IRS letterhead showing 'Internal Revenue Service'",
        ),
        Check(
            "signature",
            pattern(re.compile(r"Sincerely,|Director")),
            "Signature is missing",
            "Verify the certificate has been signed by an authorized official",
        ),
    ),
)


BYLAWS = RuleSet(
    document_type="bylaws",
    description="Corporate By-laws",
    checks=(
        Check(
            "bylaws_keyword",
            phrase("bylaws", "by-laws", "by laws"),
            "Required keyword: 'Bylaws'",
        ),
        Check(
            "date_present",
            any_date(),
            "Document must contain a date",
            "Verify that the by-laws document includes a date",
        ),
    ),
)
