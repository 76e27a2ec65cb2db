from typing import Set

# Legal-entity abbreviations and their canonical full forms.
# Order matters: expansion is applied sequentially.
ENTITY_ABBREVIATIONS: dict[str, str] = {
    "llc": "limited liability company",
    "inc": "incorporated",
    "corp": "corporation",
    "co": "company",
    "ltd": "limited",
    "lp": "limited partnership",
    "llp": "limited liability partnership",
    "pllc": "professional limited liability company",
    "pc": "professional corporation",
    "pa": "professional association",
    "plc": "professional limited company",
}

# Canonical entity types, longest first so suffix detection prefers
# "limited liability company" over "company".
ENTITY_TYPES: tuple[str, ...] = tuple(
    sorted(set(ENTITY_ABBREVIATIONS.values()), key=len, reverse=True)
)

# Distinct entity types that are still treated as the same legal shape
COMPATIBLE_ENTITY_TYPES: Set[frozenset[str]] = {
    frozenset({"corporation", "incorporated"}),
    frozenset({"company", "corporation"}),
}


MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# Cue words that make a bare four-digit year count as a date
YEAR_CUE_WORDS: tuple[str, ...] = (
    "©",
    "copyright",
    "adopted",
    "effective",
    "revised",
    "amended",
    "dated",
    "year",
)


# Key-value labels that carry an organization name, in priority order
NAME_LABEL_SYNONYMS: tuple[str, ...] = (
    "taxpayer name",
    "applicant",
    "business name",
    "name:",
    "entity",
)

# Keys that look like name labels but hold identifiers
IDENTIFIER_LABELS: tuple[str, ...] = (
    "applicant id",
    "id #",
)


# Human-readable labels for every supported document type
DOCUMENT_TYPE_LABELS: dict[str, str] = {
    "tax-clearance-online": "Tax Clearance Certificate (Online Generated)",
    "tax-clearance-manual": "Tax Clearance Certificate (Manually Generated)",
    "cert-alternative-name": "Certificate of Alternative Name",
    "cert-trade-name": "Certificate of Trade Name",
    "cert-formation": "Certificate of Formation",
    "cert-formation-independent": "Certificate of Formation (Independent)",
    "cert-good-standing-long": "Certificate of Good Standing (Long Form)",
    "cert-good-standing-short": "Certificate of Good Standing (Short Form)",
    "operating-agreement": "Operating Agreement",
    "cert-incorporation": "Certificate of Incorporation",
    "irs-determination": "IRS Determination Letter",
    "bylaws": "By-laws",
    "cert-authority": "Certificate of Authority",
    "cert-authority-auto": "Certificate of Authority (Automatic)",
}

DEFAULT_DOCUMENT_TYPE = "tax-clearance-online"


# Fixed outcome for unrecognized document types
UNKNOWN_DOCUMENT_TYPE_MESSAGE = "Unknown document type"
UNKNOWN_DOCUMENT_TYPE_ACTION = "Select a valid document type and try again"

# Every name-mismatch message contains this marker
NAME_MISMATCH_MARKER = "doesn't match"
NAME_MISMATCH_MESSAGE = "Organization name doesn't match the one on the certificate"
NAME_MISMATCH_ACTION = "Verify that the correct organization name was entered"
