# =============================================================================
# Date Extraction
# =============================================================================

RECENCY_WINDOW_MONTHS = 6  # Default look-back window for "recent" documents
MIN_DATE_TEXT_LENGTH = 10  # Shorter texts never contain a usable date

# Only the first N matches of each syntax are inspected
MAX_NUMERIC_DATE_MATCHES = 10
MAX_WRITTEN_DATE_MATCHES = 10
MAX_ORDINAL_DATE_MATCHES = 5

# Sanity bounds for "any date present" checks
MIN_PLAUSIBLE_YEAR = 1900
MAX_PLAUSIBLE_YEAR = 2100

TWO_DIGIT_YEAR_BASE = 2000  # "05/01/24" -> 2024


# =============================================================================
# Field Location
# =============================================================================

MAX_ANCHOR_LINES = 5  # Lines inspected on each side of an anchor phrase
MIN_CANDIDATE_LINE_LENGTH = 4  # Shorter lines are noise (page numbers, initials)
MIN_UPPERCASE_NAME_LENGTH = 6  # All-caps lines shorter than this are not names


# =============================================================================
# Organization Name Matching
# =============================================================================

MIN_CORE_NAME_LENGTH = 3  # Cores shorter than this never match on their own


# =============================================================================
# Validation Limits
# =============================================================================

ORG_NAME_MAX_LENGTH = 300
FEIN_MAX_LENGTH = 20
MAX_TEXT_LENGTH = 2_000_000  # Characters of extracted text accepted per request
