"""Unit tests for locating organization names and identifiers in document text."""

import pytest

from compliance.processors.field_locator import (
    extract_applicant_id,
    extract_labeled_name,
    find_value_in_key_values,
    find_value_near_anchor,
    is_high_confidence_name,
    pattern_exclusion,
    phrase_exclusion,
)
from tests.factories import TAX_CLEARANCE_ONLINE_TEXT, make_content

TAX_ANCHORS = ("business assistance or incentive", "clearance certificate")


class TestFindValueNearAnchor:
    """Tests for find_value_near_anchor."""

    def test_before_anchor_prefers_uppercase_line(self):
        value = find_value_near_anchor(
            TAX_CLEARANCE_ONLINE_TEXT,
            TAX_ANCHORS,
            "before",
            exclusions=[
                phrase_exclusion("state of", "department of", "division of"),
                pattern_exclusion(r"^attn:"),
            ],
        )
        assert value == "ACME LLC"

    def test_after_anchor(self):
        text = "CERTIFICATE OF ALTERNATE NAME\n\nBeta Widgets LLC\nRegistered 2024"
        assert find_value_near_anchor(text, ("certificate of alternate name",), "after") == (
            "Beta Widgets LLC"
        )

    def test_after_anchor_on_same_line(self):
        text = "Name of Corporation/Business: Gamma Holdings Inc\nOther"
        value = find_value_near_anchor(text, ("name of corporation/business:",), "after")
        assert value == "Gamma Holdings Inc"

    def test_high_confidence_beats_earlier_plain_line(self):
        text = "Anchor here\nsome plain words\nDELTA ENTERPRISES\n"
        assert find_value_near_anchor(text, ("anchor here",), "after") == "DELTA ENTERPRISES"

    def test_first_surviving_line_is_low_confidence_answer(self):
        text = "Anchor here\nfirst plain line\nsecond plain line\n"
        assert find_value_near_anchor(text, ("anchor here",), "after") == "first plain line"

    def test_before_anchor_low_confidence_answer_is_line_above_anchor(self):
        text = "PO Box 245\nTrenton, NJ 08695-0245\nAcme Widgets\nBusiness Assistance or Incentive\n"
        assert find_value_near_anchor(text, TAX_ANCHORS, "before") == "Acme Widgets"

    def test_before_anchor_uppercase_line_still_stops_scan(self):
        text = "OMEGA HOLDINGS\nTrenton, NJ 08695-0245\nBusiness Assistance or Incentive\n"
        assert find_value_near_anchor(text, TAX_ANCHORS, "before") == "OMEGA HOLDINGS"

    def test_skips_short_lines_and_bare_dates(self):
        text = "Anchor here\nab\n05/15/2024\nEpsilon Partners\n"
        assert find_value_near_anchor(text, ("anchor here",), "after") == "Epsilon Partners"

    def test_exclusions_apply(self):
        text = "Anchor here\nPage 1 of 2\nZeta Group\n"
        value = find_value_near_anchor(
            text, ("anchor here",), "after", exclusions=[pattern_exclusion(r"^page \d+")]
        )
        assert value == "Zeta Group"

    def test_max_lines_counts_non_empty_lines_only(self):
        text = "Anchor here\n\n\n\n\nfirst plain\nETA HOLDINGS LLC\n"
        assert find_value_near_anchor(text, ("anchor here",), "after", max_lines=1) == "first plain"
        assert find_value_near_anchor(text, ("anchor here",), "after", max_lines=2) == (
            "ETA HOLDINGS LLC"
        )

    def test_anchor_priority_order(self):
        text = "Second anchor\nWRONG NAME INC\nFirst anchor\nRIGHT NAME INC\n"
        value = find_value_near_anchor(text, ("first anchor", "second anchor"), "after")
        assert value == "RIGHT NAME INC"

    def test_key_value_fallback_without_anchor(self):
        content = make_content("no anchors at all", [("Taxpayer Name:", "Theta LLC")])
        value = find_value_near_anchor(
            content.raw_text,
            TAX_ANCHORS,
            "before",
            key_value_pairs=content.key_value_pairs,
        )
        assert value == "Theta LLC"

    def test_fallback_disabled(self):
        content = make_content("no anchors at all", [("Taxpayer Name:", "Theta LLC")])
        value = find_value_near_anchor(
            content.raw_text,
            TAX_ANCHORS,
            "before",
            key_value_pairs=content.key_value_pairs,
            kv_labels=None,
        )
        assert value is None

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_text(self, text):
        assert find_value_near_anchor(text, TAX_ANCHORS, "before") is None


class TestKeyValues:
    def test_label_priority_beats_pair_order(self):
        content = make_content(
            key_values=[("Business Name", "Second Choice"), ("Taxpayer Name", "First Choice")]
        )
        assert find_value_in_key_values(content.key_value_pairs) == "First Choice"

    def test_identifier_keys_are_skipped(self):
        content = make_content(
            key_values=[("Applicant ID", "123-456-789/000"), ("Applicant", "Iota LLC")]
        )
        assert find_value_in_key_values(content.key_value_pairs) == "Iota LLC"

    def test_blank_values_are_skipped(self):
        content = make_content(key_values=[("Taxpayer Name", "  "), ("Entity", "Kappa Inc")])
        assert find_value_in_key_values(content.key_value_pairs) == "Kappa Inc"

    def test_pair_without_value(self):
        content = make_content(key_values=[("Taxpayer Name", None)])
        assert find_value_in_key_values(content.key_value_pairs) is None


class TestApplicantId:
    def test_from_text(self):
        content = make_content(TAX_CLEARANCE_ONLINE_TEXT)
        assert extract_applicant_id(content) == "123-456-789/000"

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("Applicant ID# 987654321", "987654321"),
            ("APPLICANT ID: 12-3456789", "12-3456789"),
        ],
    )
    def test_label_variants(self, line, expected):
        assert extract_applicant_id(make_content(f"Header\n{line}\nFooter")) == expected

    def test_from_key_values(self):
        content = make_content("no id here", [("ID #", "555")])
        assert extract_applicant_id(content) == "555"

    def test_missing(self):
        assert extract_applicant_id(make_content("nothing to see")) is None


class TestLabeledName:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1. Name: Lambda LLC\n2. Purpose", "Lambda LLC"),
            ("Name of Domestic Corporation: Mu Inc\n", "Mu Inc"),
            ("The name of the limited liability company is Nu LLC\n", "Nu LLC"),
            ("The above-named Xi Holdings LLC was duly filed", "Xi Holdings LLC"),
        ],
    )
    def test_label_patterns(self, text, expected):
        assert extract_labeled_name(make_content(text)) == expected

    def test_key_value_fallback_requires_exact_label(self):
        content = make_content("Certificate", [("Business name:", "Wrong"), ("Name:", "Omicron LLC")])
        assert extract_labeled_name(content) == "Omicron LLC"

    def test_missing(self):
        assert extract_labeled_name(make_content("Certificate of Formation")) is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("ACME WIDGETS", True),
        ("Acme Widgets LLC", True),
        ("acme corp", True),
        ("ACME", False),
        ("Acme Widgets", False),
    ],
)
def test_is_high_confidence_name(line, expected):
    assert is_high_confidence_name(line) is expected
