"""Unit tests for mapping analysis results into DocumentContent."""

import pytest

from compliance.core.exceptions import PayloadTooLargeError, ValidationError
from compliance.processors.filter_analysis_result import parse_analysis_result

ANALYSIS_RESULT = {
    "content": "CERTIFICATE OF TRADE NAME\nAcme Widgets",
    "pages": [
        {
            "pageNumber": 1,
            "width": 8.5,
            "height": 11,
            "unit": "inch",
            "words": [{"content": "CERTIFICATE"}, {"content": "OF"}, {"content": "TRADE"}],
            "lines": [{"content": "CERTIFICATE OF TRADE NAME", "polygon": [0, 0, 1, 0, 1, 1]}],
        },
        {"pageNumber": 2, "wordCount": 5},
    ],
    "keyValuePairs": [
        {"key": {"content": "Business Name"}, "value": {"content": "Acme Widgets"}, "confidence": 0.8},
        {"key": {"content": "Signature"}},
        {"value": {"content": "orphan value"}},
    ],
    "styles": [{"isHandwritten": True, "confidence": 0.7}, {"isHandwritten": False}],
    "languages": [{"locale": "en", "confidence": 0.99}, {"languageCode": "es"}],
}


class TestParseAnalysisResult:
    """Tests for parse_analysis_result."""

    def test_full_result(self):
        content = parse_analysis_result(ANALYSIS_RESULT)

        assert content.raw_text == ANALYSIS_RESULT["content"]
        assert content.lower_text == ANALYSIS_RESULT["content"].lower()
        assert content.page_count == 2
        assert content.word_count == 8
        assert content.pages[0].unit == "inch"
        assert content.pages[0].height == 11.0
        assert content.pages[0].lines[0].content == "CERTIFICATE OF TRADE NAME"
        assert content.contains_handwriting is True
        assert [lang.language_code for lang in content.languages] == ["en", "es"]

    def test_key_value_pairs(self):
        content = parse_analysis_result(ANALYSIS_RESULT)

        assert len(content.key_value_pairs) == 2
        first, second = content.key_value_pairs
        assert first.key.content == "Business Name"
        assert first.value.content == "Acme Widgets"
        assert first.confidence == 0.8
        assert second.value is None

    def test_envelope(self):
        content = parse_analysis_result({"status": "succeeded", "analyzeResult": ANALYSIS_RESULT})
        assert content.raw_text == ANALYSIS_RESULT["content"]

    def test_empty_result(self):
        content = parse_analysis_result({})

        assert content.raw_text == ""
        assert content.pages == []
        assert content.key_value_pairs == []
        assert content.styles == []
        assert content.languages == []
        assert content.contains_handwriting is False

    def test_wrong_types_degrade_to_empty(self):
        content = parse_analysis_result(
            {
                "content": 42,
                "pages": "not a list",
                "keyValuePairs": [None, "x", {"key": "not a span"}],
                "styles": None,
                "languages": [{"locale": 7, "confidence": True}],
            }
        )

        assert content.raw_text == ""
        assert content.pages == []
        assert content.key_value_pairs == []
        assert content.languages[0].language_code is None
        assert content.languages[0].confidence is None

    def test_bad_word_count(self):
        content = parse_analysis_result({"pages": [{"wordCount": "many"}, {"wordCount": -3}]})
        assert [page.word_count for page in content.pages] == [0, 0]

    @pytest.mark.parametrize("payload", [None, [], "text", 3])
    def test_rejects_non_object(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            parse_analysis_result(payload)
        assert exc_info.value.details["field"] == "analysisResult"

    def test_rejects_oversized_text(self):
        with pytest.raises(PayloadTooLargeError) as exc_info:
            parse_analysis_result({"content": "x" * 11}, max_text_length=10)
        assert exc_info.value.details == {"max_length": 10, "actual_length": 11}

    def test_accepts_text_at_limit(self):
        content = parse_analysis_result({"content": "x" * 10}, max_text_length=10)
        assert len(content.raw_text) == 10
