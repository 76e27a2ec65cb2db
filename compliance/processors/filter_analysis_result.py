"""Map a raw document-analysis result into ``DocumentContent``.

The analysis service (prebuilt "document" model) returns a loosely shaped
JSON object. Only the members the rule engine reads are kept; anything
missing or of the wrong type degrades to an empty value instead of failing.
"""

from typing import Any

from compliance.core.config import MAX_TEXT_LENGTH
from compliance.core.exceptions import PayloadTooLargeError, ValidationError
from compliance.models.dto import (
    DocumentContent,
    KeyValuePair,
    LanguageInfo,
    Line,
    Page,
    StyleRun,
    TextSpan,
)


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def _span(obj: Any) -> TextSpan | None:
    if not isinstance(obj, dict):
        return None
    return TextSpan(content=_as_str(obj.get("content")))


def _parse_page(page_data: dict) -> Page:
    words = page_data.get("words")
    if isinstance(words, list):
        word_count = len(words)
    else:
        try:
            word_count = int(page_data.get("wordCount") or 0)
        except (TypeError, ValueError):
            word_count = 0

    page_number = page_data.get("pageNumber")
    lines = [
        Line(
            content=_as_str(line.get("content")),
            polygon=[p for p in _as_list(line.get("polygon")) if _as_float(p) is not None]
            or None,
        )
        for line in _as_list(page_data.get("lines"))
        if isinstance(line, dict)
    ]
    return Page(
        page_number=page_number if isinstance(page_number, int) else None,
        word_count=max(word_count, 0),
        width=_as_float(page_data.get("width")),
        height=_as_float(page_data.get("height")),
        unit=page_data.get("unit") if isinstance(page_data.get("unit"), str) else None,
        lines=lines,
    )


def _parse_key_value_pair(pair: dict) -> KeyValuePair | None:
    key = _span(pair.get("key"))
    if key is None:
        return None
    return KeyValuePair(
        key=key,
        value=_span(pair.get("value")),
        confidence=_as_float(pair.get("confidence")),
    )


def _parse_language(language: dict) -> LanguageInfo:
    code = language.get("locale", language.get("languageCode"))
    return LanguageInfo(
        language_code=code if isinstance(code, str) else None,
        confidence=_as_float(language.get("confidence")),
    )


def parse_analysis_result(
    obj: Any, max_text_length: int = MAX_TEXT_LENGTH
) -> DocumentContent:
    """Parse an analysis result into the rule engine's document model.

    Handles both the bare result and the ``{"analyzeResult": {...}}`` envelope.

    Args:
        obj: Decoded JSON returned by the analysis service
        max_text_length: Largest accepted ``content`` length

    Returns:
        DocumentContent with empty defaults for anything absent

    Raises:
        ValidationError: If the payload is not a JSON object
        PayloadTooLargeError: If the extracted text exceeds ``max_text_length``
    """
    if not isinstance(obj, dict):
        raise ValidationError(
            "Analysis result must be a JSON object", field="analysisResult"
        )

    if isinstance(obj.get("analyzeResult"), dict):
        obj = obj["analyzeResult"]

    raw_text = _as_str(obj.get("content"))
    if len(raw_text) > max_text_length:
        raise PayloadTooLargeError(max_text_length, len(raw_text))

    pages = [_parse_page(p) for p in _as_list(obj.get("pages")) if isinstance(p, dict)]
    pairs = [
        kv
        for kv in (
            _parse_key_value_pair(p)
            for p in _as_list(obj.get("keyValuePairs"))
            if isinstance(p, dict)
        )
        if kv is not None
    ]
    styles = [
        StyleRun(
            is_handwritten=bool(s.get("isHandwritten")),
            confidence=_as_float(s.get("confidence")),
        )
        for s in _as_list(obj.get("styles"))
        if isinstance(s, dict)
    ]
    languages = [
        _parse_language(lang) for lang in _as_list(obj.get("languages")) if isinstance(lang, dict)
    ]

    return DocumentContent(
        raw_text=raw_text,
        pages=pages,
        key_value_pairs=pairs,
        styles=styles,
        languages=languages,
    )
