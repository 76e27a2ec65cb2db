"""
Typed contracts shared by the rule engine, the aggregator and the API layer.

Python attributes are snake_case; the JSON boundary uses the camelCase names
emitted by the document-analysis collaborator (``keyValuePairs``,
``isHandwritten`` ...), so every model accepts both.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextSpan(BaseModel):
    model_config = _CAMEL_CONFIG

    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class KeyValuePair(BaseModel):
    """
    A key/value pair detected by the analysis service (form labels).
    """

    model_config = _CAMEL_CONFIG

    key: TextSpan = Field(default_factory=TextSpan)
    value: TextSpan | None = None
    confidence: float | None = None


class Line(BaseModel):
    model_config = _CAMEL_CONFIG

    content: str = ""
    polygon: list[float] | None = None


class Page(BaseModel):
    model_config = _CAMEL_CONFIG

    page_number: int | None = None
    word_count: int = 0
    width: float | None = None
    height: float | None = None
    unit: str | None = None
    lines: list[Line] = Field(default_factory=list)


class StyleRun(BaseModel):
    model_config = _CAMEL_CONFIG

    is_handwritten: bool = False
    confidence: float | None = None


class LanguageInfo(BaseModel):
    model_config = _CAMEL_CONFIG

    language_code: str | None = None
    confidence: float | None = None


class DocumentContent(BaseModel):
    """
    Extracted text and structural metadata for one document.

    Frozen so that the cached lowercase view can never drift from
    ``raw_text``. Absent sequences are empty, never None.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    raw_text: str = ""
    pages: list[Page] = Field(default_factory=list)
    key_value_pairs: list[KeyValuePair] = Field(default_factory=list)
    styles: list[StyleRun] = Field(default_factory=list)
    languages: list[LanguageInfo] = Field(default_factory=list)

    @field_validator("raw_text", mode="before")
    @classmethod
    def _text_none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("pages", "key_value_pairs", "styles", "languages", mode="before")
    @classmethod
    def _list_none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @cached_property
    def lower_text(self) -> str:
        return self.raw_text.lower()

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def word_count(self) -> int:
        return sum(page.word_count for page in self.pages)

    @property
    def contains_handwriting(self) -> bool:
        return any(style.is_handwritten for style in self.styles)


class UserFields(BaseModel):
    """
    Values the user typed in alongside the upload.
    """

    model_config = _CAMEL_CONFIG

    organization_name: str | None = None
    fein: str | None = None


class ValidationOutcome(BaseModel):
    """
    Result of running one rule set against one document.

    ``failed_checks`` holds the identifiers of the failed checks, in the same
    order as ``missing_elements``.
    """

    model_config = _CAMEL_CONFIG

    missing_elements: list[str] = Field(default_factory=list)
    suggested_actions: list[str] = Field(default_factory=list)
    detected_organization_name: str | None = None
    failed_checks: list[str] = Field(default_factory=list, exclude=True)

    @property
    def passed(self) -> bool:
        return not self.missing_elements


class DocumentInfo(BaseModel):
    model_config = _CAMEL_CONFIG

    page_count: int = 0
    word_count: int = 0
    language_info: list[LanguageInfo] = Field(default_factory=list)
    contains_handwriting: bool = False
    document_type: str
    detected_organization_name: str | None = None


class ValidationReport(BaseModel):
    """
    Final report returned to the caller.
    """

    model_config = _CAMEL_CONFIG

    success: bool
    missing_elements: list[str] = Field(default_factory=list)
    suggested_actions: list[str] = Field(default_factory=list)
    document_info: DocumentInfo
    organization_name_matches: bool = True
