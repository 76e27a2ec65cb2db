"""
Keyword and pattern primitives used by the compliance checks.

All phrase helpers expect already-lowercased text and lowercase phrases.
"""

import re
from typing import Iterable, Pattern, Union

PatternLike = Union[str, Pattern[str]]


def contains_any(lower_text: str, phrases: Iterable[str]) -> bool:
    return any(phrase in lower_text for phrase in phrases)


def contains_all(lower_text: str, phrases: Iterable[str]) -> bool:
    return all(phrase in lower_text for phrase in phrases)


def compile_pattern(pattern: PatternLike, flags: int = re.IGNORECASE) -> Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, flags)


def first_phrase_position(lower_text: str, phrases: Iterable[str]) -> tuple[str, int] | None:
    """
    Return the first phrase (in the given priority order) found in the text
    together with its offset, or None.
    """
    for phrase in phrases:
        index = lower_text.find(phrase)
        if index != -1:
            return phrase, index
    return None


def split_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines()]
