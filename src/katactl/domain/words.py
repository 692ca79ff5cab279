"""Whole-word occurrence counting.

A word is a maximal run of ASCII letters and digits after lower-casing.
Everything else (spaces, punctuation, accented letters) separates words.
"""

from __future__ import annotations

import re

from katactl.domain.errors import InvalidArgument

_WORD_RE = re.compile(r"[a-z0-9]+")


def split_words(text: str) -> list[str]:
    """Lower-case *text* and split it into words.

    Examples:
        >>> split_words("TypeScript is great. I love TypeScript!")
        ['typescript', 'is', 'great', 'i', 'love', 'typescript']
    """
    return _WORD_RE.findall(text.lower())


def count_word_occurrences(text: str, word: str) -> int:
    """Count case-insensitive whole-word matches of *word* in *text*.

    A target containing separator characters can never match and yields 0.

    Raises:
        InvalidArgument: *word* is empty.
    """
    if not word:
        raise InvalidArgument("word must not be empty", field="word")
    target = word.lower()
    return sum(1 for candidate in split_words(text) if candidate == target)
