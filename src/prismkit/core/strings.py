"""
String utility functions for Prism.

Provides the case conversions used for generated identifiers and for
the named template transformations.
"""

from __future__ import annotations

import re

# Word boundaries: runs of capitals followed by a capitalized word
# (``HTTPServer`` -> ``HTTP``, ``Server``), capitalized or lowercase words,
# and digit runs.
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(text: str) -> list[str]:
    """
    Split free-form text into words.

    Whitespace, punctuation and camelCase humps all act as separators.

    Examples:
        >>> split_words("Clear Reddish")
        ['Clear', 'Reddish']
        >>> split_words("primaryButton-hover")
        ['primary', 'Button', 'hover']
        >>> split_words("Gray 100")
        ['Gray', '100']
    """
    return _WORD_PATTERN.findall(text)


def to_camel_case(text: str) -> str:
    """
    Convert text to lowerCamelCase.

    Examples:
        >>> to_camel_case("Clear Reddish")
        'clearReddish'
        >>> to_camel_case("blue_sky")
        'blueSky'
    """
    words = split_words(text)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word.capitalize() for word in rest)


def to_pascal_case(text: str) -> str:
    """
    Convert text to PascalCase.

    Examples:
        >>> to_pascal_case("clear reddish")
        'ClearReddish'
    """
    return "".join(word.capitalize() for word in split_words(text))


def to_snake_case(text: str) -> str:
    """
    Convert text to snake_case.

    Examples:
        >>> to_snake_case("Clear Reddish")
        'clear_reddish'
        >>> to_snake_case("headlineLarge")
        'headline_large'
    """
    return "_".join(word.lower() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    """
    Convert text to kebab-case.

    Examples:
        >>> to_kebab_case("Clear Reddish")
        'clear-reddish'
    """
    return "-".join(word.lower() for word in split_words(text))


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]
