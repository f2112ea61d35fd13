"""
Identifier casing helpers.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from typing import List

# Uppercase runs ("XML" in "XMLHttp"), capitalized or lowercase words, digit runs
_WORD_PATTERN = re.compile(r'[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+')

IDENTIFIER_PREFIX = "Icon"


def split_words(text: str) -> List[str]:
    """
    Split text into words on separators and case boundaries.

    Args:
        text: Raw name such as "arrow-left", "arrowLeft" or "xlink:href"

    Returns:
        List of words in their original casing
    """
    if not text:
        return []
    return _WORD_PATTERN.findall(text)


def camel_case(text: str) -> str:
    """Convert a name to camelCase ("stroke-width" -> "strokeWidth")."""
    words = split_words(text)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word.capitalize() for word in tail)


def pascal_case(text: str) -> str:
    """Convert a name to PascalCase ("arrow-left" -> "ArrowLeft")."""
    return "".join(word.capitalize() for word in split_words(text))


def component_name(file_stem: str) -> str:
    """
    Derive a component identifier from an SVG file name.

    Args:
        file_stem: File name without extension

    Returns:
        PascalCase name that is a valid JS identifier
    """
    name = pascal_case(file_stem)
    if not name or name[0].isdigit():
        name = IDENTIFIER_PREFIX + name
    return name


def capitalize(text: str) -> str:
    """Uppercase only the first character."""
    return text[:1].upper() + text[1:]
