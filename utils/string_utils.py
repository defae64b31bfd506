"""String utility functions for case conversion.

This module provides the word-splitting helpers shared by every
case style in the converter package.
"""

import re
from typing import List


SEPARATOR_PATTERN = re.compile(r'[\s_-]+', re.ASCII)
PUNCTUATION_PATTERN = re.compile(r'[^\w\s]+', re.ASCII)

GENERIC_SEPARATOR = ' '


def normalize_separators(text: str) -> str:
    """Collapse runs of whitespace, underscores and hyphens.

    Args:
        text: The string to normalize.

    Returns:
        String with every separator run replaced by a single space.
    """
    return SEPARATOR_PATTERN.sub(GENERIC_SEPARATOR, text)


def strip_punctuation(text: str) -> str:
    """Remove characters that are neither word characters nor whitespace.

    Word characters are ASCII only; anything else, accented letters
    included, is stripped. A removed run still ends the word before it,
    so ``"hello@world"`` becomes two words rather than one.

    Args:
        text: The string to clean.

    Returns:
        String containing only ASCII word characters and whitespace.
    """
    return PUNCTUATION_PATTERN.sub(GENERIC_SEPARATOR, text)


def tokenize(text: str) -> List[str]:
    """Split text into its ordered, non-empty words.

    Args:
        text: The string to split.

    Returns:
        List of words with their original case and digits preserved.
    """
    trimmed = text.strip()
    if not trimmed:
        return []

    cleaned = strip_punctuation(normalize_separators(trimmed))
    return [word for word in cleaned.split() if word]
