"""Utility modules for case conversion."""

from utils.string_utils import (
    normalize_separators,
    strip_punctuation,
    tokenize,
)

__all__ = [
    'normalize_separators',
    'strip_punctuation',
    'tokenize',
]
