"""Schema definitions for catalog records."""

from .patterns import (
    LANGUAGE_LABELS,
    SUPPORTED_LANGUAGES,
    CodeExample,
    Implementation,
    Pattern,
    PatternCategory,
)

__all__ = [
    "LANGUAGE_LABELS",
    "SUPPORTED_LANGUAGES",
    "CodeExample",
    "Implementation",
    "Pattern",
    "PatternCategory",
]
