"""Record types for the debugging pattern catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("typescript", "python")

LANGUAGE_LABELS = {
    "typescript": "TypeScript",
    "python": "Python",
}


class PatternCategory(str, Enum):
    WORKFLOW = "WORKFLOW"
    PERFORMANCE = "PERFORMANCE"
    INTEGRATION = "INTEGRATION"
    STATE = "STATE"
    RUNTIME = "RUNTIME"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CodeExample:
    title: str
    language: str
    code: str
    explanation: str


@dataclass(frozen=True)
class Implementation:
    """Full source listings keyed by language; either entry may be missing."""

    typescript: Optional[str] = None
    python: Optional[str] = None

    def get(self, language: str) -> Optional[str]:
        if language not in SUPPORTED_LANGUAGES:
            return None
        text = getattr(self, language)
        return text if text and text.strip() else None

    def languages(self) -> Tuple[str, ...]:
        return tuple(lang for lang in SUPPORTED_LANGUAGES if self.get(lang))

    def is_empty(self) -> bool:
        return not self.languages()


@dataclass(frozen=True)
class Pattern:
    id: str
    title: str
    description: str
    category: PatternCategory
    diagram: str
    use_cases: Tuple[str, ...] = ()
    implementation: Implementation = field(default_factory=Implementation)
    code_examples: Tuple[CodeExample, ...] = ()
    best_practices: Tuple[str, ...] = ()
    common_pitfalls: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from catalog literals but always store tuples
        for name in ("use_cases", "code_examples", "best_practices", "common_pitfalls"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, _as_tuple(value))

    def to_summary_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": str(self.category),
            "use_cases": len(self.use_cases),
            "code_examples": len(self.code_examples),
            "languages": ", ".join(
                LANGUAGE_LABELS[lang] for lang in self.implementation.languages()
            ),
        }


def _as_tuple(values: Iterable) -> tuple:
    return tuple(values or ())
