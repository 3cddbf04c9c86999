# pattern_registry.py
# ------------------------------------------------------------------------------
# In-memory registry of debugging patterns.
# The registry is built once from the catalog literals and never mutated.
#
# Usage:
#   from registry import get_registry
#   registry = get_registry()
#   registry.get("memory-leaks")
# ------------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, Iterator, List, Optional, Tuple

from schemas.patterns import Pattern, PatternCategory

logger = logging.getLogger(__name__)

URL_SAFE_ID = re.compile(r"^[a-z0-9][a-z0-9-]*$")


class RegistryError(ValueError):
    """Raised when the catalog handed to the registry is malformed."""


class PatternRegistry:
    """
    Ordered, read-only collection of Pattern records.
    Patterns keep their declaration order; lookups never raise.
    """

    def __init__(self, patterns: Iterable[Pattern]):
        records = tuple(patterns)
        self._validate(records)
        self._patterns: Tuple[Pattern, ...] = records
        logger.debug(f"Pattern registry built with {len(records)} patterns")

    # ---------- Validation ----------
    @staticmethod
    def _validate(records: Tuple[Pattern, ...]) -> None:
        seen = set()
        for pattern in records:
            if not isinstance(pattern.id, str) or not URL_SAFE_ID.match(pattern.id):
                raise RegistryError(f"Pattern id is not URL-safe: {pattern.id!r}")
            if pattern.id in seen:
                raise RegistryError(f"Duplicate pattern id: {pattern.id}")
            if not isinstance(pattern.category, PatternCategory):
                raise RegistryError(
                    f"Unknown category {pattern.category!r} for pattern {pattern.id}"
                )
            seen.add(pattern.id)

    # ---------- Public API ----------
    def list(self) -> List[Pattern]:
        return list(self._patterns)

    def get(self, pattern_id: str) -> Optional[Pattern]:
        for pattern in self._patterns:
            if pattern.id == pattern_id:
                return pattern
        return None

    def related_to(self, pattern_id: str, limit: int) -> List[Pattern]:
        if limit <= 0:
            return []
        others = [p for p in self._patterns if p.id != pattern_id]
        return others[:limit]

    # ---------- Container helpers ----------
    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __contains__(self, pattern_id: object) -> bool:
        return any(p.id == pattern_id for p in self._patterns)


@lru_cache(maxsize=1)
def get_registry() -> PatternRegistry:
    """Return the process-wide registry built from the bundled catalog."""
    from catalog import DEFAULT_PATTERNS

    registry = PatternRegistry(DEFAULT_PATTERNS)
    logger.info(f"Loaded {len(registry)} debugging patterns")
    return registry


__all__ = ["PatternRegistry", "RegistryError", "get_registry"]
