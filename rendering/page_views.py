"""Page shapes for the list and detail views of the pattern catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from registry.pattern_registry import PatternRegistry
from schemas.patterns import Pattern, PatternCategory

logger = logging.getLogger(__name__)

DEFAULT_USE_CASE_PREVIEW = 3
DEFAULT_RELATED_LIMIT = 2

HOW_TO_USE_STEPS: Tuple[str, ...] = (
    "Identify the specific problem area in your code",
    "Apply the concepts shown in the diagram to your specific case",
    "Use appropriate tools and techniques as illustrated",
    "Iterate through the process, refining your approach as needed",
)


def pattern_href(pattern_id: str) -> str:
    return f"/patterns/{pattern_id}"


@dataclass(frozen=True)
class PatternTile:
    id: str
    title: str
    description: str
    category: PatternCategory
    diagram: str
    use_cases: Tuple[str, ...]
    href: str
    priority: bool = False


@dataclass(frozen=True)
class DetailView:
    pattern: Pattern
    related: Tuple[Pattern, ...]
    languages: Tuple[str, ...]
    diagram_explanation: str
    how_to_use: Tuple[str, ...] = HOW_TO_USE_STEPS

    @property
    def id(self) -> str:
        return self.pattern.id


@dataclass(frozen=True)
class NotFound:
    requested_id: Optional[str] = None


PageView = Union[DetailView, NotFound]


def diagram_explanation(pattern: Pattern) -> str:
    return (
        f"This diagram illustrates the key concepts and flow of the {pattern.title} "
        "pattern. It provides a visual representation of how different components "
        "interact and the overall structure of the debugging process."
    )


def build_tile(
    pattern: Pattern,
    *,
    use_case_preview: int = DEFAULT_USE_CASE_PREVIEW,
    priority_ids: Iterable[str] = (),
) -> PatternTile:
    preview = max(use_case_preview, 0)
    return PatternTile(
        id=pattern.id,
        title=pattern.title,
        description=pattern.description,
        category=pattern.category,
        diagram=pattern.diagram,
        use_cases=pattern.use_cases[:preview],
        href=pattern_href(pattern.id),
        priority=pattern.id in set(priority_ids),
    )


def build_list_view(
    registry: PatternRegistry,
    *,
    use_case_preview: int = DEFAULT_USE_CASE_PREVIEW,
    priority_ids: Iterable[str] = (),
) -> List[PatternTile]:
    """
    One summary tile per pattern, in registry order.
    No sorting or filtering happens here.
    """
    priority = frozenset(priority_ids)
    return [
        build_tile(p, use_case_preview=use_case_preview, priority_ids=priority)
        for p in registry.list()
    ]


def build_detail_view(
    registry: PatternRegistry,
    pattern_id: Optional[str],
    *,
    related_limit: int = DEFAULT_RELATED_LIMIT,
) -> PageView:
    """
    Resolve a pattern id into a DetailView, or NotFound when the id is
    missing or unknown.
    """
    pattern = registry.get(pattern_id) if pattern_id else None
    if pattern is None:
        logger.info(f"Pattern not found: {pattern_id!r}")
        return NotFound(requested_id=pattern_id)

    return DetailView(
        pattern=pattern,
        related=tuple(registry.related_to(pattern.id, related_limit)),
        languages=pattern.implementation.languages(),
        diagram_explanation=diagram_explanation(pattern),
    )


__all__ = [
    "DEFAULT_RELATED_LIMIT",
    "DEFAULT_USE_CASE_PREVIEW",
    "HOW_TO_USE_STEPS",
    "DetailView",
    "NotFound",
    "PageView",
    "PatternTile",
    "build_detail_view",
    "build_list_view",
    "build_tile",
    "diagram_explanation",
    "pattern_href",
]
