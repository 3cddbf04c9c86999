"""Map site paths (``/`` and ``/patterns/{id}``) onto page views."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union
from urllib.parse import unquote

from registry.pattern_registry import PatternRegistry

from .page_views import (
    DEFAULT_RELATED_LIMIT,
    DEFAULT_USE_CASE_PREVIEW,
    DetailView,
    NotFound,
    PatternTile,
    build_detail_view,
    build_list_view,
    pattern_href,
)

INDEX_PATH = "/"
PATTERNS_PREFIX = "/patterns/"

STATUS_OK = 200
STATUS_NOT_FOUND = 404


@dataclass(frozen=True)
class PageResponse:
    status: int
    view: Union[List[PatternTile], DetailView, NotFound]

    @property
    def found(self) -> bool:
        return self.status == STATUS_OK


def pattern_path(pattern_id: str) -> str:
    return pattern_href(pattern_id)


def _normalise_path(path: Optional[str]) -> str:
    # Drop query string and fragment, then any trailing index.html.
    # A leading "//" stays part of the path, never a host.
    raw = re.split(r"[?#]", path or "", maxsplit=1)[0] or INDEX_PATH
    if not raw.startswith("/"):
        raw = "/" + raw
    if raw.endswith("/index.html"):
        raw = raw[: -len("index.html")]
    if raw != INDEX_PATH:
        raw = raw.rstrip("/")
    return raw or INDEX_PATH


def resolve_route(
    registry: PatternRegistry,
    path: Optional[str],
    *,
    use_case_preview: int = DEFAULT_USE_CASE_PREVIEW,
    related_limit: int = DEFAULT_RELATED_LIMIT,
    priority_ids: Iterable[str] = (),
) -> PageResponse:
    """Resolve a request path; unknown paths and ids yield a 404 response."""
    normalised = _normalise_path(path)

    if normalised == INDEX_PATH:
        tiles = build_list_view(
            registry, use_case_preview=use_case_preview, priority_ids=priority_ids
        )
        return PageResponse(STATUS_OK, tiles)

    if normalised.startswith(PATTERNS_PREFIX):
        pattern_id = unquote(normalised[len(PATTERNS_PREFIX) :])
        if pattern_id and "/" not in pattern_id:
            view = build_detail_view(registry, pattern_id, related_limit=related_limit)
            status = STATUS_OK if isinstance(view, DetailView) else STATUS_NOT_FOUND
            return PageResponse(status, view)

    return PageResponse(STATUS_NOT_FOUND, NotFound(requested_id=None))


__all__ = [
    "INDEX_PATH",
    "PATTERNS_PREFIX",
    "STATUS_NOT_FOUND",
    "STATUS_OK",
    "PageResponse",
    "pattern_path",
    "resolve_route",
]
