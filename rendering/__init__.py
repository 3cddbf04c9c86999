"""View composition, routing and static HTML export for the pattern catalog."""

from .page_views import (
    DetailView,
    NotFound,
    PatternTile,
    build_detail_view,
    build_list_view,
)
from .routes import PageResponse, pattern_path, resolve_route
from .static_site import export_site

__all__ = [
    "DetailView",
    "NotFound",
    "PageResponse",
    "PatternTile",
    "build_detail_view",
    "build_list_view",
    "export_site",
    "pattern_path",
    "resolve_route",
]
