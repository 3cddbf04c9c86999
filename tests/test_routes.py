import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rendering.page_views import DetailView, NotFound
from rendering.routes import STATUS_NOT_FOUND, STATUS_OK, pattern_path, resolve_route


@pytest.mark.parametrize("path", ["/", "", "/index.html", "/?ref=nav"])
def test_index_lists_all_patterns(xyz_registry, path):
    response = resolve_route(xyz_registry, path)
    assert response.status == STATUS_OK
    assert response.found
    assert [t.id for t in response.view] == ["x", "y", "z"]


@pytest.mark.parametrize(
    "path",
    ["/patterns/y", "/patterns/y/", "/patterns/y/index.html", "/patterns/%79"],
)
def test_pattern_path_resolves_detail(xyz_registry, path):
    response = resolve_route(xyz_registry, path)
    assert response.status == STATUS_OK
    assert isinstance(response.view, DetailView)
    assert response.view.id == "y"


def test_unknown_pattern_is_404(xyz_registry):
    response = resolve_route(xyz_registry, "/patterns/w")
    assert response.status == STATUS_NOT_FOUND
    assert not response.found
    assert response.view == NotFound(requested_id="w")


@pytest.mark.parametrize(
    "path", ["/patterns", "/patterns/", "/patterns/x/extra", "/about", "/x"]
)
def test_other_paths_are_404(xyz_registry, path):
    response = resolve_route(xyz_registry, path)
    assert response.status == STATUS_NOT_FOUND
    assert isinstance(response.view, NotFound)


def test_related_limit_forwarded(xyz_registry):
    response = resolve_route(xyz_registry, "/patterns/x", related_limit=1)
    assert [p.id for p in response.view.related] == ["y"]


def test_every_listed_href_resolves_back(xyz_registry):
    tiles = resolve_route(xyz_registry, "/").view
    for tile in tiles:
        assert tile.href == pattern_path(tile.id)
        detail = resolve_route(xyz_registry, tile.href).view
        assert detail.pattern is xyz_registry.get(tile.id)


@pytest.mark.parametrize("path", ["//host/patterns/y", "//patterns/y", "///patterns/y"])
def test_double_slash_prefix_is_not_a_host(xyz_registry, path):
    response = resolve_route(xyz_registry, path)
    assert response.status == STATUS_NOT_FOUND
    assert response.view == NotFound(requested_id=None)


def test_query_and_fragment_dropped_from_detail_path(xyz_registry):
    response = resolve_route(xyz_registry, "/patterns/y?tab=code#examples")
    assert response.status == STATUS_OK
    assert response.view.id == "y"
