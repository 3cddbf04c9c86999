import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from conftest import make_pattern
from registry.pattern_registry import PatternRegistry
from rendering.page_views import NotFound, build_detail_view, build_list_view
from rendering.static_site import (
    export_site,
    render_detail_html,
    render_index_html,
    render_not_found_html,
)
from utils.file_ops import page_file_for

SITE = {"site_title": "Debug Patterns", "footer_text": "footer"}


def test_index_html_contains_every_tile_in_order(xyz_registry):
    page = render_index_html(
        build_list_view(xyz_registry), site_description="Intro.", **SITE
    )
    positions = [page.index(f'href="/patterns/{pid}"') for pid in ("x", "y", "z")]
    assert positions == sorted(positions)
    assert "https://example.com/diagrams/x.svg" in page
    assert "WORKFLOW" in page


def test_index_html_escapes_text():
    registry = PatternRegistry(
        [make_pattern("a", title="<script>alert(1)</script>")]
    )
    page = render_index_html(
        build_list_view(registry), site_description="Intro.", **SITE
    )
    assert "<script>alert(1)</script>" not in page
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page


def test_detail_html_sections(xyz_registry):
    page = render_detail_html(build_detail_view(xyz_registry, "x"), **SITE)
    for heading in (
        "Diagram Explanation",
        "Code Examples",
        "Implementation (TypeScript)",
        "Implementation (Python)",
        "How to Use This Pattern",
        "Common Pitfalls",
        "Best Practices",
        "Related Patterns",
    ):
        assert heading in page
    assert 'href="/patterns/y"' in page
    assert 'href="/patterns/z"' in page
    assert "data-copy" in page


def test_detail_html_without_python(typescript_only_pattern):
    registry = PatternRegistry([typescript_only_pattern])
    page = render_detail_html(build_detail_view(registry, "ts-only"), **SITE)
    assert "Implementation (TypeScript)" in page
    assert "Implementation (Python)" not in page
    assert "Related Patterns" not in page


def test_not_found_html():
    page = render_not_found_html(NotFound(requested_id="nope"), **SITE)
    assert "404 - Page Not Found" in page
    assert "nope" in page
    assert 'href="/"' in page


def test_export_site_writes_all_pages(tmp_path, xyz_registry):
    written = export_site(
        xyz_registry, tmp_path, site_description="Intro.", **SITE
    )
    expected = [
        tmp_path / "index.html",
        tmp_path / "patterns" / "x" / "index.html",
        tmp_path / "patterns" / "y" / "index.html",
        tmp_path / "patterns" / "z" / "index.html",
        tmp_path / "404.html",
    ]
    assert written == expected
    assert all(path.exists() for path in expected)
    assert "Pattern Y" in (tmp_path / "patterns" / "y" / "index.html").read_text(
        encoding="utf-8"
    )


def test_page_file_for_paths(tmp_path):
    assert page_file_for(tmp_path, "/") == tmp_path / "index.html"
    assert page_file_for(tmp_path, "/patterns/a") == tmp_path / "patterns" / "a" / "index.html"
    assert page_file_for(tmp_path, "/404.html") == tmp_path / "404.html"
    assert page_file_for(tmp_path, "/../escape") == tmp_path / "escape" / "index.html"
