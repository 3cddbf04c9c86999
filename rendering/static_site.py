"""Render the catalog as plain HTML files for a static file host."""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from registry.pattern_registry import PatternRegistry
from schemas.patterns import LANGUAGE_LABELS, CodeExample
from utils.file_ops import page_file_for, write_text

from .page_views import (
    DEFAULT_RELATED_LIMIT,
    DEFAULT_USE_CASE_PREVIEW,
    DetailView,
    NotFound,
    PatternTile,
    build_detail_view,
    build_list_view,
)
from .routes import INDEX_PATH, pattern_path

logger = logging.getLogger(__name__)

NOT_FOUND_FILE = "404.html"

STYLE = """
body { background: #09090b; color: #e4e4e7; font-family: 'JetBrains Mono', monospace; margin: 0; }
nav, main, footer { max-width: 1000px; margin: 0 auto; padding: 1rem 1.5rem; }
nav a { color: #e4e4e7; text-decoration: none; font-size: 1.1rem; }
a { color: #a1a1aa; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(420px, 1fr)); gap: 1.5rem; }
.card { border: 1px solid #27272a; border-radius: 8px; overflow: hidden; display: block; text-decoration: none; }
.card img, .diagram img { width: 100%; aspect-ratio: 2 / 1; object-fit: contain; background: #18181b; }
.card .body { padding: 1.5rem; color: #a1a1aa; }
.card h3 { color: #e4e4e7; margin: 0; }
.badge { background: #27272a; color: #a1a1aa; border-radius: 4px; padding: 2px 8px; font-size: 0.75rem; letter-spacing: 0.05em; }
.code { position: relative; background: #18181b; border-radius: 8px; margin: 1rem 0; }
.code pre { padding: 1rem; overflow-x: auto; margin: 0; }
.code button { position: absolute; right: 0.5rem; top: 0.5rem; }
footer { text-align: center; color: #71717a; border-top: 1px solid #27272a; }
"""

# Clipboard failures only reach the console
COPY_SCRIPT = """
document.querySelectorAll('button[data-copy]').forEach(function (button) {
  button.addEventListener('click', async function () {
    var code = button.parentElement.querySelector('code').innerText;
    try {
      await navigator.clipboard.writeText(code);
      button.textContent = 'Copied!';
      setTimeout(function () { button.textContent = 'Copy'; }, 2000);
    } catch (err) {
      console.error('Failed to copy code:', err);
    }
  });
});
"""


def _e(value: object) -> str:
    return html.escape(str(value), quote=True)


def _list_items(items: Iterable[str]) -> str:
    return "\n".join(f"<li>{_e(item)}</li>" for item in items)


def _page(title: str, body: str, *, site_title: str, footer_text: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{_e(title)}</title>
<style>{STYLE}</style>
</head>
<body>
<nav><a href="{INDEX_PATH}">{_e(site_title)}</a></nav>
<main>
{body}
</main>
<footer><p>{_e(footer_text)}</p></footer>
<script>{COPY_SCRIPT}</script>
</body>
</html>
"""


def _code_block(code: str, language: str, title: str = "") -> str:
    header = f"<h3>{_e(title)} <span class=\"badge\">{_e(language)}</span></h3>" if title else ""
    return (
        f"{header}<div class=\"code\"><button type=\"button\" data-copy>Copy</button>"
        f"<pre><code class=\"language-{_e(language)}\">{_e(code.strip())}</code></pre></div>"
    )


def _tile_html(tile: PatternTile) -> str:
    loading = "eager" if tile.priority else "lazy"
    use_cases = (
        f"<ul>{_list_items(tile.use_cases)}</ul>" if tile.use_cases else ""
    )
    return f"""<a class="card" href="{_e(tile.href)}">
<img src="{_e(tile.diagram)}" alt="{_e(tile.title)} workflow diagram" loading="{loading}">
<div class="body">
<h3>{_e(tile.title)} <span class="badge">{_e(tile.category)}</span></h3>
<p>{_e(tile.description)}</p>
{use_cases}
</div>
</a>"""


def render_index_html(
    tiles: Sequence[PatternTile],
    *,
    site_title: str,
    site_description: str,
    footer_text: str,
) -> str:
    cards = "\n".join(_tile_html(tile) for tile in tiles)
    body = f"""<h1>Explore Debug Patterns</h1>
<p>{_e(site_description)} These debug patterns are inspired by real-world scenarios.</p>
<div class="grid">
{cards}
</div>"""
    return _page(site_title, body, site_title=site_title, footer_text=footer_text)


def _examples_html(examples: Sequence[CodeExample]) -> str:
    blocks = []
    for example in examples:
        blocks.append(
            _code_block(example.code, example.language, example.title)
            + f"\n<p>{_e(example.explanation)}</p>"
        )
    return "\n".join(blocks)


def render_detail_html(view: DetailView, *, site_title: str, footer_text: str) -> str:
    pattern = view.pattern
    sections = [
        f"<p><a href=\"{INDEX_PATH}\">&larr; Back to patterns</a></p>",
        f"<h1>{_e(pattern.title)} <span class=\"badge\">{_e(pattern.category)}</span></h1>",
        f"<p>{_e(pattern.description)}</p>",
        f"<div class=\"diagram\"><img src=\"{_e(pattern.diagram)}\" "
        f"alt=\"Diagram for {_e(pattern.title)}\"></div>",
        f"<h2>Diagram Explanation</h2>\n<p>{_e(view.diagram_explanation)}</p>",
    ]
    if pattern.use_cases:
        sections.append(f"<h2>Use Cases</h2>\n<ul>{_list_items(pattern.use_cases)}</ul>")
    if pattern.code_examples:
        sections.append(f"<h2>Code Examples</h2>\n{_examples_html(pattern.code_examples)}")
    for language in view.languages:
        code = pattern.implementation.get(language) or ""
        sections.append(
            f"<h2>Implementation ({_e(LANGUAGE_LABELS[language])})</h2>\n"
            + _code_block(code, language)
        )
    sections.append(
        f"<h2>How to Use This Pattern</h2>\n"
        f"<p>To effectively use the {_e(pattern.title)} pattern in your debugging process:</p>\n"
        f"<ul>{_list_items(view.how_to_use)}</ul>"
    )
    if pattern.common_pitfalls:
        sections.append(
            f"<h2>Common Pitfalls</h2>\n<ul>{_list_items(pattern.common_pitfalls)}</ul>"
        )
    if pattern.best_practices:
        sections.append(
            f"<h2>Best Practices</h2>\n<ul>{_list_items(pattern.best_practices)}</ul>"
        )
    if view.related:
        related = "\n".join(
            f"<a class=\"card\" href=\"{_e(pattern_path(p.id))}\"><div class=\"body\">"
            f"<h3>{_e(p.title)}</h3><p>{_e(p.description)}</p></div></a>"
            for p in view.related
        )
        sections.append(f"<h2>Related Patterns</h2>\n<div class=\"grid\">{related}</div>")

    title = f"{pattern.title} | {site_title}"
    return _page(title, "\n".join(sections), site_title=site_title, footer_text=footer_text)


def render_not_found_html(
    view: NotFound | None = None, *, site_title: str, footer_text: str
) -> str:
    missing = ""
    if view is not None and view.requested_id:
        missing = f"<p>No pattern is registered as <code>{_e(view.requested_id)}</code>.</p>\n"
    body = f"""<h2>404 - Page Not Found</h2>
<p>The page you're looking for doesn't exist or has been moved.</p>
{missing}<p><a href="{INDEX_PATH}">Go back to the homepage</a></p>"""
    return _page(
        f"Page Not Found | {site_title}", body, site_title=site_title, footer_text=footer_text
    )


def export_site(
    registry: PatternRegistry,
    out_dir: Path,
    *,
    site_title: str,
    site_description: str,
    footer_text: str,
    use_case_preview: int = DEFAULT_USE_CASE_PREVIEW,
    related_limit: int = DEFAULT_RELATED_LIMIT,
    priority_ids: Iterable[str] = (),
) -> List[Path]:
    """
    Write index.html, one page per pattern and 404.html under out_dir.

    Returns:
        List[Path]: every file written, index first and 404 last
    """
    out_dir = Path(out_dir)
    written: List[Path] = []

    tiles = build_list_view(
        registry, use_case_preview=use_case_preview, priority_ids=priority_ids
    )
    index_file = page_file_for(out_dir, INDEX_PATH)
    write_text(
        index_file,
        render_index_html(
            tiles,
            site_title=site_title,
            site_description=site_description,
            footer_text=footer_text,
        ),
    )
    written.append(index_file)

    for tile in tiles:
        view = build_detail_view(registry, tile.id, related_limit=related_limit)
        if not isinstance(view, DetailView):
            continue
        page_file = page_file_for(out_dir, tile.href)
        write_text(
            page_file,
            render_detail_html(view, site_title=site_title, footer_text=footer_text),
        )
        logger.debug(f"Wrote {page_file}")
        written.append(page_file)

    not_found_file = out_dir / NOT_FOUND_FILE
    write_text(
        not_found_file,
        render_not_found_html(site_title=site_title, footer_text=footer_text),
    )
    written.append(not_found_file)

    logger.info(f"Exported {len(written)} pages to {out_dir}")
    return written


__all__ = [
    "NOT_FOUND_FILE",
    "export_site",
    "render_detail_html",
    "render_index_html",
    "render_not_found_html",
]
