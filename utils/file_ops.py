# utils/file_ops.py
# Lightweight filesystem helpers used by the static site export.

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

__all__ = ["page_file_for", "write_text"]


def page_file_for(out_dir: PathLike, href: str) -> Path:
    """
    Map a site path onto the file that serves it from a static host.
    - "/" maps to index.html at the root.
    - "/patterns/foo" maps to patterns/foo/index.html.
    - A path ending in ".html" is written as-is.

    Examples:
        page_file_for("site", "/patterns/memory-leaks") -> site/patterns/memory-leaks/index.html
    """
    root = Path(out_dir)
    parts = [p for p in (href or "/").split("/") if p and p not in (".", "..")]
    if parts and parts[-1].endswith(".html"):
        return root.joinpath(*parts)
    return root.joinpath(*parts, "index.html")


def write_text(path: PathLike, text: str, *, encoding: str = "utf-8") -> None:
    """
    Write text to a file, creating parent directories if needed.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding=encoding)
