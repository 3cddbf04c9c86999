#!/usr/bin/env python3
"""Export the debugging pattern catalog as a static HTML site."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure repository root is on the import path
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from catalog import PRIORITY_PATTERN_IDS  # noqa: E402
from config import (  # noqa: E402
    FOOTER_TEXT,
    RELATED_PATTERNS_LIMIT,
    SITE_DESCRIPTION,
    SITE_TITLE,
    STATIC_SITE_DIR,
    USE_CASE_PREVIEW_COUNT,
    logger,
)
from registry import get_registry  # noqa: E402
from rendering.static_site import export_site  # noqa: E402


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write index.html, one page per pattern and 404.html."
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=STATIC_SITE_DIR,
        help=f"Directory to write the site into (default: {STATIC_SITE_DIR}).",
    )
    parser.add_argument(
        "--related-limit",
        type=int,
        default=RELATED_PATTERNS_LIMIT,
        help="Number of related patterns shown on each detail page.",
    )
    parser.add_argument(
        "--use-case-preview",
        type=int,
        default=USE_CASE_PREVIEW_COUNT,
        help="Number of use cases shown on each tile of the index page.",
    )
    args = parser.parse_args(argv)

    written = export_site(
        get_registry(),
        args.output,
        site_title=SITE_TITLE,
        site_description=SITE_DESCRIPTION,
        footer_text=FOOTER_TEXT,
        use_case_preview=args.use_case_preview,
        related_limit=args.related_limit,
        priority_ids=PRIORITY_PATTERN_IDS,
    )

    print(f"✅ Wrote {len(written)} pages to {args.output.resolve()}")
    for path in written:
        logger.debug(f"  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
