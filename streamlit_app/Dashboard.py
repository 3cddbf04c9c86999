#!/usr/bin/env python3

import os
import sys

# Add parent directory to Python path to find packages (MUST be before imports)
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from typing import List

import pandas as pd
import streamlit as st

from catalog import PRIORITY_PATTERN_IDS
from config import (
    FOOTER_TEXT,
    SITE_DESCRIPTION,
    SITE_TITLE,
    USE_CASE_PREVIEW_COUNT,
)
from registry import get_registry
from rendering.page_views import PatternTile, build_list_view
from schemas.patterns import Pattern

DETAIL_PAGE = "pages/01_Pattern_Detail.py"
SELECTED_PATTERN_KEY = "selected_pattern_id"

OVERVIEW_COLUMNS = {
    "id": "ID",
    "title": "Title",
    "category": "Category",
    "use_cases": "Use Cases",
    "code_examples": "Examples",
    "languages": "Languages",
}

# Configure the page
st.set_page_config(page_title=SITE_TITLE, page_icon="🐞", layout="wide")


def _open_pattern(pattern_id: str) -> None:
    st.session_state[SELECTED_PATTERN_KEY] = pattern_id
    st.switch_page(DETAIL_PAGE)


def _render_tile(tile: PatternTile) -> None:
    with st.container(border=True):
        st.image(tile.diagram, use_container_width=True)
        title_col, badge_col = st.columns([4, 1])
        with title_col:
            st.markdown(f"### {tile.title}")
        with badge_col:
            st.markdown(f"`{tile.category}`")
        st.write(tile.description)
        if tile.use_cases:
            st.markdown("\n".join(f"- {use_case}" for use_case in tile.use_cases))
        if st.button(
            "View pattern →", key=f"open_{tile.id}", use_container_width=True
        ):
            _open_pattern(tile.id)


def _render_overview(patterns: List[Pattern]) -> None:
    with st.expander(f"📋 Catalog overview ({len(patterns)} patterns)", expanded=False):
        df = pd.DataFrame([p.to_summary_dict() for p in patterns]).rename(
            columns=OVERVIEW_COLUMNS
        )
        st.dataframe(df, use_container_width=True, hide_index=True)

        csv = df.to_csv(index=False)
        st.download_button(
            label=f"📥 Download Catalog ({len(df)} patterns)",
            data=csv,
            file_name="debug_patterns.csv",
            mime="text/csv",
            use_container_width=True,
        )


def main():
    st.title("Explore Debug Patterns")
    st.markdown(
        f"{SITE_DESCRIPTION} These debug patterns are inspired by real-world scenarios."
    )

    registry = get_registry()
    tiles = build_list_view(
        registry,
        use_case_preview=USE_CASE_PREVIEW_COUNT,
        priority_ids=PRIORITY_PATTERN_IDS,
    )

    if not tiles:
        st.info("No debugging patterns are registered yet.")
        return

    # Two-column grid, registry order left-to-right
    for start in range(0, len(tiles), 2):
        cols = st.columns(2)
        for col, tile in zip(cols, tiles[start : start + 2]):
            with col:
                _render_tile(tile)

    st.markdown("---")
    _render_overview(registry.list())
    st.caption(FOOTER_TEXT)


if __name__ == "__main__":
    main()
