#!/usr/bin/env python3

"""Detail page for a single debugging pattern, addressed by ``?id=<pattern id>``."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import streamlit as st

# Ensure repository root on path for shared packages
CURRENT_DIR = Path(__file__).resolve()
REPO_ROOT = CURRENT_DIR.parents[2]
sys.path.insert(0, str(REPO_ROOT))

from config import FOOTER_TEXT, RELATED_PATTERNS_LIMIT, SITE_TITLE  # noqa: E402
from registry import get_registry  # noqa: E402
from rendering.page_views import DetailView, NotFound, build_detail_view  # noqa: E402
from schemas.patterns import LANGUAGE_LABELS  # noqa: E402

SELECTED_PATTERN_KEY = "selected_pattern_id"


def _requested_id() -> Optional[str]:
    # The Dashboard hand-off is read once; after that the id lives in the URL only
    handed_off = st.session_state.pop(SELECTED_PATTERN_KEY, None)
    return st.query_params.get("id") or handed_off or None


def _bullets(items) -> None:
    st.markdown("\n".join(f"- {item}" for item in items))


def _render_not_found(view: NotFound) -> None:
    st.header("404 - Page Not Found")
    st.write("The page you're looking for doesn't exist or has been moved.")
    if view.requested_id:
        st.caption(f"No pattern is registered as `{view.requested_id}`.")
    if st.button("🔙 Go back to the homepage"):
        st.switch_page("Dashboard.py")


def _render_implementation(view: DetailView) -> None:
    if not view.languages:
        return
    st.subheader("Implementation")
    # Only languages that actually have a listing are offered
    language = st.radio(
        "Language",
        options=list(view.languages),
        format_func=lambda lang: LANGUAGE_LABELS.get(lang, lang),
        horizontal=True,
        key=f"implementation_language_{view.id}",
        label_visibility="collapsed",
    )
    st.code(view.pattern.implementation.get(language) or "", language=language)


def _render_related(view: DetailView) -> None:
    if not view.related:
        return
    st.subheader("Related Patterns")
    cols = st.columns(len(view.related))
    for col, related in zip(cols, view.related):
        with col:
            with st.container(border=True):
                st.markdown(f"**{related.title}**")
                st.caption(related.description)
                if st.button("Open", key=f"related_{related.id}", use_container_width=True):
                    st.query_params["id"] = related.id
                    st.rerun()


def _render_detail(view: DetailView) -> None:
    pattern = view.pattern

    if st.button("← Back to patterns"):
        st.switch_page("Dashboard.py")

    title_col, badge_col = st.columns([5, 1])
    with title_col:
        st.title(pattern.title)
    with badge_col:
        st.markdown(f"`{pattern.category}`")
    st.write(pattern.description)

    st.image(pattern.diagram, use_container_width=True)

    st.subheader("Diagram Explanation")
    st.write(view.diagram_explanation)

    if pattern.use_cases:
        st.subheader("Use Cases")
        _bullets(pattern.use_cases)

    if pattern.code_examples:
        st.subheader("Code Examples")
        for example in pattern.code_examples:
            st.markdown(f"#### {example.title}")
            # st.code ships its own copy-to-clipboard button
            st.code(example.code.strip(), language=example.language)
            st.caption(example.explanation)

    _render_implementation(view)

    st.subheader("How to Use This Pattern")
    st.write(
        f"To effectively use the {pattern.title} pattern in your debugging process:"
    )
    _bullets(view.how_to_use)

    if pattern.common_pitfalls:
        st.subheader("Common Pitfalls")
        _bullets(pattern.common_pitfalls)

    if pattern.best_practices:
        st.subheader("Best Practices")
        _bullets(pattern.best_practices)

    st.divider()
    _render_related(view)


def main() -> None:
    st.set_page_config(page_title=SITE_TITLE, page_icon="🐞", layout="wide")

    pattern_id = _requested_id()
    view = build_detail_view(
        get_registry(), pattern_id, related_limit=RELATED_PATTERNS_LIMIT
    )

    if isinstance(view, DetailView):
        # Keep the URL shareable
        if st.query_params.get("id") != view.id:
            st.query_params["id"] = view.id
        _render_detail(view)
    else:
        _render_not_found(view)

    st.caption(FOOTER_TEXT)


if __name__ == "__main__":
    main()
