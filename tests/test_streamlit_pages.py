import inspect
import sys
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from catalog import DEFAULT_PATTERNS
from catalog.patterns import MEMORY_LEAKS

DASHBOARD = PROJECT_ROOT / "streamlit_app" / "Dashboard.py"
DETAIL_PAGE = PROJECT_ROOT / "streamlit_app" / "pages" / "01_Pattern_Detail.py"
SELECTED_PATTERN_KEY = "selected_pattern_id"


@pytest.fixture
def detail_app():
    return AppTest.from_file(str(DETAIL_PAGE), default_timeout=30)


def test_installed_streamlit_sizes_images_to_container():
    assert "use_container_width" in inspect.signature(st.image).parameters


def test_dashboard_renders_overview_table():
    at = AppTest.from_file(str(DASHBOARD), default_timeout=30).run()
    assert not at.exception

    df = at.dataframe[0].value
    assert list(df.columns) == [
        "ID",
        "Title",
        "Category",
        "Use Cases",
        "Examples",
        "Languages",
    ]
    assert list(df["ID"]) == [p.id for p in DEFAULT_PATTERNS]
    assert list(df["Examples"]) == [len(p.code_examples) for p in DEFAULT_PATTERNS]


def test_detail_page_moves_hand_off_into_query_string(detail_app):
    detail_app.session_state[SELECTED_PATTERN_KEY] = MEMORY_LEAKS.id
    detail_app.run()

    assert not detail_app.exception
    assert detail_app.title[0].value == MEMORY_LEAKS.title
    assert detail_app.query_params["id"] == [MEMORY_LEAKS.id]
    assert SELECTED_PATTERN_KEY not in detail_app.session_state


def test_detail_page_without_id_is_404_after_earlier_visit(detail_app):
    detail_app.session_state[SELECTED_PATTERN_KEY] = MEMORY_LEAKS.id
    detail_app.run()

    # Reopening the page from the sidebar drops the query string
    detail_app.query_params = {}
    detail_app.run()

    assert not detail_app.exception
    assert detail_app.header[0].value == "404 - Page Not Found"
    assert len(detail_app.title) == 0


def test_detail_page_unknown_id_is_404(detail_app):
    detail_app.query_params["id"] = "no-such-pattern"
    detail_app.run()

    assert not detail_app.exception
    assert detail_app.header[0].value == "404 - Page Not Found"
    assert any("no-such-pattern" in c.value for c in detail_app.caption)
