import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from catalog import DEFAULT_PATTERNS, PRIORITY_PATTERN_IDS
from registry import get_registry
from schemas.patterns import SUPPORTED_LANGUAGES, PatternCategory

EXPECTED_ORDER = [
    "async-promise-hell",
    "memory-leaks",
    "api-integration",
    "state-management",
    "performance-bottleneck",
    "stack-trace",
]


def test_catalog_declaration_order():
    assert [p.id for p in DEFAULT_PATTERNS] == EXPECTED_ORDER
    assert [p.id for p in get_registry().list()] == EXPECTED_ORDER


def test_catalog_ids_are_unique():
    ids = [p.id for p in DEFAULT_PATTERNS]
    assert len(ids) == len(set(ids))


def test_priority_ids_exist_in_catalog():
    registry = get_registry()
    assert all(pattern_id in registry for pattern_id in PRIORITY_PATTERN_IDS)


@pytest.mark.parametrize("pattern", DEFAULT_PATTERNS, ids=lambda p: p.id)
def test_catalog_entries_are_complete(pattern):
    assert pattern.title.strip()
    assert pattern.description.strip()
    assert isinstance(pattern.category, PatternCategory)
    assert pattern.diagram.startswith("https://")
    assert pattern.use_cases
    assert pattern.best_practices
    assert pattern.common_pitfalls
    assert len(pattern.code_examples) == 2
    for example in pattern.code_examples:
        assert example.language in SUPPORTED_LANGUAGES
        assert example.code.strip()
        assert example.explanation.strip()
    assert pattern.implementation.languages() == ("typescript", "python")


def test_catalog_covers_every_category():
    categories = {p.category for p in DEFAULT_PATTERNS}
    assert categories == set(PatternCategory)


def test_catalog_sequences_are_immutable():
    pattern = DEFAULT_PATTERNS[0]
    assert isinstance(pattern.use_cases, tuple)
    assert isinstance(pattern.code_examples, tuple)
    with pytest.raises(AttributeError):
        pattern.title = "changed"
