import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from conftest import make_pattern
from registry.pattern_registry import PatternRegistry, RegistryError, get_registry


def test_list_returns_declaration_order(xyz_registry, xyz_patterns):
    assert xyz_registry.list() == xyz_patterns
    assert [p.id for p in xyz_registry.list()] == ["x", "y", "z"]


def test_list_is_stable_across_calls(xyz_registry):
    first = xyz_registry.list()
    second = xyz_registry.list()
    assert first == second
    assert all(a is b for a, b in zip(first, second))


def test_list_returns_a_copy(xyz_registry):
    listed = xyz_registry.list()
    listed.clear()
    assert len(xyz_registry.list()) == 3


def test_get_returns_matching_pattern(xyz_registry, xyz_patterns):
    assert xyz_registry.get("y") is xyz_patterns[1]


def test_get_missing_id_returns_none(xyz_registry):
    assert xyz_registry.get("w") is None
    assert xyz_registry.get("") is None


def test_related_to_excludes_self_in_registry_order(xyz_registry):
    related = xyz_registry.related_to("x", 2)
    assert [p.id for p in related] == ["y", "z"]


def test_related_to_middle_pattern(xyz_registry):
    assert [p.id for p in xyz_registry.related_to("y", 2)] == ["x", "z"]


def test_related_to_truncates_to_limit(xyz_registry):
    assert [p.id for p in xyz_registry.related_to("z", 1)] == ["x"]


def test_related_to_large_limit_returns_all_others(xyz_registry):
    related = xyz_registry.related_to("x", 10)
    assert [p.id for p in related] == ["y", "z"]


@pytest.mark.parametrize("limit", [0, -1])
def test_related_to_non_positive_limit_is_empty(xyz_registry, limit):
    assert xyz_registry.related_to("x", limit) == []


def test_related_to_unknown_id_keeps_everything(xyz_registry):
    assert [p.id for p in xyz_registry.related_to("w", 5)] == ["x", "y", "z"]


@pytest.mark.parametrize("pattern_id", ["x", "y", "z"])
@pytest.mark.parametrize("limit", [0, 1, 2, 3, 5])
def test_related_to_length_property(xyz_registry, pattern_id, limit):
    related = xyz_registry.related_to(pattern_id, limit)
    assert len(related) == min(limit, len(xyz_registry) - 1)
    assert all(p.id != pattern_id for p in related)


def test_duplicate_ids_rejected():
    with pytest.raises(RegistryError, match="Duplicate"):
        PatternRegistry([make_pattern("a"), make_pattern("a")])


@pytest.mark.parametrize("bad_id", ["", "Has Space", "UPPER", "slash/id", "-leading"])
def test_non_url_safe_ids_rejected(bad_id):
    with pytest.raises(RegistryError):
        PatternRegistry([make_pattern("ok", id=bad_id)])


def test_unknown_category_rejected():
    with pytest.raises(RegistryError, match="category"):
        PatternRegistry([make_pattern("a", category="DEBUGGING")])


def test_registry_error_is_value_error():
    assert issubclass(RegistryError, ValueError)


def test_container_helpers(xyz_registry):
    assert len(xyz_registry) == 3
    assert "y" in xyz_registry
    assert "w" not in xyz_registry
    assert [p.id for p in xyz_registry] == ["x", "y", "z"]


def test_empty_registry():
    registry = PatternRegistry([])
    assert registry.list() == []
    assert registry.get("x") is None
    assert registry.related_to("x", 2) == []


def test_default_registry_is_cached():
    assert get_registry() is get_registry()
