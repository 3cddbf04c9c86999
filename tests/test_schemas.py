import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from conftest import make_pattern
from schemas.patterns import Implementation, PatternCategory


def test_implementation_languages_skip_missing_entries():
    impl = Implementation(typescript="const a = 1;", python=None)
    assert impl.languages() == ("typescript",)
    assert impl.get("python") is None
    assert impl.get("typescript") == "const a = 1;"


def test_implementation_blank_text_counts_as_missing():
    impl = Implementation(typescript="   \n", python="x = 1")
    assert impl.languages() == ("python",)


def test_implementation_unknown_language_is_none():
    assert Implementation(typescript="a", python="b").get("rust") is None


def test_empty_implementation():
    assert Implementation().is_empty()
    assert not Implementation(python="pass").is_empty()


def test_pattern_coerces_lists_to_tuples():
    pattern = make_pattern("a", use_cases=["one", "two"], best_practices=[])
    assert pattern.use_cases == ("one", "two")
    assert pattern.best_practices == ()


def test_reduced_shape_pattern_has_empty_defaults():
    pattern = make_pattern(
        "reduced",
        use_cases=(),
        implementation=Implementation(),
        best_practices=(),
        common_pitfalls=(),
    )
    assert pattern.implementation.languages() == ()
    assert len(pattern.code_examples) == 2


def test_category_renders_as_plain_value():
    assert str(PatternCategory.RUNTIME) == "RUNTIME"
    assert PatternCategory("STATE") is PatternCategory.STATE


def test_summary_dict():
    summary = make_pattern(
        "a", implementation=Implementation(python="pass")
    ).to_summary_dict()
    assert summary == {
        "id": "a",
        "title": "Pattern A",
        "category": "WORKFLOW",
        "use_cases": 4,
        "code_examples": 2,
        "languages": "Python",
    }
