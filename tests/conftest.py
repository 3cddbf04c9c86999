"""
Shared pytest fixtures for the debug patterns catalog tests.
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from registry.pattern_registry import PatternRegistry
from schemas.patterns import CodeExample, Implementation, Pattern, PatternCategory


def make_pattern(pattern_id: str, **overrides) -> Pattern:
    fields = {
        "id": pattern_id,
        "title": f"Pattern {pattern_id.upper()}",
        "description": f"Description of {pattern_id}",
        "category": PatternCategory.WORKFLOW,
        "diagram": f"https://example.com/diagrams/{pattern_id}.svg",
        "use_cases": ["First use", "Second use", "Third use", "Fourth use"],
        "implementation": Implementation(
            typescript=f"// {pattern_id} in TypeScript",
            python=f"# {pattern_id} in Python",
        ),
        "code_examples": [
            CodeExample(
                title="Before",
                language="typescript",
                code="const a = 1;",
                explanation="The problem.",
            ),
            CodeExample(
                title="After",
                language="typescript",
                code="const a = 2;",
                explanation="The fix.",
            ),
        ],
        "best_practices": ["Do this"],
        "common_pitfalls": ["Avoid that"],
    }
    fields.update(overrides)
    return Pattern(**fields)


@pytest.fixture
def xyz_patterns():
    """Three patterns with ids x, y and z, in that order."""
    return [make_pattern("x"), make_pattern("y"), make_pattern("z")]


@pytest.fixture
def xyz_registry(xyz_patterns):
    return PatternRegistry(xyz_patterns)


@pytest.fixture
def typescript_only_pattern():
    return make_pattern(
        "ts-only",
        implementation=Implementation(typescript="// only TypeScript", python=None),
    )
