import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import _int_env


def test_int_env_reads_value(monkeypatch):
    monkeypatch.setenv("RELATED_PATTERNS_LIMIT", "4")
    assert _int_env("RELATED_PATTERNS_LIMIT", 2) == 4


def test_int_env_missing_uses_default(monkeypatch):
    monkeypatch.delenv("RELATED_PATTERNS_LIMIT", raising=False)
    assert _int_env("RELATED_PATTERNS_LIMIT", 2) == 2


def test_int_env_invalid_uses_default(monkeypatch):
    monkeypatch.setenv("USE_CASE_PREVIEW_COUNT", "three")
    assert _int_env("USE_CASE_PREVIEW_COUNT", 3) == 3
