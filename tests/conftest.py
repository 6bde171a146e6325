"""
Global fixtures live here

Sample documents shared by the lookup and CLI tests.
"""
import json
import pytest
from pathlib import Path

from pathget.core.paths import clear_path_cache


@pytest.fixture
def nested() -> dict:
    """The canonical example document."""
    return {"a": [{"b": {"c": 3}}]}


@pytest.fixture(autouse=True)
def fresh_path_cache():
    """Each test starts with an empty parse cache."""
    clear_path_cache()
    yield
    clear_path_cache()


@pytest.fixture
def json_doc(tmp_path: Path) -> Path:
    """A JSON document on disk for CLI tests."""
    path = tmp_path / "doc.json"
    data = {
        "a": [{"b": {"c": 3}}],
        "empty": None,
        "dotted.key": "flat",
        "name": "pathget",
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
