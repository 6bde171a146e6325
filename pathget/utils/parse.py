"""
Utility functions to parse and coerce values from the command line and config files.
"""
from typing import Any
import yaml


def as_bool(v: Any) -> bool | None:
    """Helper converts various values to bool."""
    if v is None:
        return None
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in {'1', 'true', 'yes', 'on'}:
            return True
        if s in {'0', 'false', 'no', 'off', 'null'}:
            return False
    if isinstance(v, (int, float)) and v in {0, 1}:
        return v != 0
    raise ValueError(f"Expected bool-like value, got {v!r}")


def parse_scalar(text: str | None) -> Any:
    """
    Interpret a command-line value the way YAML would: '42' -> 42,
    'null' -> None, '[1, 2]' -> [1, 2]. Unparseable text stays a string.
    """
    if text is None:
        return None
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return text
