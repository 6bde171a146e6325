"""
Decide how a path value is turned into keys, and normalize individual keys.
"""
from collections.abc import Mapping
import logging
import math
import re
from typing import Any

from pathget.core.errors import PathTypeError
from pathget.core.paths import string_to_path
from pathget.core.tags import is_symbol

# A '.' or a bracket expression (optionally quoted) marks a deep path
RE_IS_DEEP_PROP = re.compile(r'\.|\[(?:[^\[\]]*|(["\'])(?:(?!\1)[^\\]|\\.)*?\1)\]')
RE_IS_PLAIN_PROP = re.compile(r'\w*', re.ASCII)


def _holds(obj: Any, key: str) -> bool:
    """True if obj already has `key` as a mapping key or attribute."""
    if isinstance(obj, Mapping):
        return key in obj
    return hasattr(obj, key)


def is_key(value: Any, obj: Any = None) -> bool:
    """
    Heuristic: should `value` be used as one key rather than parsed as a path?

    Scalars and symbols are always keys. Strings are keys when they are plain
    word characters (even if `obj` lacks them), when they contain no deep-path
    syntax, or when `obj` already holds that exact key.
    """
    if isinstance(value, (list, tuple)):
        return False
    if value is None or isinstance(value, (bool, int, float)) or is_symbol(value):
        return True
    if not isinstance(value, str):
        return False
    return (
        RE_IS_PLAIN_PROP.fullmatch(value) is not None
        or RE_IS_DEEP_PROP.search(value) is None
        or (obj is not None and _holds(obj, value))
    )


def to_key(value: Any) -> Any:
    """
    Normalize one path segment into a lookup key.

    Strings and symbols pass through. Integral floats become ints, except
    negative zero which becomes the string '-0' so it never matches index 0.
    Unhashable values are stringified.
    """
    if isinstance(value, str) or is_symbol(value):
        return value
    if isinstance(value, float):
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        if value.is_integer():
            return int(value)
        return value
    try:
        hash(value)
    except TypeError:
        return str(value)
    return value


def cast_path(value: Any, obj: Any = None) -> list:
    """Turn a path (list, tuple, single key or path string) into a list of keys."""
    if isinstance(value, (list, tuple)):
        return list(value)
    if is_key(value, obj):
        return [value]
    if isinstance(value, str):
        path = string_to_path(value)
        logging.debug("Parsed path %r into %s", value, path)
        return path
    raise PathTypeError(
        f"Path must be a string, a scalar key or a list of keys, got {type(value).__name__}"
    )
