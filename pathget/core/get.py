"""
Read nested values out of dicts, sequences and plain objects.
"""
from collections.abc import Mapping, Sequence
import logging
from typing import Any

from pathget.core.keys import cast_path, to_key


class _Missing:
    """Marker for a value that does not exist (as opposed to a stored None)."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def _as_index(key: Any) -> int | None:
    """Non-negative list index from an int or a decimal string, else None."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None


def _alternate_key(key: Any) -> Any:
    """The other spelling of an integer-like key: 0 <-> '0'."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return str(key)
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None


def resolve_key(value: Any, key: Any, *, attribute_access: bool = True) -> Any:
    """
    Look up a single key on `value`, returning MISSING rather than raising.

    Mappings are indexed by key (retrying integer-like keys in their other
    form), sequences by non-negative index, and anything else by public
    attribute name.
    """
    key = to_key(key)

    if isinstance(value, Mapping):
        if key in value:
            return value[key]
        alt = _alternate_key(key)
        if alt is not None and alt in value:
            return value[alt]
        return MISSING

    if isinstance(value, Sequence):
        index = _as_index(key)
        if index is not None:
            return value[index] if index < len(value) else MISSING
        # only namedtuple fields resolve by name; methods like list.count do not
        if key not in getattr(type(value), "_fields", ()):
            return MISSING

    if attribute_access and isinstance(key, str) and key and not key.startswith("_"):
        return getattr(value, key, MISSING)
    return MISSING


def base_get(obj: Any, path: Any, *, attribute_access: bool = True) -> Any:
    """
    Walk `path` through `obj`. Returns MISSING unless every key resolved.

    An empty path resolves to MISSING rather than to `obj` itself.
    """
    keys = cast_path(path, obj)
    length = len(keys)
    index = 0
    current = obj
    while current is not None and index < length:
        current = resolve_key(current, keys[index], attribute_access=attribute_access)
        index += 1
        if current is MISSING:
            logging.debug("Path %r stopped at key %r", path, keys[index - 1])
            return MISSING
    if index and index == length:
        return current
    return MISSING


def get(obj: Any, path: Any, default: Any = None, *, attribute_access: bool = True) -> Any:
    """
    Get the value at `path` of `obj`, or `default` if it does not exist.

    `path` is a list/tuple of keys or a string such as 'a[0].b.c'. A stored
    None is returned as-is; only missing values are replaced by `default`.

    >>> get({'a': [{'b': {'c': 3}}]}, 'a[0].b.c')
    3
    >>> get({'a': [{'b': {'c': 3}}]}, ['a', '0', 'b', 'c'])
    3
    >>> get({}, 'a.b.c', 'default')
    'default'
    """
    if obj is None:
        return default
    result = base_get(obj, path, attribute_access=attribute_access)
    return default if result is MISSING else result


def has(obj: Any, path: Any, *, attribute_access: bool = True) -> bool:
    """True if `path` resolves on `obj`, even to None."""
    if obj is None:
        return False
    return base_get(obj, path, attribute_access=attribute_access) is not MISSING
