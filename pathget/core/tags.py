"""
Type tags for arbitrary values, in the "[object X]" form.

Used by the key heuristic to spot symbol-like keys, and by the CLI to
describe resolved values.
"""
from collections.abc import Mapping, Sequence, Set
from enum import Enum
import inspect
from typing import Any

NULL_TAG = "[object Null]"
BOOLEAN_TAG = "[object Boolean]"
NUMBER_TAG = "[object Number]"
STRING_TAG = "[object String]"
SYMBOL_TAG = "[object Symbol]"
ARRAY_TAG = "[object Array]"
MAP_TAG = "[object Map]"
SET_TAG = "[object Set]"
FUNCTION_TAG = "[object Function]"
PROMISE_TAG = "[object Promise]"
OBJECT_TAG = "[object Object]"

# Classes may declare their own tag, e.g. __pathget_tag__ = "Symbol"
TAG_ATTRIBUTE = "__pathget_tag__"


def base_get_tag(value: Any) -> str:
    """Tag computed from the value's type alone, ignoring any override."""
    if value is None:
        return NULL_TAG
    # IntEnum and StrEnum members are symbols, not numbers or strings
    if isinstance(value, Enum):
        return SYMBOL_TAG
    # bool before numbers: bool is a subclass of int
    if isinstance(value, bool):
        return BOOLEAN_TAG
    if isinstance(value, (int, float)):
        return NUMBER_TAG
    if isinstance(value, str):
        return STRING_TAG
    if isinstance(value, dict):
        return OBJECT_TAG
    if isinstance(value, Mapping):
        return MAP_TAG
    if isinstance(value, (list, tuple)):
        return ARRAY_TAG
    if isinstance(value, Set):
        return SET_TAG
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ARRAY_TAG
    if inspect.isawaitable(value):
        return PROMISE_TAG
    if callable(value):
        return FUNCTION_TAG
    return OBJECT_TAG


def get_tag(value: Any) -> str:
    """
    Return the "[object X]" tag of a value.

    A ``__pathget_tag__`` attribute on the value's class takes precedence
    over the computed tag. Instance attributes are ignored so data objects
    cannot masquerade as another type.
    """
    override = getattr(type(value), TAG_ATTRIBUTE, None)
    if isinstance(override, str) and override:
        return f"[object {override}]"
    return base_get_tag(value)


def is_symbol(value: Any) -> bool:
    """Symbols are enum members or anything tagged as one."""
    return isinstance(value, Enum) or get_tag(value) == SYMBOL_TAG
