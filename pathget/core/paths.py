"""
Parse string paths like 'a[0].b["c.d"]' into a list of keys.
"""
from functools import lru_cache
import re

# Parsed paths are cached; the cache is bounded so arbitrary user input
# cannot grow it without limit.
MAX_MEMOIZE_SIZE = 500

CHAR_DOT = "."

# Three alternatives, tried left to right:
#   a bare property name:            foo
#   a bracketed expression:          [0]  or  ["quoted.key"]  or  ['it\'s']
#   an empty key between separators: the gap in 'a..b', 'a.' or 'a[]'
RE_PROP_NAME = re.compile(
    r'[^.\[\]]+'
    r'|\[(?:([^"\'][^\[]*)|(["\'])((?:(?!\2)[^\\]|\\.)*?)\2)\]'
    r'|(?=(?:\.|\[\])(?:\.|\[\]|\Z))'
)
RE_ESCAPE_CHAR = re.compile(r'\\(\\)?')


@lru_cache(maxsize=MAX_MEMOIZE_SIZE)
def _parse(string: str) -> tuple[str, ...]:
    result = []
    if string.startswith(CHAR_DOT):
        result.append("")
    for match in RE_PROP_NAME.finditer(string):
        expression, quote, sub_string = match.groups()
        if quote:
            key = RE_ESCAPE_CHAR.sub(r'\1', sub_string)
        elif expression:
            key = expression.strip()
        else:
            key = match.group(0)
        result.append(key)
    return tuple(result)


def string_to_path(string: str) -> list[str]:
    """
    Split a dotted/bracketed path string into its keys.

    >>> string_to_path('a[0].b.c')
    ['a', '0', 'b', 'c']
    >>> string_to_path('a["b.c"]')
    ['a', 'b.c']

    Every key is returned as a string, including array indices. A leading
    dot and consecutive separators produce empty-string keys.
    """
    if not isinstance(string, str):
        raise TypeError(f"Expected a path string, got {type(string).__name__}")
    # fresh list so callers can't corrupt the cached tuple
    return list(_parse(string))


def clear_path_cache() -> None:
    """Drop all memoized parse results."""
    _parse.cache_clear()
