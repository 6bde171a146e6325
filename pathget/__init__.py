"""
pathget: safely read nested values by dotted/bracketed path.

    >>> from pathget import get
    >>> get({'a': [{'b': {'c': 3}}]}, 'a[0].b.c')
    3
"""
from importlib.metadata import version, PackageNotFoundError

from pathget.core.errors import PathGetError, PathTypeError, DocumentLoadError
from pathget.core.get import MISSING, get, has
from pathget.core.paths import string_to_path

try:
    __version__ = version("pathget")
except PackageNotFoundError:
    __version__ = "unknown"
__app_name__ = "pathget"

__all__ = [
    "MISSING",
    "DocumentLoadError",
    "PathGetError",
    "PathTypeError",
    "get",
    "has",
    "string_to_path",
]
