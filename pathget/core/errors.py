"""
Exceptions raised by pathget for invalid input.

Lookups themselves never raise; a missing key simply resolves to the default.
"""


class PathGetError(ValueError):
    """Base class for pathget errors."""


class PathTypeError(PathGetError, TypeError):
    """A path was given as a type that cannot be turned into keys."""


class DocumentLoadError(PathGetError):
    """A JSON/YAML document could not be read or parsed."""
