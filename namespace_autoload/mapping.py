"""Lexical mapping from relative symbol names to relative file paths."""

import os

DEFAULT_SEPARATOR = "."
DEFAULT_EXTENSION = ".py"


def map_to_relative_path(
    relative_name: str,
    separator: str = DEFAULT_SEPARATOR,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """Map a symbol name relative to its namespace prefix onto a file path.

    Namespace separators become path separators, underscores become hyphens,
    and the result is lower-cased before the extension is appended. No
    filesystem access is performed.

    Examples:
        >>> map_to_relative_path("Qux.Quux").replace(os.sep, "/")
        'qux/quux.py'
        >>> map_to_relative_path("My_Thing", extension=".ext")
        'my-thing.ext'
    """
    path = relative_name.replace(separator, os.sep).replace("_", "-")
    return path.lower() + extension
