"""SubstringReplace: character-indexed substring, search and replace for UTF-8 text."""

import importlib.metadata

from .engine import (
    append,
    char_find,
    char_len,
    char_rfind,
    insert_adjacent,
    insert_after_first,
    insert_after_last,
    insert_before_first,
    insert_before_last,
    insert_between,
    prepend,
    substring,
    substring_end,
    substring_insert,
    substring_offset,
    substring_pull,
    substring_remove,
    substring_replace,
    substring_replace_end,
    substring_replace_start,
    substring_start,
)
from .index_translator import to_end_byte_index, to_start_byte_index
from .offsets import Offset, OffsetKind
from .text import CharText


def _get_version() -> str:
    """
    Retrieve the package version from metadata.

    Returns:
        The version string, or a development version if not installed.

    """
    try:
        return importlib.metadata.version("SubstringReplace")
    except importlib.metadata.PackageNotFoundError:
        # Fallback for when the package is not installed, e.g., in a development environment
        return "0.0.0-dev"


__version__ = _get_version()

__all__ = [
    "CharText",
    "Offset",
    "OffsetKind",
    "__version__",
    "append",
    "char_find",
    "char_len",
    "char_rfind",
    "insert_adjacent",
    "insert_after_first",
    "insert_after_last",
    "insert_before_first",
    "insert_before_last",
    "insert_between",
    "prepend",
    "substring",
    "substring_end",
    "substring_insert",
    "substring_offset",
    "substring_pull",
    "substring_remove",
    "substring_replace",
    "substring_replace_end",
    "substring_replace_start",
    "substring_start",
    "to_end_byte_index",
    "to_start_byte_index",
]
