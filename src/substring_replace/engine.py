"""
Substring extraction and replacement by character index.

The two core operations, `substring` and `substring_replace`, resolve their
addresses through `offsets`, translate the resolved character indices to byte
offsets through `index_translator`, and slice the UTF-8 encoding. Everything
else in this module is a composition of those two and of `search`.

No operation raises for out-of-range numbers: indices clamp to the text, a range
whose end does not exceed its start is empty, and a pattern that is not found
leaves the text unchanged.

Usage example:
    >>> substring("We can't solve today's problems.", 9, 14)
    'solve'
    >>> substring_replace("We can't solve today's problems.", "cannot", 3, 8)
    "We cannot solve today's problems."
    >>> substring_insert("a🐫defg", "bc", 2)
    'a🐫bcdefg'
"""

import logging
from typing import TypeAlias

from .index_translator import char_len, encode_text, to_end_byte_index, to_start_byte_index
from .offsets import Offset, resolve_from_position_and_length, resolve_range
from .search import char_find, char_rfind

logger = logging.getLogger(__name__)

Address: TypeAlias = int | Offset
"""A character index; negative integers and ``Offset.from_end`` count back from the end."""

__all__ = [
    "Address",
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
]


def substring(text: str, start: Address, end: Address) -> str:
    """
    Extract the characters in ``[start, end)``.

    Args:
        text: The source text.
        start: First character index to include.
        end: Character index to stop before. Values past the end mean "through the end".

    Returns:
        The extracted text, or an empty string when the resolved end does not exceed the start.

    Examples:
        >>> substring("Thinking is hard work.", 9, 50)
        'is hard work.'
        >>> substring("Thinking is hard work.", 9, 3)
        ''
        >>> substring("Thinking is hard work.", 12, -1)
        'hard work'

    """
    data = encode_text(text)
    start_index, end_index = resolve_range(char_len(data), start, end)
    if end_index <= start_index:
        return ""
    return data[to_start_byte_index(data, start_index) : to_end_byte_index(data, end_index)].decode("utf-8")


def substring_replace(text: str, replacement: str, start: Address, end: Address) -> str:
    """
    Return a new text with the characters in ``[start, end)`` replaced.

    A degenerate range inserts the replacement at ``start`` without removing anything.
    A start past the end of the text appends.

    Args:
        text: The source text; it is not modified.
        replacement: The fragment to splice in.
        start: First character index to replace.
        end: Character index to stop before.

    Returns:
        ``text[:start] + replacement + text[end:]`` by character index.

    """
    data = encode_text(text)
    start_index, end_index = resolve_range(char_len(data), start, end)
    end_index = max(end_index, start_index)
    # The head ends where the replaced span starts, so it takes the end-style boundary.
    head = data[: to_end_byte_index(data, start_index)]
    tail = data[to_end_byte_index(data, end_index) :]
    return b"".join((head, encode_text(replacement), tail)).decode("utf-8")


def substring_start(text: str, end: Address) -> str:
    """Extract from the start of the text up to ``end``."""
    return substring(text, 0, end)


def substring_end(text: str, start: Address) -> str:
    """Extract from ``start`` to the end of the text; empty when start is past the end."""
    return substring(text, start, char_len(text))


def substring_replace_start(text: str, replacement: str, end: Address) -> str:
    """
    Replace everything before ``end``.

    Examples:
        >>> substring_replace_start("brown", "d", 2)
        'down'

    """
    return substring_replace(text, replacement, 0, end)


def substring_replace_end(text: str, replacement: str, start: Address) -> str:
    """
    Replace everything from ``start`` onwards.

    Examples:
        >>> substring_replace_end("blue", "ack", 2)
        'black'

    """
    return substring_replace(text, replacement, start, char_len(text))


def substring_remove(text: str, start: Address, end: Address) -> str:
    """Remove the characters in ``[start, end)``."""
    return substring_replace(text, "", start, end)


def substring_offset(text: str, position: int, length: int) -> str:
    """
    Extract ``|length|`` characters to the right (positive) or left (negative) of position.

    Examples:
        >>> substring_offset("The strangest tale that ever I heard", 14, 4)
        'tale'
        >>> substring_offset("The strangest tale that ever I heard", 13, -3)
        'est'

    """
    start, end = resolve_from_position_and_length(position, length)
    return substring(text, start, end)


def substring_pull(text: str, position: int, length: int) -> str:
    """Remove ``|length|`` characters to the right (positive) or left (negative) of position."""
    start, end = resolve_from_position_and_length(position, length)
    return substring_replace(text, "", start, end)


def substring_insert(text: str, insert: str, at: Address) -> str:
    """Insert a fragment at a character index."""
    return substring_replace(text, insert, at, at)


def insert_adjacent(text: str, insert: str, pattern: str, *, before: bool = True, first: bool = True) -> str:
    """
    Insert a fragment next to the first or last occurrence of a pattern.

    Args:
        text: The source text.
        insert: The fragment to insert.
        pattern: A literal pattern to locate.
        before: Insert at the occurrence index if True, one character after it otherwise.
        first: Use the leftmost occurrence if True, the rightmost otherwise.

    Returns:
        The new text, or the input unchanged when the pattern is not found.

    """
    index = char_find(text, pattern) if first else char_rfind(text, pattern)
    if index is None:
        logger.debug("Pattern %r not found; text left unchanged.", pattern)
        return text
    return substring_insert(text, insert, index if before else index + 1)


def insert_before_first(text: str, insert: str, pattern: str) -> str:
    """Insert a fragment before the first occurrence of a pattern."""
    return insert_adjacent(text, insert, pattern, before=True, first=True)


def insert_before_last(text: str, insert: str, pattern: str) -> str:
    """Insert a fragment before the last occurrence of a pattern."""
    return insert_adjacent(text, insert, pattern, before=True, first=False)


def insert_after_first(text: str, insert: str, pattern: str) -> str:
    """Insert a fragment after the first occurrence of a pattern."""
    return insert_adjacent(text, insert, pattern, before=False, first=True)


def insert_after_last(text: str, insert: str, pattern: str) -> str:
    """Insert a fragment after the last occurrence of a pattern."""
    return insert_adjacent(text, insert, pattern, before=False, first=False)


def insert_between(text: str, insert: str, start_pattern: str, end_pattern: str) -> str:
    """
    Replace whatever lies between the first start_pattern and the last end_pattern.

    Examples:
        >>> insert_between("long-file-name.revised.jpg", "document", "-", ".")
        'long-document.jpg'

    """
    start_index = char_find(text, start_pattern)
    end_index = char_rfind(text, end_pattern)
    if start_index is None or end_index is None:
        logger.debug("Delimiters %r and %r not both found; text left unchanged.", start_pattern, end_pattern)
        return text
    return substring_replace(text, insert, start_index + 1, end_index)


def prepend(text: str, prefix: str) -> str:
    """Return ``prefix + text``."""
    return prefix + text


def append(text: str, suffix: str) -> str:
    """Return ``text + suffix``."""
    return text + suffix
