"""
Resolution of caller-supplied addresses into canonical character ranges.

Three addressing conventions are supported by the public operations:

- an absolute, non-negative character index;
- a signed index, where a negative value counts back from the end of the text;
- a position plus a signed length, extending right (positive) or left (negative).

Each of them is normalized into a ``(start, end)`` pair of character indices.
A resolved pair with ``end <= start`` is a degenerate range: extraction yields an
empty string and replacement becomes an insertion at ``start``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Final

MAX_INDEX: Final[int] = sys.maxsize
"""Largest character index produced by any resolution; arithmetic saturates here."""


class OffsetKind(str, Enum):
    """The two ways an offset can be anchored in a text."""

    ABSOLUTE = "absolute"
    """Counted from the start of the text."""

    FROM_END = "from_end"
    """Counted back from the end of the text."""


@dataclass(frozen=True)
class Offset:
    """
    A character address anchored either at the start or at the end of a text.

    Attributes:
        kind: Where the offset is anchored.
        value: The non-negative distance from the anchor, in characters.

    Examples:
        >>> Offset.coerce(-4)
        Offset(kind=<OffsetKind.FROM_END: 'from_end'>, value=4)
        >>> Offset.absolute(3).resolve(10)
        3
        >>> Offset.from_end(4).resolve(10)
        6

    """

    kind: OffsetKind
    value: int

    def __post_init__(self) -> None:
        """Validate that the distance is non-negative."""
        if self.value < 0:
            msg = f"Offset value cannot be negative: {self.value}"
            raise ValueError(msg)

    @classmethod
    def absolute(cls, value: int) -> Offset:
        """Create an offset counted from the start of the text."""
        return cls(OffsetKind.ABSOLUTE, value)

    @classmethod
    def from_end(cls, value: int) -> Offset:
        """Create an offset counted back from the end of the text."""
        return cls(OffsetKind.FROM_END, value)

    @classmethod
    def coerce(cls, value: int | Offset) -> Offset:
        """Turn a signed integer into an offset; negative values count from the end."""
        if isinstance(value, Offset):
            return value
        if value < 0:
            return cls.from_end(-value)
        return cls.absolute(value)

    def resolve(self, char_length: int) -> int:
        """Resolve to a character index clamped to ``[0, char_length]``."""
        return resolve_offset(char_length, self)


def resolve_offset(char_length: int, offset: int | Offset) -> int:
    """
    Resolve a single address to a character index within ``[0, char_length]``.

    Args:
        char_length: Number of scalar values in the text being addressed.
        offset: A signed integer or an Offset.

    Returns:
        The clamped character index.

    """
    resolved = Offset.coerce(offset)
    if resolved.kind is OffsetKind.FROM_END:
        return max(0, char_length - resolved.value)
    return min(resolved.value, char_length)


def resolve_range(char_length: int, raw_start: int | Offset, raw_end: int | Offset) -> tuple[int, int]:
    """
    Resolve a start and end address into a character range.

    Both ends are clamped to ``[0, char_length]``. The range is returned as-is even
    when ``end < start``; consumers treat that as an empty span.

    Examples:
        >>> resolve_range(10, 2, -3)
        (2, 7)
        >>> resolve_range(10, 4, 50)
        (4, 10)

    """
    return resolve_offset(char_length, raw_start), resolve_offset(char_length, raw_end)


def resolve_from_position_and_length(position: int, length: int) -> tuple[int, int]:
    """
    Resolve a position and a signed length into a character range.

    A negative length selects ``|length|`` characters to the left of ``position``,
    stopping at the start of the text. A non-negative length selects ``length``
    characters from ``position`` onwards. Results saturate at MAX_INDEX.

    Examples:
        >>> resolve_from_position_and_length(14, 4)
        (14, 18)
        >>> resolve_from_position_and_length(13, -3)
        (10, 13)
        >>> resolve_from_position_and_length(1, -3)
        (0, 3)

    """
    position = min(max(0, position), MAX_INDEX)
    span = min(abs(length), MAX_INDEX)
    start = max(0, position - span) if length < 0 else position
    end = min(start + span, MAX_INDEX)
    return start, end
