"""
Character index to byte index translation for UTF-8 text.

Every byte offset used to slice text is derived here, so a slice boundary
always lands on the first byte of a scalar value and never inside a multibyte
sequence.

Usage example:
    >>> char_len("a🐫d")
    3
    >>> to_start_byte_index("a🐫d", 2)
    5
    >>> to_end_byte_index("a🐫d", 9)
    6
"""

from collections.abc import Iterator

# UTF-8 continuation bytes look like 0b10xxxxxx
_CONTINUATION_MASK = 0xC0
_CONTINUATION_TAG = 0x80


def encode_text(text: str | bytes) -> bytes:
    """
    Return the UTF-8 form of a text, validating it on the way.

    Args:
        text: A string, or bytes that are expected to be valid UTF-8.

    Returns:
        The UTF-8 encoded bytes.

    Raises:
        ValueError: If the string holds lone surrogates or the bytes are not valid UTF-8.

    """
    if isinstance(text, bytes):
        try:
            text.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Text is not valid UTF-8: {e}"
            raise ValueError(msg) from e
        return text

    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        msg = f"Text cannot be encoded as UTF-8: {e}"
        raise ValueError(msg) from e


def _scalar_starts(data: bytes) -> Iterator[int]:
    """Yield the byte offset at which each scalar value begins."""
    for offset, byte in enumerate(data):
        if byte & _CONTINUATION_MASK != _CONTINUATION_TAG:
            yield offset


def _nth_scalar_start(data: bytes, char_index: int) -> int | None:
    """Return the byte offset of the scalar at char_index, or None past the end."""
    if char_index < 0:
        return None
    for position, offset in enumerate(_scalar_starts(data)):
        if position == char_index:
            return offset
    return None


def char_len(text: str | bytes) -> int:
    """
    Return the number of Unicode scalar values in the text.

    This differs from the byte length whenever a character needs more than one byte.

    Examples:
        >>> char_len("नमस्ते")
        6
        >>> char_len("नमस्ते".encode())
        6

    """
    return sum(1 for _ in _scalar_starts(encode_text(text)))


def byte_len(text: str | bytes) -> int:
    """Return the length of the UTF-8 encoding of the text."""
    return len(encode_text(text))


def to_start_byte_index(text: str | bytes, char_index: int) -> int:
    """
    Translate a character index to the byte offset where that character starts.

    An index at or beyond the end of the text falls back to 0. This fallback is only
    meaningful for ranges that are already degenerate; callers resolve and clamp the
    start index before translating it.

    Args:
        text: The text to index into.
        char_index: Zero-based index among the scalar values.

    Returns:
        The byte offset, always on a scalar value boundary.

    """
    offset = _nth_scalar_start(encode_text(text), char_index)
    return 0 if offset is None else offset


def to_end_byte_index(text: str | bytes, char_index: int) -> int:
    """
    Translate a character index to an exclusive end byte offset.

    An index at or beyond the end of the text means "through the end" and returns
    the full byte length.

    Args:
        text: The text to index into.
        char_index: Zero-based index among the scalar values.

    Returns:
        The byte offset, always on a scalar value boundary.

    """
    data = encode_text(text)
    offset = _nth_scalar_start(data, char_index)
    return len(data) if offset is None else offset
