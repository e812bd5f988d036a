"""Literal pattern search reporting character indices instead of byte offsets."""

from .index_translator import encode_text


def _scalars(text: str) -> list[str]:
    """Return the scalar values of a text, rejecting text that is not valid UTF-8."""
    encode_text(text)
    return list(text)


def _matches_at(haystack: list[str], needle: list[str], start: int) -> bool:
    """Check whether needle occurs in haystack beginning at start."""
    for offset, char in enumerate(needle):
        if haystack[start + offset] != char:
            return False
    return True


def char_find(text: str, pattern: str) -> int | None:
    """
    Return the character index where the leftmost occurrence of pattern begins.

    Every candidate start is tried in turn, so overlapping candidates are never
    skipped: ``char_find("aaab", "aab")`` is 1.

    Args:
        text: The text to search.
        pattern: A literal pattern, not a regular expression.

    Returns:
        The character index, or None when the pattern is empty or not found.

    Examples:
        >>> char_find("a🐕cd🐕fg", "🐕")
        1

    """
    haystack = _scalars(text)
    needle = _scalars(pattern)
    if not needle:
        return None

    for start in range(len(haystack) - len(needle) + 1):
        if _matches_at(haystack, needle, start):
            return start
    return None


def char_rfind(text: str, pattern: str) -> int | None:
    """
    Return the character index where the rightmost occurrence of pattern begins.

    The scan runs right to left and stops at the first full match, which is reported
    by its starting index rather than its end.

    Examples:
        >>> char_rfind("a🐕cd🐕fg", "🐕")
        4

    """
    haystack = _scalars(text)
    needle = _scalars(pattern)
    if not needle:
        return None

    for start in range(len(haystack) - len(needle), -1, -1):
        if _matches_at(haystack, needle, start):
            return start
    return None
