"""Display width measurement for terminal rendering.

Every size computation in gridtab goes through this module so that wide
glyphs (CJK, fullwidth forms) count as two columns and combining marks
count as none.
"""

from __future__ import annotations

from wcwidth import wcwidth


def char_width(char: str) -> int:
    """Columns occupied by a single character (non-printable -> 0)."""
    return max(wcwidth(char), 0)


def display_width(text: str) -> int:
    """
    Calculate the number of terminal columns a string occupies.

    Args:
        text: The string to measure

    Returns:
        Display width in columns, never negative. Control characters
        such as newlines contribute 0.
    """
    return sum(char_width(c) for c in text)


def cut_index(text: str, limit: int) -> int:
    """
    Find the longest prefix of ``text`` that fits in ``limit`` columns.

    A wide glyph that would straddle the limit is left out entirely.

    Args:
        text: The string to cut
        limit: Maximum display width of the prefix

    Returns:
        Index ``k`` such that ``display_width(text[:k]) <= limit``
    """
    used = 0
    for index, char in enumerate(text):
        used += char_width(char)
        if used > limit:
            return index
    return len(text)
