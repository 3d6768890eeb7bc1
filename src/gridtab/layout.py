"""
Column width computation.

``natural_widths`` measures content; ``fit`` redistributes those widths
to fill (or squeeze into) a target table width.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .models import Row
from .styles import Style
from .width import display_width

logger = logging.getLogger(__name__)


def natural_widths(
    header: Sequence[str],
    rows: Sequence[Row],
    placeholder: str = "",
) -> list[int]:
    """
    Compute the content-driven width of every column.

    Args:
        header: Column labels; their count is the column count
        rows: Data rows, possibly shorter than the header
        placeholder: Text rendered for blank cells; it counts toward
            the width of columns where a cell is blank

    Returns:
        One display width per column
    """
    widths = [display_width(h) for h in header]
    placeholder_width = display_width(placeholder)
    for row in rows:
        for i in range(len(widths)):
            if row.is_blank(i):
                cell_width = placeholder_width
            else:
                cell_width = display_width(row.cell(i) or "")
            widths[i] = max(widths[i], cell_width)
    return widths


def minimum_widths(
    header: Sequence[str],
    rows: Sequence[Row],
    placeholder: str = "",
) -> list[int]:
    """
    Narrowest width each column can be given without breaking alignment.

    A column is never narrower than its header label, and a column holding
    a blank cell is never narrower than the placeholder drawn in its place.
    Neither can be wrapped.
    """
    floors = [display_width(h) for h in header]
    placeholder_width = display_width(placeholder)
    if placeholder_width == 0:
        return floors
    for row in rows:
        for i in range(len(floors)):
            if row.is_blank(i):
                floors[i] = max(floors[i], placeholder_width)
    return floors


def usable_width(style: Style, ncols: int, target: int) -> int:
    """Columns left for cell content once delimiters and padding are paid for."""
    return target - style.overhead(ncols)


def fit(
    natural: Sequence[int],
    header: Sequence[str],
    style: Style,
    target: int,
    minimums: Sequence[int] | None = None,
) -> list[int]:
    """
    Grow or shrink column widths to fit ``target`` total columns.

    Expanding scales every column by the same ratio. Shrinking is a single
    forward pass: columns narrower than the average share are kept as they
    are, columns that would drop below their minimum width are pinned to it,
    and the ratio for the remaining columns is recomputed after each such
    decision. Earlier decisions are not revisited, so the result is a
    best-effort approximation rather than an optimal fit.

    Args:
        natural: Content widths from natural_widths()
        header: Column labels, used as minimum widths unless ``minimums``
            is given
        style: Style whose delimiters and padding surround the content
        target: Total table width including borders
        minimums: Per-column floors from minimum_widths(); defaults to
            the header widths

    Returns:
        One width per column
    """
    ncols = len(natural)
    if ncols == 0:
        return []

    usable = usable_width(style, ncols, target)
    total = sum(natural)
    if minimums is None:
        floors = [display_width(h) for h in header]
    else:
        floors = list(minimums)
    floors += [0] * (ncols - len(floors))

    if total == 0:
        return list(natural)

    if total <= usable:
        ratio = usable / total
        widths = [math.floor(w * ratio) for w in natural]
        logger.debug("Expanded columns %s -> %s (usable=%d)", list(natural), widths, usable)
        return widths

    average = usable / ncols
    ratio = usable / total
    widths = list(natural)
    shrinkable = [False] * ncols
    fixed_width = 0
    fixed_natural = 0

    for i, width in enumerate(natural):
        if width < average:
            fixed_width += width
        else:
            if math.floor(width * ratio) >= floors[i]:
                shrinkable[i] = True
                continue
            widths[i] = floors[i]
            fixed_width += floors[i]
        fixed_natural += width
        remaining = total - fixed_natural
        if remaining > 0:
            ratio = (usable - fixed_width) / remaining

    for i, width in enumerate(natural):
        if shrinkable[i]:
            widths[i] = max(math.floor(width * ratio), floors[i], 0)

    logger.debug("Shrunk columns %s -> %s (usable=%d)", list(natural), widths, usable)
    if sum(widths) > usable:
        logger.warning(
            "Table needs %d columns of content but only %d fit in width %d; "
            "output will overflow",
            sum(widths),
            max(usable, 0),
            target,
        )
    return widths
