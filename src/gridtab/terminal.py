"""Terminal width lookup for autosizing."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from .exceptions import WidthSourceUnavailable

logger = logging.getLogger(__name__)

WIDTH_ENV_VAR = "GRIDTAB_WIDTH"
"""Environment variable overriding the detected terminal width."""


def terminal_width(stream: TextIO | None = None) -> int:
    """Resolve the target table width.

    Resolution order: ``GRIDTAB_WIDTH`` env var → size of the terminal
    attached to ``stream`` (stdout by default).

    Args:
        stream: Stream whose terminal is queried

    Returns:
        Width in columns, always positive

    Raises:
        WidthSourceUnavailable: If the override is invalid or the stream
            is not attached to a terminal
    """
    override = os.environ.get(WIDTH_ENV_VAR)
    if override:
        try:
            width = int(override)
        except ValueError:
            raise WidthSourceUnavailable(
                f"{WIDTH_ENV_VAR}={override!r} is not an integer"
            ) from None
        if width <= 0:
            raise WidthSourceUnavailable(f"{WIDTH_ENV_VAR}={override!r} is not positive")
        return width

    stream = stream or sys.stdout
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError) as e:
        raise WidthSourceUnavailable("output is not a terminal", cause=e) from e
    if columns <= 0:
        raise WidthSourceUnavailable(f"terminal reported width {columns}")
    logger.debug("Detected terminal width %d", columns)
    return columns
