"""Exceptions for gridtab."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class GridtabError(Exception):
    """
    Base exception for all gridtab errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class InputError(GridtabError):
    """
    Base exception for input-related errors.

    This includes data that cannot be normalized into a header and rows,
    and tables that have nothing to render.
    """

    pass


class StyleError(GridtabError):
    """
    Base exception for style registry errors.

    This includes lookups of unregistered styles and conflicting
    registrations.
    """

    pass


# ---------------------------------------------------------------------------
# Input Exceptions
# ---------------------------------------------------------------------------


class EmptyInputError(InputError):
    """
    Raised when a table has no data rows to render.

    A header alone is not a table. This is detected after header
    inference, so a single row that was promoted to the header also
    triggers it.
    """

    def __init__(self, header: tuple[str, ...] = ()) -> None:
        self.header = header
        msg = "No data rows to render"
        if header:
            msg += f" (header: {', '.join(header)})"
        super().__init__(msg)


class UnsupportedInputError(InputError):
    """Raised when input data has a shape no normalizer accepts."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(
            f"Unsupported input type: {type_name}. "
            "Expected a sequence of rows, a mapping of columns, or a sequence of mappings."
        )


# ---------------------------------------------------------------------------
# Style Exceptions
# ---------------------------------------------------------------------------


class UnknownStyleError(StyleError):
    """
    Raised when a requested style name is not registered.

    Attributes:
        name: The style name that was requested
        available: Names registered at lookup time
    """

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = sorted(available or [])
        msg = f"Unknown style: {name!r}"
        if self.available:
            msg += f". Available styles: {', '.join(self.available)}"
        super().__init__(msg)


class StyleExistsError(StyleError):
    """Raised when registering a style under a name that is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Style already registered: {name!r}. Pass replace=True to override.")


# ---------------------------------------------------------------------------
# Environment Exceptions
# ---------------------------------------------------------------------------


class WidthSourceUnavailable(GridtabError):  # noqa: N818
    """
    Raised when autosizing needs a target width and none can be obtained.

    The terminal query failing (output redirected to a file or pipe) or an
    invalid width override both end up here rather than as a width of 0.

    Attributes:
        reason: Human-readable cause
        cause: The underlying exception, if any
    """

    def __init__(self, reason: str, cause: Exception | None = None) -> None:
        self.reason = reason
        self.cause = cause
        super().__init__(
            f"Cannot determine target width: {reason}. "
            "Set GRIDTAB_WIDTH or pass an explicit target width."
        )


class ConfigurationError(GridtabError):
    """
    Raised when a render option has an invalid value.

    Attributes:
        field: The option that failed validation
        value: The rejected value
        reason: Why it was rejected
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {value!r}. {reason}")
