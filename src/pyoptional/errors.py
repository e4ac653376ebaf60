"""Error types raised when an Optional's contract is violated."""

from __future__ import annotations

__all__ = [
    'FlatMapContractViolationError',
    'NoSuchElementError',
    'NullPointerError',
    'OptionalError',
]


class OptionalError(Exception):
    """Base class for errors raised by pyoptional itself."""


# --- Argument Errors ---


class NullPointerError(OptionalError, TypeError):
    """A required value or callback was None."""

    def __init__(self, argument: str | None = None) -> None:
        self.argument = argument
        msg = 'Value must not be None'
        if argument:
            msg = f"Argument '{argument}' must not be None"
        super().__init__(msg)


# --- Access Errors ---


class NoSuchElementError(OptionalError, LookupError):
    """get() was called on an empty Optional."""

    def __init__(self, message: str = 'No value present') -> None:
        super().__init__(message)


# --- Callback Contract Errors ---


class FlatMapContractViolationError(OptionalError, TypeError):
    """The mapper given to flat_map() returned something other than an Optional.

    Attributes:
        returned: The value the mapper returned instead of an Optional.
    """

    def __init__(self, returned: object) -> None:
        self.returned = returned
        super().__init__(f'flat_map mapper must return an Optional, got {type(returned).__name__}')
