"""Optional type: Present[T] | AbsentType for values that may be missing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from pyoptional._config import logging_enabled
from pyoptional._logging import get_logger
from pyoptional.errors import FlatMapContractViolationError, NoSuchElementError, NullPointerError

__all__ = ['Absent', 'AbsentType', 'Optional', 'Present']

_logger = get_logger(__name__)


def _violation(operation: str, **fields: Any) -> None:
    """Emit a debug event for a contract violation about to be raised."""
    if logging_enabled():
        _logger.debug('optional.contract_violation', operation=operation, **fields)


def _require_non_null[V](value: V | None, argument: str, operation: str) -> V:
    """Return value, raising NullPointerError if it is None."""
    if value is None:
        _violation(operation, argument=argument)
        raise NullPointerError(argument)
    return value


class Optional[T](msgspec.Struct, frozen=True, gc=False, tag_field='kind'):
    """A container holding either exactly one non-None value or nothing.

    Optional has exactly two variants: Present, which wraps a value, and
    AbsentType, whose shared instance is ``Absent``. Build instances with the
    factories ``Optional.of``, ``Optional.of_nullable`` and ``Optional.empty``
    rather than instantiating this base class.

    Instances are immutable. Every operation either returns the receiver
    unchanged or a new Optional.

    Examples:
        >>> Optional.of('something').map(len).get()
        9
        >>> Optional.of_nullable(None).or_else('fallback')
        'fallback'
        >>> str(Optional.of('v'))
        'Optional[v]'
        >>> match Optional.of(3):
        ...     case Present(value):
        ...         print(value)
        3
    """

    def __post_init__(self) -> None:
        if type(self) is Optional:
            msg = 'Optional cannot be instantiated directly, use Optional.of, Optional.of_nullable or Optional.empty'
            raise TypeError(msg)

    # --- Construction ---

    @staticmethod
    def empty() -> Optional[Any]:
        """Return the empty Optional.

        The same shared instance is returned on every call, but callers should
        compare Optionals by equality rather than identity.
        """
        return Absent

    @staticmethod
    def of[V](value: V) -> Optional[V]:
        """Wrap a value that must not be None.

        Raises:
            NullPointerError: If value is None.
        """
        return Present(_require_non_null(value, 'value', 'of'))

    @staticmethod
    def of_nullable[V](value: V | None) -> Optional[V]:
        """Wrap a value, returning the empty Optional if it is None."""
        if value is None:
            return Absent
        return Present(value)

    # --- Inspection ---

    def is_present(self) -> bool:
        """Return True if a value is present."""
        return isinstance(self, Present)

    def is_empty(self) -> bool:
        """Return True if no value is present."""
        return not isinstance(self, Present)

    def get(self) -> T:
        """Return the held value.

        Raises:
            NoSuchElementError: If the Optional is empty.
        """
        match self:
            case Present(value):
                return value
            case _:
                raise NoSuchElementError()

    def if_present(self, callback: Callable[[T], object]) -> None:
        """Call callback with the held value, if there is one.

        Exceptions raised by callback propagate to the caller.

        Raises:
            NullPointerError: If callback is None.
        """
        _require_non_null(callback, 'callback', 'if_present')
        match self:
            case Present(value):
                callback(value)
            case _:
                pass

    def if_present_or_else(self, on_present: Callable[[T], object], on_absent: Callable[[], object]) -> None:
        """Call on_present with the held value, or on_absent if there is none.

        Exactly one of the callbacks is called.

        Raises:
            NullPointerError: If either callback is None.
        """
        _require_non_null(on_present, 'on_present', 'if_present_or_else')
        _require_non_null(on_absent, 'on_absent', 'if_present_or_else')
        match self:
            case Present(value):
                on_present(value)
            case _:
                on_absent()

    # --- Transformation ---

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Keep the value only if predicate accepts it.

        Args:
            predicate: Called once with the held value. Not called when empty.

        Returns:
            self if predicate(value) is true, otherwise the empty Optional.

        Raises:
            NullPointerError: If predicate is None.
        """
        _require_non_null(predicate, 'predicate', 'filter')
        match self:
            case Present(value) if not predicate(value):
                return Absent
            case _:
                return self

    def map[U](self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """Apply mapper to the held value.

        Args:
            mapper: Function to apply to the value. Not called when empty.

        Returns:
            Optional.of_nullable(mapper(value)), so a None result gives the
            empty Optional.

        Raises:
            NullPointerError: If mapper is None.
        """
        _require_non_null(mapper, 'mapper', 'map')
        match self:
            case Present(value):
                return Optional.of_nullable(mapper(value))
            case _:
                return Absent

    def flat_map[U](self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """Apply an Optional-returning mapper to the held value.

        Also known as bind or and_then.

        Args:
            mapper: Function that takes T and returns Optional[U]. Not called
                when empty.

        Returns:
            The Optional returned by mapper, unchanged.

        Raises:
            NullPointerError: If mapper is None.
            FlatMapContractViolationError: If mapper returns anything other
                than an Optional.
        """
        _require_non_null(mapper, 'mapper', 'flat_map')
        match self:
            case Present(value):
                result = mapper(value)
                if not isinstance(result, Optional):
                    _violation('flat_map', returned_type=type(result).__name__)
                    raise FlatMapContractViolationError(result)
                return result
            case _:
                return Absent

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """Return self if a value is present, otherwise the Optional from supplier.

        supplier is only called when empty, and its result is returned as-is.
        """
        match self:
            case Present():
                return self
            case _:
                return supplier()

    # --- Fallback retrieval ---

    def or_else(self, other: T) -> T:
        """Return the held value, or other if empty."""
        match self:
            case Present(value):
                return value
            case _:
                return other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the held value, or compute a fallback with supplier if empty."""
        match self:
            case Present(value):
                return value
            case _:
                return supplier()

    def or_else_raise(self, error: BaseException | Callable[[], BaseException]) -> T:
        """Return the held value, or raise error if empty.

        Args:
            error: The exception to raise, which is raised as-is. May also be
                a zero-argument callable such as an exception class, called
                only when the Optional is empty.

        Raises:
            NullPointerError: If error is None.
            BaseException: The given error, when the Optional is empty.
        """
        _require_non_null(error, 'error', 'or_else_raise')
        match self:
            case Present(value):
                return value
            case _ if isinstance(error, BaseException):
                raise error
            case _:
                raise error()

    # --- Equality & representation ---

    def equals(self, other: object) -> bool:
        """Compare with another Optional.

        Two Optionals are equal when they are the same instance, both empty,
        or both hold values of the same type that compare equal. Unlike ``==``,
        ``Optional.of(1).equals(Optional.of(True))`` is False.
        """
        if other is self:
            return True
        match self, other:
            case AbsentType(), AbsentType():
                return True
            case Present(mine), Present(theirs):
                return type(mine) is type(theirs) and bool(mine == theirs)
            case _:
                return False


class Present[T](Optional[T], frozen=True, gc=False, tag='present'):
    """Present variant of Optional holding a non-None value of type T.

    Examples:
        >>> Present(42).get()
        42
        >>> Present(42).map(lambda x: x * 2)
        Present(value=84)
        >>> Present(None)
        Traceback (most recent call last):
        ...
        pyoptional.errors.NullPointerError: Argument 'value' must not be None
    """

    value: T

    def __post_init__(self) -> None:
        _require_non_null(self.value, 'value', 'Present')

    def __str__(self) -> str:
        return f'Optional[{self.value}]'


class AbsentType(Optional[Any], frozen=True, gc=False, tag='absent'):
    """Absent variant of Optional representing a missing value.

    Use the ``Absent`` constant or ``Optional.empty()`` instead of
    instantiating directly. All instances compare equal.

    Examples:
        >>> Absent.is_present()
        False
        >>> Absent.or_else(0)
        0
    """

    def __str__(self) -> str:
        return 'Optional.empty'


Absent: AbsentType = AbsentType()
"""Shared instance representing the absence of a value."""
