"""@optional_return and @optional_return_async decorators for nullable returns."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from pyoptional.types.optional import Optional

__all__ = ['optional_return', 'optional_return_async']

P = ParamSpec('P')
T = TypeVar('T')


def _lift[T](value: T | Optional[T] | None) -> Optional[T]:
    """Wrap a return value with of_nullable unless it is already an Optional."""
    if isinstance(value, Optional):
        return value
    return Optional.of_nullable(value)


@overload
def optional_return[**P, T](
    func: Callable[P, T | None],
) -> Callable[P, Optional[T]]: ...


@overload
def optional_return(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T | None]], Callable[P, Optional[T]]]: ...


def optional_return[**P, T](
    func: Callable[P, T | None] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that turns a None-returning function into an Optional-returning one.

    The wrapped function's return value goes through Optional.of_nullable, so
    None becomes the empty Optional. A returned Optional is passed through
    unchanged rather than nested.

    Can be used with or without arguments:
        @optional_return
        def find(key): ...

        @optional_return(exceptions=(KeyError,))
        def lookup(key): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types that also produce the empty Optional.
            Defaults to none; any other exception propagates.

    Returns:
        A wrapped function that returns Optional[T] instead of T | None.

    Example:
        ```python
        @optional_return(exceptions=(KeyError,))
        def port(config: dict[str, int]) -> int:
            return config['port']

        port({'port': 8080})
        # Present(value=8080)
        port({})
        # AbsentType()
        ```
    """
    catch = exceptions if exceptions is not None else ()

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Optional[T]:
        try:
            value = wrapped(*args, **kwargs)
        except catch:
            return Optional.empty()
        return _lift(value)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def optional_return_async[**P, T](
    func: Callable[P, Awaitable[T | None]],
) -> Callable[P, Awaitable[Optional[T]]]: ...


@overload
def optional_return_async(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T | None]]], Callable[P, Awaitable[Optional[T]]]]: ...


def optional_return_async[**P, T](
    func: Callable[P, Awaitable[T | None]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async variant of @optional_return for coroutine functions.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Exception types that also produce the empty Optional.

    Returns:
        A wrapped async function that returns Optional[T] instead of T | None.
    """
    catch = exceptions if exceptions is not None else ()

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T | None]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Optional[T]:
        try:
            value = await wrapped(*args, **kwargs)
        except catch:
            return Optional.empty()
        return _lift(value)

    if func is not None:
        return wrapper(func)
    return wrapper
