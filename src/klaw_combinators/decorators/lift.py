"""Decorators that lift a plain function into a capability.

Each decorator can be used with or without arguments:

    @predicate
    def is_even(n: int) -> bool: ...

    @predicate(name='even')
    def is_even(n: int) -> bool: ...

The decorated name is bound to the capability itself, so it composes with
the operators right away (``is_even & is_positive``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from klaw_combinators.interfaces import (
    Consumer,
    Mapper,
    Predicate,
    Producer,
    Transform1,
    Transform2,
)

__all__ = [
    'binary',
    'consumer',
    'mapper',
    'predicate',
    'producer',
    'transform',
]


def _lift(capability: Any, func: Callable[..., Any] | None, name: str | None) -> Any:
    if func is not None:
        return capability.of(func, name=name)

    def decorator(f: Callable[..., Any]) -> Any:
        return capability.of(f, name=name)

    return decorator


@overload
def transform(func: Callable[..., Any], /) -> Transform1[Any]: ...
@overload
def transform(*, name: str | None = None) -> Callable[[Callable[..., Any]], Transform1[Any]]: ...
def transform(func: Callable[..., Any] | None = None, /, *, name: str | None = None) -> Any:
    """Lift a ``T -> T`` function into a Transform1."""
    return _lift(Transform1, func, name)


@overload
def binary(func: Callable[..., Any], /) -> Transform2[Any]: ...
@overload
def binary(*, name: str | None = None) -> Callable[[Callable[..., Any]], Transform2[Any]]: ...
def binary(func: Callable[..., Any] | None = None, /, *, name: str | None = None) -> Any:
    """Lift a ``(T, T) -> T`` function into a Transform2."""
    return _lift(Transform2, func, name)


@overload
def predicate(func: Callable[..., Any], /) -> Predicate[Any]: ...
@overload
def predicate(*, name: str | None = None) -> Callable[[Callable[..., Any]], Predicate[Any]]: ...
def predicate(func: Callable[..., Any] | None = None, /, *, name: str | None = None) -> Any:
    """Lift a ``T -> bool`` function into a Predicate.

    Example:
        ```python
        @predicate
        def is_even(n: int) -> bool:
            return n % 2 == 0

        (is_even & (lambda n: n > 2))(4)
        # True
        ```
    """
    return _lift(Predicate, func, name)


@overload
def mapper(func: Callable[..., Any], /) -> Mapper[Any, Any]: ...
@overload
def mapper(*, name: str | None = None) -> Callable[[Callable[..., Any]], Mapper[Any, Any]]: ...
def mapper(func: Callable[..., Any] | None = None, /, *, name: str | None = None) -> Any:
    """Lift a ``T -> R`` function into a Mapper."""
    return _lift(Mapper, func, name)


@overload
def producer(func: Callable[..., Any], /) -> Producer[Any]: ...
@overload
def producer(*, name: str | None = None) -> Callable[[Callable[..., Any]], Producer[Any]]: ...
def producer(func: Callable[..., Any] | None = None, /, *, name: str | None = None) -> Any:
    """Lift a zero-argument function into a Producer."""
    return _lift(Producer, func, name)


@overload
def consumer(func: Callable[..., Any], /) -> Consumer[Any]: ...
@overload
def consumer(*, name: str | None = None) -> Callable[[Callable[..., Any]], Consumer[Any]]: ...
def consumer(func: Callable[..., Any] | None = None, /, *, name: str | None = None) -> Any:
    """Lift a ``T -> None`` function into a Consumer."""
    return _lift(Consumer, func, name)
