"""Capability types: Transform1, Transform2, Predicate, Mapper, Producer, Consumer.

Each capability is a frozen msgspec.Struct holding the wrapped callable and
an optional label. Instances are callable with the capability's signature,
and combining them always builds a new value; nothing is mutated.

Example:
    ```python
    from klaw_combinators import Predicate, Transform1

    shout = Transform1(str.upper, name='upper') >> (lambda s: s + '!')
    shout('hi')  # 'HI!'

    positive = Predicate(lambda n: n > 0, name='positive')
    even = Predicate(lambda n: n % 2 == 0, name='even')
    (positive & ~even)(3)  # True
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Self, TypeVar

import msgspec

from klaw_combinators.errors import CompositionTypeError

__all__ = [
    'Consumer',
    'Mapper',
    'Predicate',
    'Producer',
    'Transform1',
    'Transform2',
]

T = TypeVar('T')
R = TypeVar('R')
U = TypeVar('U')


def _describe(value: Any) -> str:
    """Readable label for a callable, used when no name was given."""
    name = getattr(value, '__name__', None)
    if isinstance(name, str):
        return name
    return repr(value)


class _Capability(msgspec.Struct, frozen=True):
    """Shared fields and lifting logic for all capability types."""

    fn: Callable[..., Any]
    name: str | None = None

    @property
    def label(self) -> str:
        """The explicit name, or one derived from the wrapped callable."""
        if self.name is not None:
            return self.name
        return _describe(self.fn)

    @classmethod
    def of(cls, func: Any, *, name: str | None = None) -> Self:
        """Lift a callable (or another capability) into this capability type.

        A value that already has this type is returned as is unless a new
        name is requested. Another capability is re-wrapped, keeping its label.

        Raises:
            CompositionTypeError: If ``func`` is not callable.
        """
        if isinstance(func, cls) and name is None:
            return func
        if isinstance(func, _Capability):
            return cls(func.fn, name=name if name is not None else func.label)
        if not callable(func):
            raise CompositionTypeError(cls.__name__, type(func).__name__)
        return cls(func, name=name)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.label})'


class Transform1(_Capability, Generic[T], frozen=True):
    """Unary operator: a function from T to a new T."""

    def __call__(self, value: T) -> T:
        return self.fn(value)

    def and_then(self, other: Transform1[T] | Callable[[T], T]) -> Transform1[T]:
        """Apply this transform, then ``other``."""
        from klaw_combinators.compose.ops import compose_unary

        return compose_unary(self, other)

    def compose(self, other: Transform1[T] | Callable[[T], T]) -> Transform1[T]:
        """Apply ``other`` first, then this transform."""
        from klaw_combinators.compose.ops import compose_unary

        return compose_unary(other, self)

    def __rshift__(self, other: Transform1[T] | Callable[[T], T]) -> Transform1[T]:
        return self.and_then(other)

    @classmethod
    def identity(cls) -> Transform1[Any]:
        """The transform that returns its input unchanged."""
        return cls(_identity, name='identity')


class Transform2(_Capability, Generic[T], frozen=True):
    """Binary operator: a function from two T values to a new T."""

    def __call__(self, left: T, right: T) -> T:
        return self.fn(left, right)

    def then(self, after: Transform1[T] | Callable[[T], T]) -> Transform2[T]:
        """Apply a unary transform to this operator's result."""
        from klaw_combinators.compose.ops import binary_then

        return binary_then(self, after)

    @classmethod
    def max_by(cls, key: Callable[[T], Any], *, name: str | None = None) -> Transform2[T]:
        """Select whichever value has the larger ``key``; left wins ties."""
        from klaw_combinators.compose.ops import max_by

        return max_by(key, name=name)

    @classmethod
    def min_by(cls, key: Callable[[T], Any], *, name: str | None = None) -> Transform2[T]:
        """Select whichever value has the smaller ``key``; left wins ties."""
        from klaw_combinators.compose.ops import min_by

        return min_by(key, name=name)


class Predicate(_Capability, Generic[T], frozen=True):
    """Test over a T value; the result is always a plain bool."""

    def __call__(self, value: T) -> bool:
        return bool(self.fn(value))

    def and_(self, other: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
        """Short-circuit AND: ``other`` runs only when this predicate holds."""
        from klaw_combinators.compose.ops import and_

        return and_(self, other)

    def or_(self, other: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
        """Short-circuit OR: ``other`` runs only when this predicate fails."""
        from klaw_combinators.compose.ops import or_

        return or_(self, other)

    def negate(self) -> Predicate[T]:
        """Logical NOT of this predicate."""
        from klaw_combinators.compose.ops import not_

        return not_(self)

    def __and__(self, other: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
        return self.and_(other)

    def __or__(self, other: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
        return self.or_(other)

    def __invert__(self) -> Predicate[T]:
        return self.negate()

    @classmethod
    def always(cls) -> Predicate[Any]:
        """Predicate that holds for every value."""
        return cls(_always, name='always')

    @classmethod
    def never(cls) -> Predicate[Any]:
        """Predicate that holds for no value."""
        return cls(_never, name='never')


class Mapper(_Capability, Generic[T, R], frozen=True):
    """Function from T to R; R may differ from T."""

    def __call__(self, value: T) -> R:
        return self.fn(value)

    def and_then(self, other: Mapper[R, U] | Callable[[R], U]) -> Mapper[T, U]:
        """Apply this mapper, then ``other`` to its result."""
        from klaw_combinators.compose.ops import map_then

        return map_then(self, other)

    def compose(self, other: Mapper[U, T] | Callable[[U], T]) -> Mapper[U, R]:
        """Apply ``other`` first, then this mapper."""
        from klaw_combinators.compose.ops import map_then

        return map_then(other, self)

    def __rshift__(self, other: Mapper[R, U] | Callable[[R], U]) -> Mapper[T, U]:
        return self.and_then(other)

    @classmethod
    def identity(cls) -> Mapper[Any, Any]:
        """The mapper that returns its input unchanged."""
        return cls(_identity, name='identity')


class Producer(_Capability, Generic[T], frozen=True):
    """Supplier of T values, called with no arguments."""

    def __call__(self) -> T:
        return self.fn()

    def map(self, mapper: Mapper[T, R] | Callable[[T], R]) -> Producer[R]:
        """Producer whose value is ``mapper`` applied to a fresh value of this one."""
        from klaw_combinators.compose.ops import produce_then

        return produce_then(self, mapper)


class Consumer(_Capability, Generic[T], frozen=True):
    """Side-effecting sink for T values; the wrapped result is discarded."""

    def __call__(self, value: T) -> None:
        self.fn(value)

    def and_then(self, other: Consumer[T] | Callable[[T], Any]) -> Consumer[T]:
        """Run this consumer, then ``other``, on the same value."""
        from klaw_combinators.compose.ops import then

        return then(self, other)

    def then(self, other: Consumer[T] | Callable[[T], Any]) -> Consumer[T]:
        """Alias of ``and_then``."""
        return self.and_then(other)

    def __rshift__(self, other: Consumer[T] | Callable[[T], Any]) -> Consumer[T]:
        return self.and_then(other)


def _identity(value: Any) -> Any:
    return value


def _always(value: Any) -> bool:
    return True


def _never(value: Any) -> bool:
    return False
