"""Composition operators over the capability types.

Every operator lifts its arguments with ``Capability.of`` (so plain callables
are accepted), guards each step with ``step()``, and returns a new capability
whose label describes the composition tree.

A failure in any step aborts the rest of the composition. The exception
propagates unchanged, carrying one note per enclosing composition layer.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from klaw_combinators.decorators.step import step
from klaw_combinators.errors import CompositionTypeError
from klaw_combinators.interfaces import (
    Consumer,
    Mapper,
    Predicate,
    Producer,
    Transform1,
    Transform2,
)

__all__ = [
    'all_of',
    'and_',
    'any_of',
    'binary_then',
    'chain',
    'compose_unary',
    'map_then',
    'max_by',
    'min_by',
    'not_',
    'or_',
    'produce_then',
    'then',
]

T = TypeVar('T')
R = TypeVar('R')
U = TypeVar('U')


# =============================================================================
# Unary and binary operators
# =============================================================================


def compose_unary(
    f: Transform1[T] | Callable[[T], T],
    g: Transform1[T] | Callable[[T], T],
) -> Transform1[T]:
    """Transform equivalent to applying ``f`` then ``g``.

    Composition is associative: ``compose_unary(compose_unary(f, g), h)`` and
    ``compose_unary(f, compose_unary(g, h))`` agree on every input.

    Example:
        ```python
        compose_unary(str.strip, str.upper)('  hi ')
        # 'HI'
        ```
    """
    first, second = Transform1.of(f), Transform1.of(g)
    run_first = step(first.label, 'transform')(first.fn)
    run_second = step(second.label, 'transform')(second.fn)

    def composed(value: T) -> T:
        return run_second(run_first(value))

    return Transform1(composed, name=f'{first.label} >> {second.label}')


def chain(*transforms: Transform1[T] | Callable[[T], T]) -> Transform1[T]:
    """Fold ``compose_unary`` over the transforms, left to right.

    ``chain()`` is the identity and ``chain(f)`` is ``f`` lifted.
    """
    if not transforms:
        return Transform1.identity()
    if len(transforms) == 1:
        return Transform1.of(transforms[0])
    return functools.reduce(compose_unary, transforms)  # type: ignore[arg-type]


def binary_then(
    op: Transform2[T] | Callable[[T, T], T],
    after: Transform1[T] | Callable[[T], T],
) -> Transform2[T]:
    """Binary operator that applies ``after`` to the result of ``op``."""
    binary, unary = Transform2.of(op), Transform1.of(after)
    run_binary = step(binary.label, 'binary')(binary.fn)
    run_unary = step(unary.label, 'binary')(unary.fn)

    def composed(left: T, right: T) -> T:
        return run_unary(run_binary(left, right))

    return Transform2(composed, name=f'{binary.label} >> {unary.label}')


def _ranking(key: Callable[..., Any]) -> tuple[str, Callable[..., Any]]:
    """Label and guarded key function for a selection operator."""
    if not callable(key):
        raise CompositionTypeError(Transform2.__name__, type(key).__name__)
    label = getattr(key, 'label', None) or getattr(key, '__name__', None) or repr(key)
    return label, step(label, 'selection')(key)


def max_by(key: Callable[[T], Any], *, name: str | None = None) -> Transform2[T]:
    """Binary operator keeping whichever value has the larger ``key(value)``.

    On a tie the left value is kept.

    Raises:
        CompositionTypeError: If ``key`` is not callable.

    Example:
        ```python
        longer = max_by(len)
        longer('114514', '1919810')
        # '1919810'
        ```
    """
    label, rank = _ranking(key)

    def select(left: T, right: T) -> T:
        return left if rank(left) >= rank(right) else right

    return Transform2(select, name=name or f'max_by({label})')


def min_by(key: Callable[[T], Any], *, name: str | None = None) -> Transform2[T]:
    """Binary operator keeping whichever value has the smaller ``key(value)``.

    On a tie the left value is kept.
    """
    label, rank = _ranking(key)

    def select(left: T, right: T) -> T:
        return left if rank(left) <= rank(right) else right

    return Transform2(select, name=name or f'min_by({label})')


# =============================================================================
# Predicates
# =============================================================================


def and_(p: Predicate[T] | Callable[[T], Any], q: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
    """Short-circuit logical AND.

    ``q`` is evaluated only when ``p(x)`` is truthy.

    Example:
        ```python
        positive_even = and_(lambda n: n > 0, lambda n: n % 2 == 0)
        positive_even(4)
        # True
        positive_even(-2)
        # False
        ```
    """
    left, right = Predicate.of(p), Predicate.of(q)
    test_left = step(left.label, 'predicate')(left.fn)
    test_right = step(right.label, 'predicate')(right.fn)

    def both(value: T) -> bool:
        return bool(test_left(value)) and bool(test_right(value))

    return Predicate(both, name=f'({left.label} & {right.label})')


def or_(p: Predicate[T] | Callable[[T], Any], q: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
    """Short-circuit logical OR.

    ``q`` is evaluated only when ``p(x)`` is falsy.
    """
    left, right = Predicate.of(p), Predicate.of(q)
    test_left = step(left.label, 'predicate')(left.fn)
    test_right = step(right.label, 'predicate')(right.fn)

    def either(value: T) -> bool:
        return bool(test_left(value)) or bool(test_right(value))

    return Predicate(either, name=f'({left.label} | {right.label})')


def not_(p: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
    """Logical NOT."""
    inner = Predicate.of(p)
    test = step(inner.label, 'predicate')(inner.fn)

    def negated(value: T) -> bool:
        return not test(value)

    return Predicate(negated, name=f'~{inner.label}')


def all_of(*predicates: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
    """Short-circuit AND over any number of predicates; empty means always true."""
    if not predicates:
        return Predicate.always()
    return functools.reduce(and_, predicates[1:], Predicate.of(predicates[0]))


def any_of(*predicates: Predicate[T] | Callable[[T], Any]) -> Predicate[T]:
    """Short-circuit OR over any number of predicates; empty means never true."""
    if not predicates:
        return Predicate.never()
    return functools.reduce(or_, predicates[1:], Predicate.of(predicates[0]))


# =============================================================================
# Mappers and producers
# =============================================================================


def map_then(f: Mapper[T, R] | Callable[[T], R], g: Mapper[R, U] | Callable[[R], U]) -> Mapper[T, U]:
    """Mapper applying ``f``, then ``g`` to its result.

    Example:
        ```python
        map_then(hex, str.upper)(255)
        # '0XFF'
        ```
    """
    first, second = Mapper.of(f), Mapper.of(g)
    run_first = step(first.label, 'mapper')(first.fn)
    run_second = step(second.label, 'mapper')(second.fn)

    def composed(value: T) -> U:
        return run_second(run_first(value))

    return Mapper(composed, name=f'{first.label} >> {second.label}')


def produce_then(producer: Producer[T] | Callable[[], T], mapper: Mapper[T, R] | Callable[[T], R]) -> Producer[R]:
    """Producer feeding every freshly produced value through ``mapper``."""
    source, sink = Producer.of(producer), Mapper.of(mapper)
    run_source = step(source.label, 'producer')(source.fn)
    run_sink = step(sink.label, 'producer')(sink.fn)

    def produced() -> R:
        return run_sink(run_source())

    return Producer(produced, name=f'{source.label} >> {sink.label}')


# =============================================================================
# Consumers
# =============================================================================


def then(c1: Consumer[T] | Callable[[T], Any], c2: Consumer[T] | Callable[[T], Any]) -> Consumer[T]:
    """Consumer running ``c1`` and then ``c2`` on the same value.

    If ``c1`` raises, ``c2`` is not invoked; nothing ``c1`` already did is
    rolled back.
    """
    first, second = Consumer.of(c1), Consumer.of(c2)
    run_first = step(first.label, 'consumer')(first.fn)
    run_second = step(second.label, 'consumer')(second.fn)

    def both(value: T) -> None:
        run_first(value)
        run_second(value)

    return Consumer(both, name=f'{first.label} >> {second.label}')
