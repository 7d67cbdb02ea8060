"""Predicates and mappers over collections."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Any, TypeVar

from klaw_combinators.decorators import predicate
from klaw_combinators.decorators.step import step
from klaw_combinators.interfaces import Mapper, Predicate

__all__ = [
    'all_even',
    'is_empty',
    'map_each',
    'not_empty',
    'not_empty_and_all_even',
]

T = TypeVar('T')
R = TypeVar('R')


@predicate
def is_empty(items: Collection[Any]) -> bool:
    return len(items) == 0


@predicate
def not_empty(items: Collection[Any]) -> bool:
    return len(items) > 0


@predicate
def all_even(numbers: Iterable[int]) -> bool:
    """True when every number is even; vacuously true for an empty collection."""
    return all(n % 2 == 0 for n in numbers)


not_empty_and_all_even: Predicate[Collection[int]] = not_empty & all_even


def map_each(each: Mapper[T, R] | Any) -> Mapper[Iterable[T], list[R]]:
    """Mapper applying ``each`` to every element and collecting a list.

    Example:
        ```python
        from klaw_combinators.instances import hex_with_prefix
        map_each(hex_with_prefix)([1, 255])
        # ['0x1', '0xff']
        ```
    """
    element = Mapper.of(each)
    run = step(element.label, 'mapper')(element.fn)

    def mapped(items: Iterable[T]) -> list[R]:
        return [run(item) for item in items]

    return Mapper(mapped, name=f'map_each({element.label})')
