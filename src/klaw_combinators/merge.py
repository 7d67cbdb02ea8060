"""Merging values into a caller-owned mapping with a binary operator."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableMapping
from typing import TypeVar

from klaw_combinators._logging import get_logger
from klaw_combinators.instances.numbers import add
from klaw_combinators.interfaces import Transform2

__all__ = ['count_words', 'merge']

K = TypeVar('K')
V = TypeVar('V')


def merge(
    counts: MutableMapping[K, V],
    key: K,
    value: V,
    remap: Transform2[V] | Callable[[V, V], V | None],
) -> V | None:
    """Merge ``value`` into ``counts[key]``.

    An absent key is set to ``value``. A present key is set to
    ``remap(current, value)``; if that returns None the key is removed.

    Args:
        counts: Mapping owned and mutated by the caller.
        key: Key to merge into.
        value: Value to store or combine with the current one.
        remap: Binary operator combining the current and the new value.

    Returns:
        The value now stored under ``key``, or None if it was removed.

    Example:
        ```python
        counts = {'Jesse': 1}
        merge(counts, 'Jesse', 1, add)
        # 2
        merge(counts, 'Walt', 1, add)
        # 1
        ```
    """
    combine = Transform2.of(remap)
    if key not in counts:
        counts[key] = value
        merged: V | None = value
    else:
        merged = combine(counts[key], value)
        if merged is None:
            del counts[key]
        else:
            counts[key] = merged
    get_logger(__name__).debug('merge.applied', key=key, value=merged)
    return merged


def count_words(counts: MutableMapping[K, int], keys: Iterable[K]) -> MutableMapping[K, int]:
    """Add one to ``counts`` for every key, in order; returns ``counts``."""
    for key in keys:
        merge(counts, key, 1, add)
    return counts
