"""Composition operators: unary chaining, predicate logic, mapper and consumer sequencing."""

from klaw_combinators.compose.ops import (
    all_of,
    and_,
    any_of,
    binary_then,
    chain,
    compose_unary,
    map_then,
    max_by,
    min_by,
    not_,
    or_,
    produce_then,
    then,
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
