"""Decorators: lift plain functions into capabilities, guard composition steps."""

from klaw_combinators.decorators.lift import (
    binary,
    consumer,
    mapper,
    predicate,
    producer,
    transform,
)
from klaw_combinators.decorators.step import step, step_note

__all__ = [
    'binary',
    'consumer',
    'mapper',
    'predicate',
    'producer',
    'step',
    'step_note',
    'transform',
]
