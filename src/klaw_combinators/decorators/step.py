"""Step guard used by every composition operator.

A guarded step behaves exactly like the callable it wraps. When the callable
raises, the exception object is re-raised unchanged after a note naming the
step is attached, so a failure deep inside a composition still says where it
came from:

    ValueError: invalid literal for int() with base 10: 'x'
    in step 'parse' of mapper composition
    in step 'parse >> double' of mapper composition
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import wrapt

from klaw_combinators._logging import get_logger

__all__ = ['step', 'step_note']

F = TypeVar('F', bound=Callable[..., Any])


def step_note(name: str, kind: str) -> str:
    """The note attached to an exception raised inside a guarded step."""
    return f"in step '{name}' of {kind} composition"


def step(name: str, kind: str) -> Callable[[F], F]:
    """Decorator that labels failures of the wrapped callable.

    Args:
        name: Step label, usually the capability's ``label``.
        kind: Composition kind ("transform", "predicate", "consumer", ...).

    Returns:
        A decorator producing a transparent wrapper around the callable.

    Example:
        ```python
        parse = step('parse', 'mapper')(int)
        parse('12')
        # 12
        parse('x')
        # ValueError, with note "in step 'parse' of mapper composition"
        ```
    """
    note = step_note(name, kind)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            return wrapped(*args, **kwargs)
        except Exception as e:
            # A reused exception instance keeps one note per step.
            if note not in getattr(e, '__notes__', ()):
                e.add_note(note)
            get_logger(__name__).debug('step.failed', step=name, kind=kind, error=repr(e))
            raise

    return wrapper
