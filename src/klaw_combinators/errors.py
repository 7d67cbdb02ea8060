"""Error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'CompositionMismatch',
    'CompositionTypeError',
    'SinkWriteError',
    'SinkWriteFailed',
]


# --- Composition Errors ---


class CompositionMismatch(msgspec.Struct, frozen=True, gc=False):
    """A non-callable was combined with a capability - struct variant."""

    kind: str
    received: str

    def to_exception(self) -> CompositionTypeError:
        """Convert to exception for raise-based code."""
        return CompositionTypeError(self.kind, self.received)


class CompositionTypeError(TypeError):
    """A non-callable was combined with a capability - exception variant."""

    def __init__(self, kind: str, received: str) -> None:
        self.kind = kind
        self.received = received
        super().__init__(f'Cannot compose {kind} with non-callable {received}')

    def to_struct(self) -> CompositionMismatch:
        """Convert to struct for value-based code."""
        return CompositionMismatch(self.kind, self.received)


# --- Sink Errors ---


class SinkWriteFailed(msgspec.Struct, frozen=True, gc=False):
    """A consumer could not write its value - struct variant."""

    path: str
    reason: str | None = None

    def to_exception(self) -> SinkWriteError:
        """Convert to exception for raise-based code."""
        return SinkWriteError(self.path, self.reason)


class SinkWriteError(OSError):
    """A consumer could not write its value - exception variant."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Cannot write to '{path}'"
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> SinkWriteFailed:
        """Convert to struct for value-based code."""
        return SinkWriteFailed(self.path, self.reason)
