"""Consumers writing to standard output, files and the structured log."""

from __future__ import annotations

import os
import pathlib
from typing import Any

from klaw_combinators._logging import get_logger
from klaw_combinators.decorators import consumer
from klaw_combinators.errors import SinkWriteError
from klaw_combinators.interfaces import Consumer

__all__ = [
    'LOG_PREFIX',
    'append_to_file',
    'log_line',
    'print_line',
    'structlog_sink',
]

LOG_PREFIX = 'LOG: '


@consumer
def print_line(value: Any) -> None:
    print(value)


@consumer
def log_line(value: Any) -> None:
    print(f'{LOG_PREFIX}{value}')


def append_to_file(path: str | os.PathLike[str]) -> Consumer[str]:
    """Consumer appending each string to ``path`` as UTF-8.

    The file is created when absent and never truncated; line endings are
    written exactly as given.

    Args:
        path: Target file. Its parent directory must already exist.

    Returns:
        A Consumer[str].

    Raises:
        SinkWriteError: When the write fails (raised by the consumer, with the
            underlying OSError as ``__cause__``).

    Example:
        ```python
        write = append_to_file('info.log')
        write('a\\n')
        write('b\\n')
        # info.log now holds 'a\\nb\\n'
        ```
    """
    target = pathlib.Path(path)

    def append(text: str) -> None:
        try:
            with target.open('a', encoding='utf-8', newline='') as handle:
                handle.write(text)
        except OSError as e:
            raise SinkWriteError(str(target), e.strerror or str(e)) from e
        get_logger(__name__).debug('sink.append', path=str(target), chars=len(text))

    return Consumer(append, name=f'append_to_file({target})')


def structlog_sink(event: str, logger: Any = None) -> Consumer[Any]:
    """Consumer emitting an info log ``event`` carrying the value.

    Args:
        event: Event name of every emitted entry.
        logger: A structlog logger; defaults to this module's logger.
    """

    def emit(value: Any) -> None:
        (logger or get_logger(__name__)).info(event, value=value)

    return Consumer(emit, name=f'structlog_sink({event})')
