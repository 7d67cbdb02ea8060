"""Demonstrations of every capability, printed as human-readable traces.

Each ``show_*`` helper applies one capability and emits trace lines through
``emit`` (standard output by default). ``run_all`` runs every demonstration
in order; ``run_counter`` is the interactive word counter behind ``--repl``.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, MutableMapping
from typing import Any

from klaw_combinators._config import Config, get_config
from klaw_combinators._logging import get_logger
from klaw_combinators.instances import (
    add,
    append_to_file,
    concat,
    difference_of_squares_formula,
    hex_with_prefix,
    is_empty,
    log_line,
    longer,
    lower,
    lower_after_first_word,
    map_each,
    not_empty_and_all_even,
    now,
    now_iso,
    print_line,
    to_text,
    underscores_to_spaces,
)
from klaw_combinators.interfaces import (
    Consumer,
    Mapper,
    Predicate,
    Producer,
    Transform1,
    Transform2,
)
from klaw_combinators.merge import merge

__all__ = [
    'NUMBERS',
    'QUIT',
    'SAMPLE_TEXT',
    'run_all',
    'run_basic',
    'run_binary_formula',
    'run_counter',
    'run_enhanced',
    'show_binary',
    'show_consumer',
    'show_mapper',
    'show_predicate',
    'show_producer',
    'show_transform',
]

NUMBERS = (1, 2, 3, 6, 245, 425, 45, 44, 98)
SAMPLE_TEXT = 'Welcome_To_Functional_Programing!'
QUIT = 'q'

Emit = Callable[[str], Any]


def show_transform(text: str, op: Transform1[str], emit: Emit = print_line) -> str:
    emit(f'Call transform({text!r}, {op.label})')
    emit(f'Old string: {text}')
    result = op(text)
    emit(f'New string: {result}')
    emit('')
    return result


def show_binary(left: str, right: str, op: Transform2[str], emit: Emit = print_line) -> str:
    emit(f'Call binary({left!r}, {right!r}, {op.label})')
    emit(f'Old strings: 1: {left}, 2: {right}')
    result = op(left, right)
    emit(f'New string: {result}')
    emit('')
    return result


def show_predicate(items: Collection[int], test: Predicate[Collection[int]], emit: Emit = print_line) -> bool:
    emit(f'Call predicate({list(items)}, {test.label})')
    result = test(items)
    emit(str(result))
    emit('')
    return result


def show_mapper(items: Iterable[int], convert: Mapper[Iterable[int], list[str]], emit: Emit = print_line) -> list[str]:
    emit(f'Call mapper(items, {convert.label})')
    result = convert(items)
    emit(' '.join(result))
    emit('')
    return result


def show_producer(source: Producer[Any], emit: Emit = print_line) -> Any:
    emit(f'Call producer({source.label})')
    result = source()
    emit(str(result))
    emit('')
    return result


def show_consumer(value: str, sink: Consumer[str], emit: Emit = print_line) -> None:
    emit(f'Call consumer({value!r}, {sink.label})')
    sink(value)
    emit('')


def run_binary_formula(emit: Emit = print_line) -> float:
    """Apply the difference-of-squares formula to the two sample doubles."""
    result = difference_of_squares_formula(1919810.0, 114514.0)
    emit(f'Result = {result}')
    emit('')
    return result


def run_basic(emit: Emit = print_line) -> None:
    """One plain instance of each capability."""
    show_transform('JESSE', lower, emit)
    show_binary('My name is: ', 'Jesse.', concat, emit)
    show_predicate([1, 2, 3, 4, 5], is_empty, emit)
    show_producer(now_iso, emit)
    show_consumer(str(now()), Consumer.of(emit, name='emit'), emit)
    show_mapper([1, 1, 2, 3, 4, 5, 6], map_each(to_text), emit)


def run_enhanced(config: Config | None = None, emit: Emit = print_line) -> None:
    """Composed instances of each capability.

    The consumer demonstration appends a line to ``config.log_file``; a write
    failure propagates as SinkWriteError.
    """
    config = config or get_config()
    show_transform(SAMPLE_TEXT, underscores_to_spaces >> lower_after_first_word, emit)
    show_binary('114514', '1919810', longer, emit)
    show_predicate(NUMBERS, not_empty_and_all_even, emit)
    show_mapper(NUMBERS, map_each(hex_with_prefix), emit)
    show_producer(now_iso, emit)
    show_consumer(f'Today is: {now_iso()}\n', append_to_file(config.log_file) >> log_line, emit)


def run_all(config: Config | None = None, emit: Emit = print_line) -> None:
    """Run every demonstration in order."""
    config = config or get_config()
    logger = get_logger(__name__)
    logger.debug('demo.start', log_file=config.log_file)
    run_binary_formula(emit)
    run_basic(emit)
    run_enhanced(config, emit)
    logger.debug('demo.done')


def run_counter(
    counts: MutableMapping[str, int],
    keys: Iterable[str],
    emit: Emit = print_line,
) -> MutableMapping[str, int]:
    """Interactive word counter.

    Prints the counts, then for every key read from ``keys`` (until ``'q'`` or
    the end of input) merges 1 into ``counts`` and prints them again.
    """

    def show_counts() -> None:
        for key, count in counts.items():
            emit(f'[{key}, {count}]')

    lines = iter(keys)
    show_counts()
    while True:
        emit(f'Enter a key to execute merge operator (Press {QUIT} to quit): ')
        line = next(lines, None)
        if line is None:
            break
        key = line.rstrip('\n')
        if key == QUIT:
            break
        merge(counts, key, 1, add)
        show_counts()
    return counts
