"""Canonical instances of every capability.

Strings:    lower, upper, underscores_to_spaces, lower_after_first_word, concat, longer
Numbers:    to_hex, add_hex_prefix, hex_with_prefix, to_text, add,
            difference_of_squares_formula
Containers: is_empty, not_empty, all_even, not_empty_and_all_even, map_each
Clock:      now, iso_format, now_iso
Sinks:      print_line, log_line, append_to_file, structlog_sink
"""

from klaw_combinators.instances.clock import iso_format, now, now_iso
from klaw_combinators.instances.containers import (
    all_even,
    is_empty,
    map_each,
    not_empty,
    not_empty_and_all_even,
)
from klaw_combinators.instances.numbers import (
    add,
    add_hex_prefix,
    difference_of_squares_formula,
    hex_with_prefix,
    to_hex,
    to_text,
)
from klaw_combinators.instances.sinks import (
    append_to_file,
    log_line,
    print_line,
    structlog_sink,
)
from klaw_combinators.instances.strings import (
    concat,
    longer,
    lower,
    lower_after_first_word,
    underscores_to_spaces,
    upper,
)

__all__ = [
    'add',
    'add_hex_prefix',
    'all_even',
    'append_to_file',
    'concat',
    'difference_of_squares_formula',
    'hex_with_prefix',
    'is_empty',
    'iso_format',
    'log_line',
    'longer',
    'lower',
    'lower_after_first_word',
    'map_each',
    'not_empty',
    'not_empty_and_all_even',
    'now',
    'now_iso',
    'print_line',
    'structlog_sink',
    'to_hex',
    'to_text',
    'underscores_to_spaces',
    'upper',
]
