"""klaw-combinators: composable higher-order-function capabilities.

Six capability types wrap plain callables and compose into new values:
Transform1 (T -> T), Transform2 ((T, T) -> T), Predicate (T -> bool),
Mapper (T -> R), Producer (() -> T) and Consumer (T -> None).

Flat imports (preferred):
    from klaw_combinators import Transform1, Predicate, compose_unary, and_, then
    from klaw_combinators import predicate, mapper, consumer

Submodule imports (for organization):
    from klaw_combinators.compose import compose_unary, map_then
    from klaw_combinators.decorators import predicate, step
    from klaw_combinators.instances import hex_with_prefix, append_to_file
"""

# Configuration and logging
from klaw_combinators._config import Config, get_config, init
from klaw_combinators._logging import configure_logging, get_logger

# Composition
from klaw_combinators.compose import (
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

# Decorators
from klaw_combinators.decorators import (
    binary,
    consumer,
    mapper,
    predicate,
    producer,
    transform,
)

# Errors
from klaw_combinators.errors import (
    CompositionMismatch,
    CompositionTypeError,
    SinkWriteError,
    SinkWriteFailed,
)

# Capability types
from klaw_combinators.interfaces import (
    Consumer,
    Mapper,
    Predicate,
    Producer,
    Transform1,
    Transform2,
)

# Counters
from klaw_combinators.merge import count_words, merge

__all__ = [
    # Errors
    'CompositionMismatch',
    'CompositionTypeError',
    # Configuration
    'Config',
    # Capability types
    'Consumer',
    'Mapper',
    'Predicate',
    'Producer',
    'SinkWriteError',
    'SinkWriteFailed',
    'Transform1',
    'Transform2',
    # Composition
    'all_of',
    'and_',
    'any_of',
    'binary',
    'binary_then',
    'chain',
    'compose_unary',
    'configure_logging',
    'consumer',
    'count_words',
    'get_config',
    'get_logger',
    'init',
    'map_then',
    'mapper',
    'max_by',
    'merge',
    'min_by',
    'not_',
    'or_',
    'predicate',
    'produce_then',
    'producer',
    'then',
    'transform',
]
