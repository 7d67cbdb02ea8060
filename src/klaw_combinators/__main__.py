"""Command-line entry point: ``python -m klaw_combinators`` / ``klaw-combinators``."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from klaw_combinators._config import init
from klaw_combinators._logging import get_logger
from klaw_combinators.demo import run_all, run_counter
from klaw_combinators.errors import SinkWriteError

__all__ = ['build_parser', 'main']

STARTING_COUNTS = {'Jesse': 1, 'Mike': 1, 'Lisa': 1, 'Bob': 1}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='klaw-combinators',
        description='Run the combinator demonstrations in order.',
    )
    parser.add_argument('--log-level', default=None, help='enable structured logs at this level')
    parser.add_argument('--json-logs', action='store_true', default=None, help='emit logs as JSON')
    parser.add_argument('--log-file', default=None, help='file appended to by the file sink demo')
    parser.add_argument(
        '--repl',
        action='store_true',
        help='run the interactive word counter instead of the demonstrations',
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstrations; returns the process exit code."""
    args = build_parser().parse_args(argv)
    config = init(log_level=args.log_level, json_logs=args.json_logs, log_file=args.log_file)

    if args.repl:
        run_counter(dict(STARTING_COUNTS), sys.stdin)
        return 0

    try:
        run_all(config)
    except SinkWriteError as e:
        get_logger(__name__).error('demo.fatal', error=str(e), path=e.path)
        print(f'fatal: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
