"""
Command-line entry point.

    python -m quickfit data.csv
    python -m quickfit data.csv --seed 0 --json

Status lines go to stderr as the run progresses; the result (metrics
summary or JSON) goes to stdout. A terminal error exits with status 1.
"""

import argparse
import json
import sys

from quickfit.core.exceptions import QuickfitError
from quickfit.pipeline import run_file
from quickfit.regression.config import DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE, TrainingConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='quickfit',
        description='Fit a line to the numeric columns of a CSV file',
    )
    parser.add_argument('path', help='CSV file, comma-delimited, header on the first line')
    parser.add_argument(
        '--backend',
        choices=('cpu', 'gpu', 'auto'),
        default='cpu',
        help='Training backend (default: cpu)'
    )
    parser.add_argument('--seed', type=int, default=None, help='Seed for init and shuffling')
    parser.add_argument('--epochs', type=int, default=DEFAULT_EPOCHS)
    parser.add_argument('--learning-rate', type=float, default=DEFAULT_LEARNING_RATE)
    parser.add_argument(
        '--strict-numbers',
        action='store_true',
        help='Require whole cells to be numbers instead of accepting a numeric prefix'
    )
    parser.add_argument('--json', action='store_true', help='Print the full result as JSON')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress status lines')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    def progress(message: str) -> None:
        if not args.quiet:
            print(message, file=sys.stderr)

    try:
        config = TrainingConfig(
            epochs=args.epochs,
            learning_rate=args.learning_rate,
            seed=args.seed,
        )
    except QuickfitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        result = run_file(
            args.path,
            progress=progress,
            config=config,
            backend=args.backend,
            parsing='strict' if args.strict_numbers else 'lenient',
        )
    except QuickfitError as e:
        if args.quiet:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.as_dict(), indent=2))
    else:
        print(result.summary())
    return 0


if __name__ == '__main__':
    sys.exit(main())
