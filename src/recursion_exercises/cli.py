import argparse
import json
import logging
import sys
from logging import Formatter, StreamHandler

from recursion_exercises.config import get_config
from recursion_exercises.errors import ConfigError, InvalidArgumentError
from recursion_exercises.fibonacci import fibonacci, fibonacci_sequence
from recursion_exercises.palindrome import is_palindrome
from recursion_exercises.reverse import reverse_sequence
from recursion_exercises.timing import timed

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# --- Logging Setup ---
class JsonFormatter(Formatter):
    """One JSON object per record. Dict messages become top-level fields."""

    def format(self, record):
        if isinstance(record.msg, dict):
            fields = record.msg
        else:
            fields = {"message": record.getMessage()}

        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            **fields,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(debug=False, fmt="json", level="INFO"):
    """Configures the root logger with a single stderr handler."""
    if debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, str(level).upper(), logging.INFO)
    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates if run multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = StreamHandler(sys.stderr)
    if fmt == "text":
        handler.setFormatter(Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JsonFormatter(datefmt='%Y-%m-%dT%H:%M:%S%z'))
    logger.addHandler(handler)

    logging.getLogger("recursion_exercises").setLevel(log_level)


# --- Commands ---

@timed
def run_fib(args):
    if args.sequence:
        return " ".join(str(x) for x in fibonacci_sequence(args.n))
    return str(fibonacci(args.n))


@timed
def run_palindrome(args):
    return "true" if is_palindrome(args.text) else "false"


@timed
def run_reverse(args):
    return " ".join(reverse_sequence(list(args.items)))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="recursion-exercises",
        description="Run the recursion exercises from the command line.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        default=None,
        help="YAML configuration file. Defaults to $RECURSION_EXERCISES_CONFIG or ./recursion_exercises.yaml."
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable DEBUG level logging."
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        default=None,
        help="Log output format (overrides logging.format)."
    )
    parser.add_argument(
        "--time", "-t",
        action="store_true",
        help="Log how long the command took."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    fib_parser = subparsers.add_parser("fib", help="Print the N-th Fibonacci number.")
    fib_parser.add_argument("n", type=int, help="Zero-based index.")
    fib_parser.add_argument(
        "--sequence", "-s",
        action="store_true",
        help="Print the first N numbers instead."
    )
    fib_parser.set_defaults(func=run_fib)

    pal_parser = subparsers.add_parser("palindrome", help="Check whether TEXT is a palindrome.")
    pal_parser.add_argument("text", help="Text to check.")
    pal_parser.set_defaults(func=run_palindrome)

    rev_parser = subparsers.add_parser("reverse", help="Print the given items in reverse order.")
    rev_parser.add_argument("items", nargs="*", metavar="ITEM", help="Items to reverse.")
    rev_parser.set_defaults(func=run_reverse)

    return parser


def recursion_limit(config):
    """Return recursion.limit as a positive int, or None when unset."""
    value = config.get('recursion.limit')
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"recursion.limit must be a positive integer, got {value!r}")
    return value


# --- Main CLI Logic ---

def main(argv=None):
    """
    Command-line entry point. Prints the result on stdout and returns 0.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Flags only until the config file is read, so load-time warnings are formatted too
    setup_logging(debug=args.debug, fmt=args.log_format or "json", level="WARNING")
    logger = logging.getLogger(__name__)

    try:
        config = get_config(args.config)
        limit = recursion_limit(config)
    except ConfigError as e:
        logger.error({"event": "config_load", "status": "failed", "error": str(e)})
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(
        debug=args.debug,
        fmt=args.log_format or config.get('logging.format', 'json'),
        level=config.get('logging.level', 'INFO'),
    )

    if args.time:
        config.update_runtime('timing.enabled', True)
        logging.getLogger("recursion_exercises.timing").setLevel(logging.DEBUG)

    if limit is not None:
        sys.setrecursionlimit(limit)
        logger.debug({"event": "recursion_limit", "limit": limit})

    logger.info({"event": "cli_start", "command": args.command})

    try:
        output = args.func(args)
    except InvalidArgumentError as e:
        logger.error({"event": "cli_end", "status": "failed", "reason": "invalid_argument", "error": str(e)})
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)
    except RecursionError as e:
        logger.error({"event": "cli_end", "status": "failed", "reason": "recursion_depth", "error": str(e)})
        print(f"ERROR: Input too large for recursion depth: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)
    logger.info({"event": "cli_end", "status": "success", "command": args.command})
    return 0


if __name__ == "__main__":
    sys.exit(main())
