"""Entry point for macfmt."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from .config import LOG_FORMATS, LOG_LEVELS, Config
from .errors import MacFmtError
from .input_source import open_input
from .logging_config import setup_logging
from .mac_utils import CasePolicy, Notation
from .service import MacFormatService

logger = logging.getLogger(__name__)

NOTATION_HELP = {
    Notation.STANDARD: "xx:xx:xx:xx:xx:xx [default]",
    Notation.CISCO: "xxxx.xxxx.xxxx",
    Notation.WINDOWS: "xx-xx-xx-xx-xx-xx",
    Notation.BARE: "xxxxxxxxxxxx",
}


def build_parser() -> argparse.ArgumentParser:
    notations = "\n".join(
        f"  {notation.value:<10}{NOTATION_HELP[notation]}" for notation in Notation
    )
    parser = argparse.ArgumentParser(
        prog="macfmt",
        description="Find MAC addresses in text and print them in another format.",
        epilog=f"notations:\n{notations}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "notation",
        nargs="?",
        help="Output notation (default: standard, or MACFMT_NOTATION)",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Input file (if not provided, reads from stdin)",
    )
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "--upper",
        action="store_true",
        help="Convert output to uppercase",
    )
    case_group.add_argument(
        "--lower",
        action="store_true",
        help="Convert output to lowercase",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Log level (default: WARNING, or LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        help="Log format (default: text, or LOG_FORMAT)",
    )
    return parser


def resolve_positionals(parser: argparse.ArgumentParser, args: argparse.Namespace):
    """Sort out `[notation] [input-file]` when only one positional is given."""
    names = {notation.value for notation in Notation}

    if args.notation is None or args.notation in names:
        return

    if args.file is not None:
        parser.error(
            f"invalid notation: {args.notation!r} (choose from {', '.join(sorted(names))})"
        )

    args.file = args.notation
    args.notation = None


def apply_args(config: Config, args: argparse.Namespace):
    """Let command-line flags override environment configuration."""
    if args.notation:
        config.notation = Notation(args.notation)
    if args.upper:
        config.case_policy = CasePolicy.UPPER
    elif args.lower:
        config.case_policy = CasePolicy.LOWER
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format


def silence_stdout():
    """Point stdout at /dev/null so unflushed output is dropped."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv=None):
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    resolve_positionals(parser, args)

    if os.path.exists(args.env_file):
        load_dotenv(args.env_file)

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    apply_args(config, args)
    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.info(f"Starting macfmt with arguments: {sys.argv if argv is None else argv}")

    service = MacFormatService(config)

    try:
        lines = open_input(args.file, config)
        service.run(lines, sys.stdout)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
    except BrokenPipeError:
        # Reader went away (e.g. `| head -1`); keep the exit-time flush quiet.
        silence_stdout()
        sys.exit(1)
    except MacFmtError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Processing completed successfully")


if __name__ == "__main__":
    main()
