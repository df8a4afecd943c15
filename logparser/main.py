"""log-parser — classify comma-separated log lines and report severe errors."""

import logging
import os
import sys
from argparse import ArgumentParser

from logparser.config import ConfigError, load_config, load_yaml_config
from logparser.filters import filter_errors_above, filter_unknown
from logparser.formatter import get_formatter
from logparser.parser import parse_file
from logparser.reader import read_log_file

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="log-parser",
        description="Parse a log file and print errors above a severity level.",
    )
    parser.add_argument(
        "file",
        help="Log file path ('-' reads stdin)",
    )
    parser.add_argument(
        "--severity",
        type=int,
        help="Show errors with severity strictly greater than N (default: 50)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--unknowns",
        action="store_true",
        help="Show only lines that could not be parsed",
    )
    mode.add_argument(
        "--all",
        action="store_true",
        help="Show every parsed entry",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colorize output by log level (ANSI)",
    )
    parser.add_argument(
        "--config",
        help="Optional YAML config file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging on stderr",
    )
    return parser


def run(args) -> int:
    """Load config, parse the file, and print the selected entries."""
    config = load_config(args, load_yaml_config(args.config))
    logging.getLogger().setLevel(config.log_level)
    logger.info("Config: severity_threshold=%d, output_format=%s",
                config.severity_threshold, config.output_format)

    messages = parse_file(read_log_file(args.file))

    if args.unknowns:
        selected = filter_unknown(messages)
    elif args.all:
        selected = messages
    else:
        selected = filter_errors_above(messages, config.severity_threshold)

    formatter = get_formatter(output_format=config.output_format, color=config.color)
    for message in selected:
        print(formatter(message))

    logger.info("%d of %d entries shown", len(selected), len(messages))
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [LOG-PARSER] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(args)
    except KeyboardInterrupt:
        return 0
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); silence the flush at interpreter exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except (OSError, UnicodeDecodeError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
