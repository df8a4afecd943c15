"""Log file reading — whole-file content for parse_file."""

import logging
import os
import sys

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def read_log_file(filepath: str) -> str:
    """Return the text of a log file, or stdin when filepath is '-'.

    A single trailing newline terminates the last line rather than starting an
    empty one, so it is removed.

    Raises FileNotFoundError if the path doesn't exist.
    """
    if filepath == STDIN_PATH:
        content = sys.stdin.read()
    else:
        if not os.path.isfile(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()

    logger.info("Read %d characters from %s", len(content), filepath)
    return content.removesuffix("\n")
