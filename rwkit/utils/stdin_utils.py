#!/usr/bin/env python3
"""
Interactive readers for standard input.
"""

import sys
import logging
from typing import List, Optional, TextIO

from ..config import STDIN_BUFFER_SIZE
from .logging_config import get_logger


def _read_line(stream: TextIO) -> Optional[str]:
    """Read one line without its line ending; None at end of stream."""
    raw = stream.readline(STDIN_BUFFER_SIZE)
    if raw == "":
        return None
    return raw.rstrip("\r\n")


def read_lines_from_stdin(stream: Optional[TextIO] = None,
                          logger: Optional[logging.Logger] = None) -> List[str]:
    """
    Read lines until two consecutive empty lines.

    A blank line or an end of stream arms the stop flag; a second one in a
    row stops reading. Any non-blank line disarms it.

    Args:
        stream: Text stream to read (defaults to sys.stdin)

    Returns:
        The non-blank lines read, in order
    """
    log = get_logger(logger, __name__)
    stream = sys.stdin if stream is None else stream
    lines: List[str] = []
    skip = False

    while True:
        try:
            line = _read_line(stream)
        except (OSError, ValueError) as e:
            log.error("reading - %s", e)
            return lines

        if not line:
            if skip:
                break
            skip = True
            continue

        skip = False
        lines.append(line)

    return lines


def read_from_stdin(stream: Optional[TextIO] = None,
                    logger: Optional[logging.Logger] = None) -> str:
    """
    Return a single line from standard input, without its line ending.

    An immediate end of stream gives "". Any other read failure is fatal
    and propagates to the caller.
    """
    log = get_logger(logger, __name__)
    stream = sys.stdin if stream is None else stream
    try:
        line = _read_line(stream)
    except (OSError, ValueError) as e:
        log.critical("reading from stdin - %s", e)
        raise
    return "" if line is None else line
