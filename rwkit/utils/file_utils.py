#!/usr/bin/env python3
"""
Filesystem predicates and line-oriented file I/O.

Every reader here degrades instead of raising: failures are logged and an
empty value comes back.
"""

import os
import logging
from typing import List, Optional, Tuple

from ..config import ENCODING_FALLBACKS
from .logging_config import get_logger


def file_exists(path, logger: Optional[logging.Logger] = None) -> bool:
    """
    Check whether something exists at ``path``.

    Works on symbolic links as well as real files. Stat errors other than
    "not found" (permission denied, not a directory, ...) count as existing.

    Args:
        path: File or directory path

    Returns:
        False only when the path is known not to exist
    """
    log = get_logger(logger, __name__)
    try:
        os.stat(path)
    except FileNotFoundError as e:
        log.debug("%s", e)
        return False
    except (OSError, ValueError) as e:
        log.warning("%s", e)
        return True
    return True


def validate_filepath(path, logger: Optional[logging.Logger] = None) -> str:
    """
    Resolve ``path`` to an absolute path that can be stat'ed.

    Returns:
        The absolute path, or "" if it cannot be resolved or does not exist
    """
    log = get_logger(logger, __name__)
    try:
        fp = os.path.abspath(os.fspath(path))
    except (OSError, ValueError) as e:
        log.warning("can't abs path to '%s' - %s", path, e)
        return ""
    try:
        os.stat(fp)
    except (OSError, ValueError) as e:
        log.warning("%s", e)
        return ""
    return fp


def read_file_safe(path, logger: Optional[logging.Logger] = None) -> Tuple[Optional[str], Optional[str]]:
    """
    Read a file as text with encoding fallback.

    Line endings are left untouched.

    Args:
        path: File path to read

    Returns:
        (content, encoding) or (None, error_message) on failure
    """
    fp = validate_filepath(path, logger)

    for enc in ENCODING_FALLBACKS:
        try:
            with open(fp, encoding=enc, newline='') as f:
                content = f.read()
            return content, enc
        except UnicodeError:
            continue
        except OSError as e:
            return None, f"opening '{path}' - {e}"

    return None, f"Cannot decode '{path}' with any supported encoding"


def load_lines(path, logger: Optional[logging.Logger] = None) -> List[str]:
    """
    Load a file and return its lines, each trimmed of surrounding whitespace.

    Returns:
        Lines in file order (empty on failure)
    """
    log = get_logger(logger, __name__)
    content, enc = read_file_safe(path, log)
    if content is None:
        log.error("%s", enc)
        return []

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.strip() for line in lines]


def line_in_file_contains(path, search: str,
                          logger: Optional[logging.Logger] = None) -> Tuple[List[int], List[str]]:
    """
    A poor man's grep.

    Returns:
        (indices, lines): zero-based indices of the matching lines and the
        complete (trimmed) lines themselves
    """
    log = get_logger(logger, __name__)
    indices: List[int] = []
    matches: List[str] = []
    for n, line in enumerate(load_lines(path, log)):
        if search in line:
            indices.append(n)
            matches.append(line)

    if not matches:
        log.info("no matches")
    return indices, matches


def read_file_bytes(path, logger: Optional[logging.Logger] = None) -> Optional[bytes]:
    """Return the entire content of a file, or None if it cannot be read."""
    log = get_logger(logger, __name__)
    try:
        with open(validate_filepath(path, log), 'rb') as f:
            return f.read()
    except OSError as e:
        log.error("%s", e)
        return None
