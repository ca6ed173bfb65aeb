#!/usr/bin/env python3
"""
CSV reader and writer.
"""

import csv
import os
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from ..config import CSV_DELIMITER, CSV_QUOTECHAR, CSV_LINE_TERMINATOR, CSV_ENCODING
from ..utils.file_utils import file_exists, validate_filepath
from ..utils.logging_config import get_logger

DIALECT = {
    "delimiter": CSV_DELIMITER,
    "quotechar": CSV_QUOTECHAR,
    "lineterminator": CSV_LINE_TERMINATOR,
    "quoting": csv.QUOTE_MINIMAL,
}


class CsvWriter:
    """
    csv.writer that also quotes fields containing a carriage return or a
    line feed.

    With a "\\n" line terminator the csv module leaves a lone "\\r" unquoted,
    and a reader would split the field into two records. Rows holding
    either character are written with every field quoted.
    """

    def __init__(self, f):
        self._minimal = csv.writer(f, **DIALECT)
        self._quoted = csv.writer(f, **dict(DIALECT, quoting=csv.QUOTE_ALL))

    def writerow(self, row):
        try:
            fields = list(row)
        except TypeError:
            # let the csv module report the bad row
            return self._minimal.writerow(row)
        if any(isinstance(v, str) and ("\r" in v or "\n" in v) for v in fields):
            return self._quoted.writerow(fields)
        return self._minimal.writerow(fields)

    def writerows(self, rows):
        for row in rows:
            self.writerow(row)


class _LineRecorder:
    """Iterates a file while keeping the raw text of the current record."""

    def __init__(self, f):
        self._f = f
        self._lines: List[str] = []

    def __iter__(self):
        return self

    def __next__(self) -> str:
        line = next(self._f)
        self._lines.append(line)
        return line

    def take(self) -> str:
        raw = "".join(self._lines)
        self._lines = []
        return raw


def has_bare_quote(raw: str, delimiter: str = CSV_DELIMITER, quotechar: str = CSV_QUOTECHAR) -> bool:
    """
    True if a quote character appears inside a field that does not start
    with one, e.g. ``x"y``.
    """
    in_quotes = False
    field_start = True
    just_closed = False
    for ch in raw:
        if in_quotes:
            if ch == quotechar:
                in_quotes = False
                just_closed = True
            continue
        if ch == quotechar:
            if not (field_start or just_closed):
                return True
            # opening quote, or the second half of a doubled quote
            in_quotes = True
            field_start = False
            just_closed = False
            continue
        field_start = ch in (delimiter, "\r", "\n")
        just_closed = False
    return False


def read_csv_file(path, logger: Optional[logging.Logger] = None) -> List[List[str]]:
    """
    Read every record of a CSV file.

    The first record fixes the number of fields. Reading stops at the first
    malformed record (bad quoting or a different field count); the rows
    read before it are returned.

    Args:
        path: CSV file path

    Returns:
        List of rows (empty if the file cannot be opened)
    """
    log = get_logger(logger, __name__)
    rows: List[List[str]] = []
    try:
        f = open(validate_filepath(path, log), encoding=CSV_ENCODING, newline='')
    except OSError as e:
        log.error("opening '%s' - %s", path, e)
        return rows

    with f:
        recorder = _LineRecorder(f)
        reader = csv.reader(recorder, strict=True, **DIALECT)
        fields = None
        try:
            for row in reader:
                raw = recorder.take()
                if not row:
                    continue
                if has_bare_quote(raw):
                    log.error("reading - record on line %d: bare \" in non-quoted field", reader.line_num)
                    return rows
                if fields is None:
                    fields = len(row)
                elif len(row) != fields:
                    log.error("reading - record on line %d: wrong number of fields", reader.line_num)
                    return rows
                rows.append(row)
        except (csv.Error, UnicodeDecodeError) as e:
            log.error("reading - record on line %d: %s", reader.line_num, e)
    return rows


@contextmanager
def new_csv_file(path, logger: Optional[logging.Logger] = None) -> Iterator[Optional[CsvWriter]]:
    """
    Create a new CSV file and yield a writer for it.

    Never overwrites: if anything already exists at the path, or the file
    cannot be created, the reason is logged and None is yielded. The file
    is flushed and closed when the block exits.

    Usage:
        with new_csv_file("out.csv") as writer:
            if writer is not None:
                writer.writerow(["a", "b"])
    """
    log = get_logger(logger, __name__)
    try:
        fp = os.path.abspath(os.fspath(path))
    except (OSError, ValueError) as e:
        log.error("can't abs path to '%s' - %s", path, e)
        yield None
        return

    if file_exists(fp, log):
        log.error("file already exists at '%s'", fp)
        yield None
        return

    try:
        f = open(fp, 'x', encoding=CSV_ENCODING, newline='')
    except OSError as e:
        log.error("creating '%s' - %s", fp, e)
        yield None
        return

    with f:
        yield CsvWriter(f)
        f.flush()


def comma_sep(path, headers: Sequence[str], rows: Sequence[Sequence[str]],
              logger: Optional[logging.Logger] = None) -> bool:
    """
    Write a header row followed by data rows to a brand new CSV file.

    The header count is not checked against the rows. A row that cannot
    be written is logged and skipped.

    Args:
        path: Output CSV file path (must not exist yet)
        headers: Column names, written first
        rows: Data rows

    Returns:
        True if the file was created and written
    """
    log = get_logger(logger, __name__)
    with new_csv_file(path, log) as writer:
        if writer is None:
            log.error("failed to write new csv")
            return False

        try:
            writer.writerow(headers)
        except (csv.Error, OSError) as e:
            log.error("failing writing csv headers - %s", e)
            return False

        for i, row in enumerate(rows):
            try:
                writer.writerow(row)
            except (csv.Error, OSError) as e:
                log.error("writing row '%d' to csv - %s", i, e)

    log.info("wrote '%d' lines to '%s'", len(rows) + 1, path)
    return True
