#!/usr/bin/env python3
"""
rwkit - Command line entry point.

Usage:
    python -m rwkit.main lines notes.txt
    python -m rwkit.main grep notes.txt TODO
    python -m rwkit.main table data.csv
    python -m rwkit.main csv out.csv < rows.txt
    python -m rwkit.main --help
"""

import sys
import json
import argparse
import logging

from .config import APP_TITLE, LOGGER_NAME
from .utils.logging_config import setup_logging
from .utils.file_utils import file_exists, load_lines, line_in_file_contains, read_file_safe
from .utils.list_utils import split_lines
from .utils.stdin_utils import read_lines_from_stdin
from .exporters.csv_exporter import read_csv_file, comma_sep
from .exporters.json_exporter import format_json
from .exporters.xml_exporter import format_xml
from .exporters.table_exporter import tab_flex

logger = logging.getLogger(LOGGER_NAME)


def run_exists(args) -> int:
    found = file_exists(args.path)
    print("true" if found else "false")
    return 0 if found else 1


def run_lines(args) -> int:
    for line in load_lines(args.path):
        print(line)
    return 0


def run_grep(args) -> int:
    indices, lines = line_in_file_contains(args.path, args.text)
    for i, line in zip(indices, lines):
        print(f"{i}: {line}")
    return 0 if lines else 1


def run_json(args) -> int:
    content, enc = read_file_safe(args.path)
    if content is None:
        logger.error("%s", enc)
        return 1
    try:
        value = json.loads(content)
    except ValueError as e:
        logger.error("parsing '%s' - %s", args.path, e)
        return 1

    result = format_json(value, indent=None if args.flat else args.indent)
    if not result.ok:
        logger.error("%s", result.message)
        return 1
    print(result.text)
    return 0


def run_xml(args) -> int:
    content, enc = read_file_safe(args.path)
    if content is None:
        logger.error("%s", enc)
        return 1

    result = format_xml(content)
    if not result.ok:
        logger.error("formatting '%s' - %s", args.path, result.message)
        return 1
    print(result.text)
    return 0


def run_table(args) -> int:
    rows = read_csv_file(args.path)
    if not rows:
        logger.error("No rows in %s", args.path)
        return 1
    tab_flex(rows[0], rows[1:])
    return 0


def run_csv(args) -> int:
    rows = split_lines(read_lines_from_stdin(), args.sep)
    if not rows:
        logger.error("No input lines to write")
        return 1
    return 0 if comma_sep(args.path, rows[0], rows[1:]) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rwkit",
        description=f"{APP_TITLE} - text, CSV, JSON and XML helpers",
    )
    parser.add_argument("--version", action="version", version=f"{APP_TITLE}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p = sub.add_parser("exists", help="Check whether a path exists")
    p.add_argument("path")
    p.set_defaults(func=run_exists)

    p = sub.add_parser("lines", help="Print the trimmed lines of a file")
    p.add_argument("path")
    p.set_defaults(func=run_lines)

    p = sub.add_parser("grep", help="Print the lines of a file containing TEXT")
    p.add_argument("path")
    p.add_argument("text")
    p.set_defaults(func=run_grep)

    p = sub.add_parser("json", help="Re-format a JSON file")
    p.add_argument("path")
    p.add_argument("--flat", action="store_true", help="Single line output")
    p.add_argument("--indent", type=int, default=4, help="Spaces per level (default: 4)")
    p.set_defaults(func=run_json)

    p = sub.add_parser("xml", help="Re-indent an XML file")
    p.add_argument("path")
    p.set_defaults(func=run_xml)

    p = sub.add_parser("table", help="Print a CSV file as an aligned table")
    p.add_argument("path")
    p.set_defaults(func=run_table)

    p = sub.add_parser("csv", help="Write lines from stdin to a new CSV file")
    p.add_argument("path")
    p.add_argument("--sep", default=",", help="Field separator of the input lines (default: ',')")
    p.set_defaults(func=run_csv)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
