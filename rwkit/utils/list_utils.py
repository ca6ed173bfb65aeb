#!/usr/bin/env python3
"""
Small helpers for lists of strings.
"""

from typing import List, Sequence


def exists_in_list(query: str, values: Sequence[str]) -> bool:
    for value in values:
        if value == query:
            return True
    return False


def append_if_unique(values: List[str], value: str) -> List[str]:
    """
    Append ``value`` unless it is already present.

    Returns:
        ``values`` itself when the value is present, otherwise a new list
        with the value appended
    """
    if exists_in_list(value, values):
        return values
    return values + [value]


def concat_list_nicely(values: Sequence[str]) -> str:
    """
    Join the non-empty entries with ', ' for printing.

    Trailing commas and spaces are removed from the result.
    """
    res = ""
    for value in values:
        if value != "":
            res += f"{value}, "
    return res.rstrip(", ")


def split_lines(lines: Sequence[str], sep: str) -> List[List[str]]:
    """Split every line on ``sep``; handy for multi-line queries."""
    return [line.split(sep) for line in lines]
