#!/usr/bin/env python3
"""
Tab-aligned console tables.

TabWriter implements elastic tabstops: text is buffered as cells separated
by tabs, and on flush every column is padded to the width of its widest
cell. A column's width is computed over a *column block*, the run of
consecutive lines that all have a terminated cell in that column, so a line
with fewer cells ends the blocks of the columns it does not reach.
"""

import sys
from typing import Any, List, Optional, Sequence, TextIO

from ..config import TABLE_STYLE, TableStyle

ALIGN_RIGHT = 1 << 0
DISCARD_EMPTY_COLUMNS = 1 << 1


class TabWriter:
    """
    Column-flushing writer.

    Args:
        output: Stream the formatted text is written to
        min_width: Minimal cell width including padding
        tab_width: Width of a tab character, used when pad_char is a tab
        padding: Added to a cell's width when computing the column width
        pad_char: Character used for padding
        flags: ALIGN_RIGHT and/or DISCARD_EMPTY_COLUMNS
    """

    def __init__(self, output: TextIO, min_width: int = 0, tab_width: int = 8,
                 padding: int = 1, pad_char: str = " ", flags: int = 0):
        if min_width < 0 or tab_width < 0 or padding < 0:
            raise ValueError("negative width or padding")
        self.output = output
        self.min_width = min_width
        self.tab_width = tab_width
        self.padding = padding
        self.pad_char = pad_char
        self.flags = flags
        if pad_char == "\t":
            # tab padding enforces left-alignment
            self.flags &= ~ALIGN_RIGHT
        self._reset()

    @classmethod
    def from_style(cls, output: TextIO, style: TableStyle = TABLE_STYLE, flags: int = 0) -> "TabWriter":
        return cls(output, style.min_width, style.tab_width, style.padding, style.pad_char, flags)

    def _reset(self) -> None:
        self._lines: List[List[str]] = [[]]
        self._cell: List[str] = []
        self._widths: List[int] = []

    # ─── Buffering ─────────────────────────────────────────

    def write(self, text: str) -> int:
        start = 0
        for i, ch in enumerate(text):
            if ch == "\t":
                self._cell.append(text[start:i])
                self._terminate_cell()
                start = i + 1
            elif ch == "\n":
                self._cell.append(text[start:i])
                ncells = self._terminate_cell()
                self._lines.append([])
                start = i + 1
                if ncells == 1:
                    # a line without tabs ends every column block
                    self.flush()
        self._cell.append(text[start:])
        return len(text)

    def _terminate_cell(self) -> int:
        line = self._lines[-1]
        line.append("".join(self._cell))
        self._cell = []
        return len(line)

    def flush(self) -> None:
        """Format the buffered lines and write them to the output."""
        if "".join(self._cell):
            self._terminate_cell()
        try:
            self._format(0, len(self._lines))
        finally:
            self._reset()

    def __enter__(self) -> "TabWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()

    # ─── Layout ────────────────────────────────────────────

    def _format(self, line0: int, line1: int) -> None:
        column = len(self._widths)
        this = line0
        while this < line1:
            if column >= len(self._lines[this]) - 1:
                this += 1
                continue

            # this line has a cell in the column: a new block begins here
            self._write_lines(line0, this)
            line0 = this

            width = self.min_width
            discardable = True
            while this < line1:
                line = self._lines[this]
                if column >= len(line) - 1:
                    break
                cell_width = len(line[column])
                width = max(width, cell_width + self.padding)
                if cell_width > 0:
                    discardable = False
                this += 1

            if discardable and self.flags & DISCARD_EMPTY_COLUMNS:
                width = 0

            self._widths.append(width)
            self._format(line0, this)
            self._widths.pop()
            line0 = this

        self._write_lines(line0, line1)

    def _write_lines(self, line0: int, line1: int) -> None:
        for i in range(line0, line1):
            line = self._lines[i]
            for j, cell in enumerate(line):
                if j < len(self._widths):
                    self._write_cell(cell, self._widths[j])
                else:
                    # last cell of the line is not part of a column
                    self.output.write(cell)
            if i + 1 < len(self._lines):
                self.output.write("\n")

    def _write_cell(self, cell: str, width: int) -> None:
        if self.flags & ALIGN_RIGHT:
            self.output.write(self._padding(len(cell), width))
            self.output.write(cell)
        else:
            self.output.write(cell)
            self.output.write(self._padding(len(cell), width))

    def _padding(self, text_width: int, cell_width: int) -> str:
        if self.pad_char == "\t":
            if self.tab_width == 0:
                return ""
            # round the cell up to a multiple of the tab width
            cell_width = -(-cell_width // self.tab_width) * self.tab_width
            n = cell_width - text_width
            return "\t" * (-(-n // self.tab_width))
        return self.pad_char * (cell_width - text_width)


def rule(header: str, char: str = TABLE_STYLE.rule_char) -> str:
    """A run of ``char`` as wide as ``header``."""
    return char * len(header)


def tab_flex(headers: Sequence[str], rows: Sequence[Sequence[Any]],
             output: Optional[TextIO] = None, style: TableStyle = TABLE_STYLE) -> None:
    """
    Print a tab-aligned table.

    The headers determine the number of columns. Short rows are padded with
    empty cells and long rows are cut to the header count. The header is
    underlined, and the table closed, with dashes as wide as each header.

    Args:
        headers: Column names
        rows: Table rows; cells are rendered with str()
        output: Target stream (defaults to sys.stdout)
    """
    out = sys.stdout if output is None else output
    separator = "".join(f"{rule(h, style.rule_char)}\t" for h in headers) + "\n"

    tw = TabWriter.from_style(out, style)
    tw.write("".join(f"{h}\t" for h in headers) + "\n")
    tw.write(separator)
    for row in rows:
        for i in range(len(headers)):
            value = row[i] if i < len(row) else ""
            tw.write(f"{value}\t")
        tw.write("\n")
    tw.write(separator)
    tw.flush()
