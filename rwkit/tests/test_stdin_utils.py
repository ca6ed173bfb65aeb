#!/usr/bin/env python3
"""
Tests for the standard input readers.
"""

import io
import os
import sys
import unittest
from unittest import mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from rwkit.utils.stdin_utils import read_lines_from_stdin, read_from_stdin


class FailingStream:
    """Serves the given lines, then fails like a broken device."""

    def __init__(self, lines):
        self._lines = list(lines)

    def readline(self, size=-1):
        if self._lines:
            return self._lines.pop(0)
        raise OSError("input/output error")


class TestReadLinesFromStdin(unittest.TestCase):

    def test_stops_after_two_blank_lines(self):
        self.assertEqual(read_lines_from_stdin(io.StringIO("x\n\n\ny\n")), ["x"])

    def test_single_blank_line_does_not_stop(self):
        self.assertEqual(read_lines_from_stdin(io.StringIO("a\n\nb\n\n\nc\n")), ["a", "b"])

    def test_end_of_stream_stops(self):
        self.assertEqual(read_lines_from_stdin(io.StringIO("a\nb")), ["a", "b"])

    def test_blank_then_end_of_stream_stops(self):
        self.assertEqual(read_lines_from_stdin(io.StringIO("a\n\n")), ["a"])

    def test_empty_input(self):
        self.assertEqual(read_lines_from_stdin(io.StringIO("")), [])

    def test_line_endings_are_stripped(self):
        self.assertEqual(read_lines_from_stdin(io.StringIO("a\r\n b \r\n\r\n\r\n")), ["a", " b "])

    def test_read_error_returns_lines_so_far(self):
        with self.assertLogs("rwkit", level="ERROR"):
            self.assertEqual(read_lines_from_stdin(FailingStream(["a\n", "b\n"])), ["a", "b"])

    def test_defaults_to_sys_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("from stdin\n\n\n")):
            self.assertEqual(read_lines_from_stdin(), ["from stdin"])


class TestReadFromStdin(unittest.TestCase):

    def test_reads_one_line(self):
        stream = io.StringIO("hello\r\nworld\n")
        self.assertEqual(read_from_stdin(stream), "hello")
        self.assertEqual(read_from_stdin(stream), "world")

    def test_end_of_stream_gives_empty_string(self):
        self.assertEqual(read_from_stdin(io.StringIO("")), "")

    def test_read_failure_is_fatal(self):
        with self.assertLogs("rwkit", level="CRITICAL"):
            with self.assertRaises(OSError):
                read_from_stdin(FailingStream([]))


if __name__ == "__main__":
    unittest.main(verbosity=2)
