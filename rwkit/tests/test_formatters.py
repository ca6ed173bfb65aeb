#!/usr/bin/env python3
"""
Tests for JSON and XML formatting.
"""

import os
import sys
import unittest
from dataclasses import dataclass
from xml.parsers.expat import ExpatError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from rwkit.models import FormatResult
from rwkit.exporters.json_exporter import format_json, json_pretty, json_flat
from rwkit.exporters.xml_exporter import format_xml, xml_pretty


@dataclass
class Point:
    x: int
    y: int


class TestFormatResult(unittest.TestCase):

    def test_success(self):
        r = FormatResult.success("{}")
        self.assertTrue(r.ok)
        self.assertEqual(r.message, "")
        self.assertEqual(str(r), "{}")

    def test_failure(self):
        r = FormatResult.failure(ValueError("bad input"))
        self.assertFalse(r.ok)
        self.assertEqual(r.text, "")
        self.assertEqual(str(r), "bad input")


class TestJson(unittest.TestCase):

    def test_pretty_uses_four_spaces(self):
        self.assertEqual(
            json_pretty({"a": 1, "b": [1, 2]}),
            '{\n    "a": 1,\n    "b": [\n        1,\n        2\n    ]\n}',
        )

    def test_flat_has_no_whitespace(self):
        self.assertEqual(json_flat({"a": 1, "b": [1, 2]}), '{"a":1,"b":[1,2]}')

    def test_dataclass(self):
        self.assertEqual(json_flat(Point(1, 2)), '{"x":1,"y":2}')
        self.assertEqual(json_flat([Point(0, 0)]), '[{"x":0,"y":0}]')

    def test_non_ascii_is_kept(self):
        self.assertEqual(json_flat({"city": "Zürich"}), '{"city":"Zürich"}')

    def test_keys_keep_insertion_order_and_markup_is_not_escaped(self):
        self.assertEqual(json_flat({"b": 1, "a": "<&>"}), '{"b":1,"a":"<&>"}')

    def test_unserializable_returns_error_text(self):
        result = format_json({1, 2})
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, TypeError)
        text = json_pretty({1, 2})
        self.assertEqual(text, "Object of type set is not JSON serializable")
        self.assertEqual(text, result.message)
        self.assertEqual(json_flat({1, 2}), text)

    def test_nan_is_rejected(self):
        result = format_json(float("nan"))
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, ValueError)
        self.assertTrue(json_pretty(float("nan")))

    def test_circular_reference(self):
        loop = []
        loop.append(loop)
        self.assertFalse(format_json(loop).ok)


class TestXml(unittest.TestCase):

    def test_reindents_with_four_spaces(self):
        raw = "<a>  <b>text</b>\n<c/></a>"
        self.assertEqual(xml_pretty(raw), "<a>\n    <b>text</b>\n    <c/>\n</a>")

    def test_nested(self):
        raw = "<root><list><item>1</item><item>2</item></list></root>"
        self.assertEqual(
            xml_pretty(raw),
            "<root>\n"
            "    <list>\n"
            "        <item>1</item>\n"
            "        <item>2</item>\n"
            "    </list>\n"
            "</root>",
        )

    def test_declaration_is_kept_when_present(self):
        result = format_xml('<?xml version="1.0"?><a><b/></a>')
        self.assertTrue(result.ok)
        self.assertTrue(result.text.startswith("<?xml"))
        self.assertTrue(result.text.endswith("<a>\n    <b/>\n</a>"))

    def test_cdata_is_left_untouched(self):
        self.assertEqual(xml_pretty("<a><![CDATA[1 >   < 2]]></a>"), "<a><![CDATA[1 >   < 2]]></a>")

    def test_blank_lines_inside_text_are_kept(self):
        self.assertEqual(xml_pretty("<a>line1\n\nline3</a>"), "<a>line1\n\nline3</a>")

    def test_several_top_level_elements(self):
        result = format_xml("<a/>\n  <b><c>1</c></b>")
        self.assertTrue(result.ok, result.message)
        self.assertEqual(result.text, "<a/>\n<b>\n    <c>1</c>\n</b>")

    def test_bare_character_data(self):
        self.assertEqual(xml_pretty("just text"), "just text")

    def test_comments_are_kept(self):
        self.assertEqual(xml_pretty("<a><!-- note --><b/></a>"), "<a>\n    <!-- note -->\n    <b/>\n</a>")

    def test_empty_input(self):
        self.assertEqual(xml_pretty(""), "")
        self.assertTrue(format_xml("   \n").ok)

    def test_malformed_returns_error_text(self):
        result = format_xml("<a><b></a>")
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, ExpatError)
        self.assertIn("mismatched tag", xml_pretty("<a><b></a>"))

    def test_non_string_does_not_raise(self):
        result = format_xml(42)
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, TypeError)
        self.assertEqual(xml_pretty(42), "expected XML as str, got int")
        self.assertEqual(xml_pretty(b"<a/>"), "expected XML as str, got bytes")


if __name__ == "__main__":
    unittest.main(verbosity=2)
