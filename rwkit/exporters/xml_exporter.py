#!/usr/bin/env python3
"""
XML re-indentation.
"""

import re
from typing import Any, List, Tuple
from xml.dom import minidom, Node
from xml.parsers.expat import ExpatError

from ..config import XML_INDENT
from ..models import FormatResult

_DECLARATION = re.compile(r'^<\?xml\b.*?\?>', re.DOTALL)
_FRAGMENT_ROOT = "rwkit-fragment"


def _split_declaration(content: str) -> Tuple[str, str]:
    m = _DECLARATION.match(content)
    if not m:
        return "", content
    return m.group(0), content[m.end():]


def _drop_blank_text(node) -> None:
    """Remove whitespace-only text nodes; CDATA sections are left alone."""
    for child in list(node.childNodes):
        if child.nodeType == Node.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
            child.unlink()
        elif child.hasChildNodes():
            _drop_blank_text(child)


def _parse(body: str):
    """
    Parse a document, or failing that a fragment: several top-level
    elements, or bare character data.

    Returns:
        The nodes to write out, in order
    """
    try:
        dom = minidom.parseString(body)
        parent = dom
    except ExpatError as e:
        try:
            dom = minidom.parseString(f"<{_FRAGMENT_ROOT}>{body}</{_FRAGMENT_ROOT}>")
        except ExpatError:
            raise e
        parent = dom.documentElement
    _drop_blank_text(parent)
    return list(parent.childNodes)


def _render(node) -> str:
    text = node.toprettyxml(indent=XML_INDENT)
    return text[:-1] if text.endswith("\n") else text


def format_xml(value: Any) -> FormatResult:
    """
    Re-indent raw XML.

    Whitespace-only text between tags is discarded and every element is
    written on its own line; other text, CDATA sections and comments are
    kept as they are. Fragments with more than one top-level node are
    accepted. An XML declaration is kept only if the input had one.

    Args:
        value: Raw XML string

    Returns:
        FormatResult holding the indented XML, or the parse error. A value
        that is not a string gives a TypeError result.
    """
    if not isinstance(value, str):
        return FormatResult.failure(
            TypeError(f"expected XML as str, got {type(value).__name__}"))

    declaration, body = _split_declaration(value.strip())
    body = body.strip()

    lines: List[str] = [declaration] if declaration else []
    if body:
        try:
            nodes = _parse(body)
        except ExpatError as e:
            return FormatResult.failure(e)
        try:
            lines.extend(_render(node) for node in nodes)
        except ValueError as e:
            # e.g. "]]>" inside a CDATA section
            return FormatResult.failure(e)
    return FormatResult.success("\n".join(lines))


def xml_pretty(value: Any) -> str:
    """Indented XML, or the error description. Never raises."""
    return str(format_xml(value))
