"""
Test Assertions
===============

Assertion helpers and small HTML extractors for compat table output.
"""

import re
from typing import List, Tuple

__all__ = [
    "assert_valid_table_html",
    "assert_note_markers_resolve",
    "body_rows",
    "row_cells",
    "note_marker_numbers",
    "footnotes",
    "header_cells",
]

ROW_PATTERN = re.compile(r"<tr>\n<td>(.*?)</td>\n(.*?)\n</tr>")
CELL_PATTERN = re.compile(r'<td class="([a-z-]+)">(.*?)</td>')
HEADER_PATTERN = re.compile(r'<th style="width: ([0-9.]+)%">(.+?)</th>')
MARKER_PATTERN = re.compile(r'<sup><a href="#compatNote_(\d+)">(\d+)</a></sup>')
FOOTNOTE_PATTERN = re.compile(r'<p id="compatNote_(\d+)">(\d+)\. (.*?)</p>')


def assert_valid_table_html(html: str) -> None:
    """Assert that a rendered fragment is a well-formed compat table."""
    assert isinstance(html, str)
    assert html.startswith('<table class="compat-table">')
    assert html.count("<table") == 1
    assert "<thead>" in html and "</thead>" in html
    assert "<tbody>" in html and "</tbody>" in html
    assert "</table>" in html


def body_rows(html: str) -> List[Tuple[str, str]]:
    """Return (label, cells markup) for every table body row."""
    body = html.split("<tbody>", 1)[1].split("</tbody>", 1)[0]
    return ROW_PATTERN.findall(body)


def row_cells(cells_markup: str) -> List[Tuple[str, str]]:
    """Return (css class, content) for every cell of a row."""
    return CELL_PATTERN.findall(cells_markup)


def header_cells(html: str) -> List[Tuple[str, str]]:
    """Return (width, browser name) for every browser header cell."""
    head = html.split("<thead>", 1)[1].split("</thead>", 1)[0]
    return HEADER_PATTERN.findall(head)


def note_marker_numbers(html: str) -> List[int]:
    """Numbers of all footnote markers, in document order."""
    numbers = []
    for target, text in MARKER_PATTERN.findall(html):
        assert target == text, f"Marker text {text} does not match its target {target}"
        numbers.append(int(target))
    return numbers


def footnotes(html: str) -> List[Tuple[int, str]]:
    """Return (number, text) for every footnote line."""
    result = []
    for anchor, number, text in FOOTNOTE_PATTERN.findall(html):
        assert anchor == number
        result.append((int(number), text))
    return result


def assert_note_markers_resolve(html: str) -> None:
    """Assert every footnote marker targets an existing footnote anchor."""
    anchors = {number for number, _text in footnotes(html)}
    for number in note_marker_numbers(html):
        assert number in anchors, f"Footnote marker {number} has no target"
