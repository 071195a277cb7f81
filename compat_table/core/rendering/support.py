"""
Support Cells
=============

Building blocks shared by the table builders: mapping ``version_added``
values to display classes, collecting footnotes, rendering the browser cells
of one row and deciding when an aggregate cell needs its summary marker.
"""

from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence

from compat_table.models.schemas import (
    FeatureRecord,
    SupportEntry,
    SupportStatement,
    TableLabels,
    VersionValue,
)

NOTE_ANCHOR_PREFIX = "compatNote_"
BROWSER_COMPAT_FRAGMENT = "Browser_compatibility"


class SupportClass(str, Enum):
    """CSS classes of support cells."""

    FULL = "full-support"
    NO = "no-support"
    UNKNOWN = "unknown-support"


class SupportDisplay(NamedTuple):
    css_class: SupportClass
    text: str


def classify_support(version_added: VersionValue, labels: TableLabels) -> SupportDisplay:
    """
    Map a ``version_added`` value to its cell class and text.

    Args:
        version_added: None, True, False or a version string
        labels: Localized labels for the non-version values

    Returns:
        SupportDisplay of CSS class and display text
    """
    if version_added is None:
        return SupportDisplay(SupportClass.UNKNOWN, labels.unknown)
    if version_added is True:
        return SupportDisplay(SupportClass.FULL, labels.yes)
    if version_added is False:
        return SupportDisplay(SupportClass.NO, labels.no)
    return SupportDisplay(SupportClass.FULL, version_added)


def collect_notes(record: FeatureRecord, browsers: Sequence[str]) -> List[str]:
    """
    Collect the unique notes of a feature record in first-seen order.

    Order is statements in document order, then browsers in catalog order,
    then notes as listed.
    """
    notes: List[str] = []
    for _name, statement in record.items():
        for browser in browsers:
            for note in statement.entry_for(browser).notes:
                if note not in notes:
                    notes.append(note)
    return notes


def note_marker(number: int) -> str:
    """Superscript link to footnote ``number``."""
    return f'<sup><a href="#{NOTE_ANCHOR_PREFIX}{number}">{number}</a></sup>'


def render_cell(display: SupportDisplay, suffix: str = "") -> str:
    return f'<td class="{display.css_class.value}">{display.text}{suffix}</td>'


def render_support_cells(
    statement: SupportStatement,
    browsers: Dict[str, str],
    labels: TableLabels,
    notes: Optional[Sequence[str]] = None,
) -> str:
    """
    Render one table cell per catalog browser for a support statement.

    Args:
        statement: Support set of the row
        browsers: Browser catalog, in column order
        labels: Localized labels
        notes: Collected notes of the table; when given, entries with notes get
            numbered footnote markers

    Returns:
        Concatenated ``<td>`` markup

    Raises:
        KeyError: If a catalog browser is missing from the support set
        ValueError: If an entry carries a note absent from ``notes``
    """
    cells: List[str] = []
    for browser in browsers:
        entry = statement.entry_for(browser)
        markers = ""
        if notes is not None:
            markers = "".join(note_marker(notes.index(note) + 1) for note in entry.notes)
        cells.append(render_cell(classify_support(entry.version_added, labels), markers))
    return "".join(cells)


def differs_from(entry: SupportEntry, basic: SupportEntry) -> bool:
    return entry.has_notes or entry.version_added != basic.version_added


def needs_summary_marker(record: FeatureRecord, browser: str) -> bool:
    """
    Whether the aggregate cell of ``browser`` summarizes incompletely.

    True when the basic support entry has notes, or when any sub-feature entry
    for the same browser has notes or a different ``version_added``.
    """
    basic = record.basic_support.entry_for(browser)
    if basic.has_notes:
        return True
    return any(
        differs_from(statement.entry_for(browser), basic)
        for _name, statement in record.subfeatures()
    )


def summary_marker(feature_url: str) -> str:
    return f'<a href="{feature_url}#{BROWSER_COMPAT_FRAGMENT}">*</a>'


def build_feature_url(locale: str, base_url: str, feature_name: str) -> str:
    """
    Documentation URL of one feature of an aggregate table.

    Args:
        locale: Current locale, used as the first path segment
        base_url: Locale-agnostic path of the aggregating page
        feature_name: Dotted feature name; each segment becomes a path component

    Returns:
        Absolute path such as ``/en-US/docs/Web/API/Foo/bar``
    """
    base = base_url.strip("/")
    parts = [locale]
    if base:
        parts.append(base)
    parts.extend(feature_name.split("."))
    return "/" + "/".join(parts)
