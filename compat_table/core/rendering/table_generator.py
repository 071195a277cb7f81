"""
Compat Table Generator
======================

Build HTML compatibility tables from compat documents.

A feature document renders as a feature table: a basic support row, one row
per sub-feature and a numbered footnote block. An identifier document renders
as an aggregate table: one row per feature, backed by its basic support data,
with an asterisk linking to the feature page whenever the summary hides
sub-feature differences or notes.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional

import jinja2

from compat_table.config.logging import get_logger
from compat_table.config.settings import get_settings
from compat_table.core.compat.document import load_compat_document
from compat_table.models.schemas import (
    CompatDocument,
    FeatureDocument,
    IdentifierDocument,
    RenderContext,
)

from .support import (
    NOTE_ANCHOR_PREFIX,
    build_feature_url,
    classify_support,
    collect_notes,
    needs_summary_marker,
    render_cell,
    render_support_cells,
    summary_marker,
)

logger = get_logger(__name__)

MISSING_BASE_PATH_MESSAGE = "Compat data must contain '__compat', or a base path must be supplied"

TEMPLATE_DIR = Path(__file__).parent / "templates"


class TableGenerationError(Exception):
    """Exception raised when table generation fails."""

    pass


class MissingBasePathError(TableGenerationError):
    """Raised when an identifier document is rendered without a base path."""

    def __init__(self, message: str = MISSING_BASE_PATH_MESSAGE) -> None:
        super().__init__(message)


class TableRow(NamedTuple):
    label: str
    cells: str


def create_template_environment() -> jinja2.Environment:
    """
    Create the Jinja2 environment holding the table skeletons.

    Autoescaping is off: feature names, notes and URLs are interpolated
    verbatim and escaping is left to the caller.
    """
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


class BaseTableBuilder(ABC):
    """Abstract base class for compat table builders."""

    template_name: str

    def __init__(self, env: jinja2.Environment, context: RenderContext) -> None:
        self.env = env
        self.context = context

    @abstractmethod
    def build(self, document: Any) -> str:
        """Build table HTML for a compat document."""
        pass

    def _header_context(self) -> Dict[str, Any]:
        """Template variables of the shared table header."""
        return {
            "browsers": self.context.browsers,
            "label_column_width": self.context.label_column_width,
            "browser_column_width": f"{self.context.browser_column_width:g}",
        }

    def _render(self, **template_vars: Any) -> str:
        template = self.env.get_template(self.template_name)
        return template.render(**self._header_context(), **template_vars)


class FeatureTableBuilder(BaseTableBuilder):
    """Detailed table of one feature and its sub-features."""

    template_name = "feature_table.html"

    def __init__(self, env: jinja2.Environment, context: RenderContext) -> None:
        super().__init__(env, context)
        self.logger: Any = logger.bind(builder="feature")  # structlog.BoundLoggerBase

    def build(self, document: FeatureDocument) -> str:
        """
        Build a feature table.

        Args:
            document: Feature document

        Returns:
            Table HTML followed by the footnote block
        """
        record = document.compat
        browsers = self.context.browsers
        labels = self.context.labels

        # Numbering is local to this table
        notes = collect_notes(record, list(browsers))

        rows: List[TableRow] = [
            TableRow(
                labels.basic_support,
                render_support_cells(record.basic_support, browsers, labels, notes),
            )
        ]
        for name, statement in record.subfeatures():
            rows.append(
                TableRow(f"<code>{name}</code>", render_support_cells(statement, browsers, labels, notes))
            )

        self.logger.info("Rendering feature table", rows=len(rows), notes=len(notes))
        return self._render(rows=rows, notes=notes, note_anchor_prefix=NOTE_ANCHOR_PREFIX)


class AggregateTableBuilder(BaseTableBuilder):
    """Summary table with one row per feature of an identifier document."""

    template_name = "aggregate_table.html"

    def __init__(self, env: jinja2.Environment, context: RenderContext, base_url: str) -> None:
        super().__init__(env, context)
        self.base_url = base_url
        self.logger: Any = logger.bind(builder="aggregate", base_url=base_url)  # structlog.BoundLoggerBase

    def build(self, document: IdentifierDocument) -> str:
        """
        Build an aggregate table.

        Args:
            document: Identifier document

        Returns:
            Table HTML; aggregate tables carry no footnote block
        """
        rows: List[TableRow] = []
        for name, record in document.sorted_features():
            feature_url = build_feature_url(self.context.locale, self.base_url, name)

            cells: List[str] = []
            for browser in self.context.browsers:
                entry = record.basic_support.entry_for(browser)
                display = classify_support(entry.version_added, self.context.labels)
                marker = summary_marker(feature_url) if needs_summary_marker(record, browser) else ""
                cells.append(render_cell(display, marker))

            rows.append(TableRow(f'<a href="{feature_url}"><code>{name}</code></a>', "".join(cells)))

        self.logger.info("Rendering aggregate table", rows=len(rows))
        return self._render(rows=rows)


class CompatTableGenerator:
    """Render compat data as an HTML table fragment."""

    def __init__(self, context: Optional[RenderContext] = None) -> None:
        self.context = context if context is not None else RenderContext.from_settings(get_settings())
        self.env = create_template_environment()
        self.logger: Any = logger.bind(locale=self.context.locale)  # structlog.BoundLoggerBase

    def create_builder(self, document: CompatDocument, base_url: Optional[str] = None) -> BaseTableBuilder:
        """
        Select the builder for a document variant.

        Args:
            document: Loaded compat document
            base_url: Base path of the aggregating page, ignored for feature documents

        Returns:
            Table builder instance

        Raises:
            MissingBasePathError: If an identifier document comes without a base path
        """
        if isinstance(document, FeatureDocument):
            return FeatureTableBuilder(self.env, self.context)

        if not base_url:
            self.logger.error("Table generation failed", error=MISSING_BASE_PATH_MESSAGE)
            raise MissingBasePathError()

        return AggregateTableBuilder(self.env, self.context, base_url)

    def generate(self, data: Any, base_url: Optional[str] = None) -> str:
        """
        Generate table HTML for compat data.

        Args:
            data: Deserialized compat data, or an already loaded document
            base_url: Locale-agnostic path of the aggregating page; required
                unless the data contains ``__compat``

        Returns:
            HTML fragment

        Raises:
            CompatDocumentError: If the data is not a valid compat document
            MissingBasePathError: If no base path is given for an identifier document
            TableGenerationError: If template rendering fails
        """
        if isinstance(data, (FeatureDocument, IdentifierDocument)):
            document: CompatDocument = data
        else:
            document = load_compat_document(data)

        builder = self.create_builder(document, base_url)

        try:
            html = builder.build(document)
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("Table generation failed", error=error_msg)
            raise TableGenerationError(error_msg) from e

        self.logger.debug("Table generation completed", html_length=len(html))
        return html


def render_compat_table(
    data: Any, base_url: Optional[str] = None, context: Optional[RenderContext] = None
) -> str:
    """
    Render compat data as an HTML table fragment.

    Args:
        data: Deserialized compat data
        base_url: Locale-agnostic path of the aggregating page
        context: Render configuration; defaults to one built from settings

    Returns:
        HTML fragment
    """
    return CompatTableGenerator(context).generate(data, base_url)
