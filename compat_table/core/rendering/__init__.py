"""
Rendering Module
===============

HTML generation of browser compatibility tables.

Components:
- support: Support classification, footnote collection and cell markup
- table_generator: Feature and aggregate table builders and the render entry point
- templates: Jinja2 table skeletons
"""

from .table_generator import (
    CompatTableGenerator,
    MissingBasePathError,
    TableGenerationError,
    render_compat_table,
)

__all__ = [
    "CompatTableGenerator",
    "MissingBasePathError",
    "TableGenerationError",
    "render_compat_table",
]
