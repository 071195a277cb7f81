"""
Compat Table
============

Render HTML browser compatibility tables from structured compat data for
documentation builds.

This package provides:
- Pydantic models over already-deserialized compat documents
- Feature tables (one feature, its sub-features and footnotes)
- Aggregate tables (one summary row per feature of an interface)
- A small command line wrapper for build scripts
"""

__version__ = "1.0.0"
__author__ = "Compat Table Team"
