"""
Test Data Package
================

Sample compat documents shared by the test modules.
"""

from .sample_compat_documents import (
    ALL_SAMPLE_DOCUMENTS,
    AGGREGATE_DOCUMENT,
    FETCH_FEATURE_DOCUMENT,
    MINIMAL_FEATURE_DOCUMENT,
    get_sample_document,
)

__all__ = [
    "ALL_SAMPLE_DOCUMENTS",
    "AGGREGATE_DOCUMENT",
    "FETCH_FEATURE_DOCUMENT",
    "MINIMAL_FEATURE_DOCUMENT",
    "get_sample_document",
]
