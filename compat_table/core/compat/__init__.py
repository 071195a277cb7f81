"""
Compat Data Module
=================

Turn already-deserialized compat data into typed documents.
"""

from .document import (
    CompatDocumentError,
    load_compat_document,
    load_compat_file,
)

__all__ = ["CompatDocumentError", "load_compat_document", "load_compat_file"]
