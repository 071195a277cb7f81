"""
Compat Document Loader
======================

Discriminate the two compat document shapes and build typed models from
already-deserialized data. Files on disk may be JSON or YAML.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from compat_table.config.logging import get_logger
from compat_table.models.schemas import (
    COMPAT_KEY,
    CompatDocument,
    FeatureDocument,
    IdentifierDocument,
)

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class CompatDocumentError(Exception):
    """Exception raised when compat data cannot be turned into a document."""

    pass


def load_compat_document(data: Any) -> CompatDocument:
    """
    Build a typed compat document from deserialized data.

    This is the only place where the document shape is inspected: a mapping
    with a ``__compat`` key is a feature document, any other mapping is an
    identifier document.

    Args:
        data: Deserialized compat data

    Returns:
        FeatureDocument or IdentifierDocument

    Raises:
        CompatDocumentError: If the data is not a mapping or fails validation
    """
    if not isinstance(data, Mapping):
        raise CompatDocumentError(
            f"Compat data must be a mapping, got {type(data).__name__}"
        )

    document_type: Union[type[FeatureDocument], type[IdentifierDocument]]
    document_type = FeatureDocument if COMPAT_KEY in data else IdentifierDocument

    try:
        document = document_type.model_validate(data)
    except ValidationError as e:
        error_msg = f"Invalid compat data: {e}"
        logger.error("Compat document validation failed", document_type=document_type.__name__)
        raise CompatDocumentError(error_msg) from e

    logger.debug("Compat document loaded", document_type=document_type.__name__)
    return document


def load_compat_file(path: Union[str, Path]) -> CompatDocument:
    """
    Read a JSON or YAML compat data file into a typed document.

    Args:
        path: File path; ``.yaml``/``.yml`` files are read as YAML, anything else as JSON

    Returns:
        FeatureDocument or IdentifierDocument

    Raises:
        CompatDocumentError: If the file cannot be read, decoded or validated
    """
    path = Path(path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CompatDocumentError(f"Cannot read compat data file {path}: {e}") from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CompatDocumentError(f"Cannot decode compat data file {path}: {e}") from e

    logger.info("Compat data file read", path=str(path))
    return load_compat_document(data)
