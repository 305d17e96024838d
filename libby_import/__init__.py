"""Libby Import — turn Libby reading-journey exports into Markdown notes."""

from libby_import.exceptions import ImportCancelledError, LibbyImportError, SchemaError
from libby_import.normalization import normalize, supports_version
from libby_import.reports import render

__all__ = [
    "ImportCancelledError",
    "LibbyImportError",
    "SchemaError",
    "normalize",
    "render",
    "supports_version",
]
