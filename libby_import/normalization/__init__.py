"""Normalization layer: raw export to canonical BookRecord."""

from libby_import.normalization.colors import DEFAULT_COLOR_SYMBOL, resolve_color
from libby_import.normalization.record import (
    SUPPORTED_VERSION,
    RecordNormalizer,
    normalize,
    supports_version,
)

__all__ = [
    "DEFAULT_COLOR_SYMBOL",
    "SUPPORTED_VERSION",
    "RecordNormalizer",
    "normalize",
    "resolve_color",
    "supports_version",
]
