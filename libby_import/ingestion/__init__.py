"""Ingestion adapters for reading export files."""

from libby_import.ingestion.libby import LibbyAdapter

__all__ = ["LibbyAdapter"]
