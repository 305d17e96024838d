"""Custom exceptions for Libby Import."""

from dataclasses import dataclass


class LibbyImportError(Exception):
    """Base exception for import errors."""


class SchemaError(LibbyImportError):
    """Raised when an export does not have the shape of a Libby journey file."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ImportCancelledError(LibbyImportError):
    """Raised when the caller chooses to abort an import."""

    def __init__(self, reason: str = "Import cancelled"):
        self.reason = reason
        super().__init__(reason)


@dataclass(frozen=True)
class VersionMismatchAdvisory:
    """Signals that an export is newer than the format this package understands.

    Not an error: the caller decides whether to proceed with normalization.
    """

    version: int
    supported_version: int

    @property
    def message(self) -> str:
        return (
            f"Export format version {self.version} is newer than the supported "
            f"version {self.supported_version}. Libby may have changed their data "
            "format, and the import might contain errors."
        )
