"""Adapter for Libby reading-journey JSON exports."""

import json
import logging
from pathlib import Path
from typing import Any

from libby_import.exceptions import SchemaError, VersionMismatchAdvisory
from libby_import.normalization.record import SUPPORTED_VERSION, supports_version

logger = logging.getLogger(__name__)


class LibbyAdapter:
    """Reads Libby export files and checks their format version."""

    def parse(self, file_path: Path) -> dict[str, Any]:
        """Read an export file and return the decoded JSON document."""
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not file_path.is_file():
            raise SchemaError(f"not a file: {file_path}")

        logger.info("Reading Libby export %s", file_path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SchemaError(f"not valid UTF-8 JSON: {exc}") from exc
        return self.parse_text(text)

    def parse_text(self, text: str) -> dict[str, Any]:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"not valid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise SchemaError("not a recognized export")
        return raw

    def check_version(self, raw: dict[str, Any]) -> VersionMismatchAdvisory | None:
        """Return an advisory when the export is newer than the supported format."""
        version = raw.get("version")
        if version is not None and (isinstance(version, bool) or not isinstance(version, int)):
            raise SchemaError(f"invalid version tag: {version!r}")
        if supports_version(version):
            return None

        logger.info("Export version %s is newer than supported version %s", version, SUPPORTED_VERSION)
        return VersionMismatchAdvisory(version=version, supported_version=SUPPORTED_VERSION)
