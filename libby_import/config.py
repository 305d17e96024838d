"""Persistent user settings."""

import json
import logging
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator

from libby_import.output.naming import DEFAULT_NAME_TEMPLATE

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".libby-import" / "settings.json"


class ImportSettings(BaseModel):
    new_file_location: str = ""
    new_file_name: str = DEFAULT_NAME_TEMPLATE
    timezone: str | None = None  # IANA name; None uses the local zone

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str | None) -> str | None:
        if value:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"unknown timezone: {value}") from exc
        return value or None

    @property
    def tzinfo(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None

    @property
    def folder(self) -> Path:
        return Path(self.new_file_location) if self.new_file_location else Path(".")


def load_settings(path: Path = DEFAULT_SETTINGS_PATH) -> ImportSettings:
    """Load settings from a JSON file, falling back to defaults if it is missing."""
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return ImportSettings()
    return ImportSettings.model_validate(json.loads(path.read_text(encoding="utf-8")))


def save_settings(settings: ImportSettings, path: Path = DEFAULT_SETTINGS_PATH) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
    logger.debug("Saved settings to %s", path)
