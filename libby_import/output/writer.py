"""Writes rendered notes to disk, resolving name conflicts."""

import logging
from collections.abc import Callable
from pathlib import Path

from libby_import.exceptions import ImportCancelledError
from libby_import.models.enums import ConflictPolicy

logger = logging.getLogger(__name__)

ConflictResolver = ConflictPolicy | Callable[[Path], ConflictPolicy]


class NoteWriter:
    """Creates Markdown notes inside a folder.

    When the target file already exists the resolver decides: replace it,
    keep both by numbering the new file ("Name 1.md", "Name 2.md", ...),
    or cancel the import.
    """

    def __init__(self, folder: Path | None = None) -> None:
        self.folder = folder or Path(".")

    def target_path(self, base_name: str, version: int | None = None) -> Path:
        name = f"{base_name} {version}.md" if version else f"{base_name}.md"
        return self.folder / name

    def write(self, base_name: str, text: str, resolve: ConflictResolver = ConflictPolicy.CANCEL) -> Path:
        """Write text to <folder>/<base_name>.md and return the path written."""
        path = self.target_path(base_name)
        version = 1

        while path.exists():
            choice = resolve(path) if callable(resolve) else resolve
            logger.debug("%s exists, resolved as %s", path, choice)
            if choice == ConflictPolicy.REPLACE:
                break
            if choice == ConflictPolicy.CANCEL:
                raise ImportCancelledError(f"Import cancelled: {path.name} already exists")
            path = self.target_path(base_name, version)
            version += 1

        self.folder.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", path)
        return path
