"""Tests for writing notes with conflict resolution."""

from pathlib import Path

import pytest

from libby_import.exceptions import ImportCancelledError
from libby_import.models.enums import ConflictPolicy
from libby_import.output import NoteWriter


@pytest.fixture
def writer(tmp_path: Path) -> NoteWriter:
    return NoteWriter(tmp_path / "Books")


class TestNoteWriter:
    def test_creates_folder_and_file(self, writer: NoteWriter):
        path = writer.write("Piranesi", "# Piranesi\n")
        assert path == writer.folder / "Piranesi.md"
        assert path.read_text(encoding="utf-8") == "# Piranesi\n"

    def test_replace(self, writer: NoteWriter):
        writer.write("Piranesi", "old")
        path = writer.write("Piranesi", "new", ConflictPolicy.REPLACE)
        assert path.name == "Piranesi.md"
        assert path.read_text(encoding="utf-8") == "new"

    def test_keep_both_numbers_new_files(self, writer: NoteWriter):
        writer.write("Piranesi", "first")
        second = writer.write("Piranesi", "second", ConflictPolicy.KEEP_BOTH)
        third = writer.write("Piranesi", "third", ConflictPolicy.KEEP_BOTH)
        assert second.name == "Piranesi 1.md"
        assert third.name == "Piranesi 2.md"
        assert (writer.folder / "Piranesi.md").read_text(encoding="utf-8") == "first"

    def test_cancel(self, writer: NoteWriter):
        writer.write("Piranesi", "first")
        with pytest.raises(ImportCancelledError):
            writer.write("Piranesi", "second", ConflictPolicy.CANCEL)
        assert (writer.folder / "Piranesi.md").read_text(encoding="utf-8") == "first"

    def test_resolver_called_per_conflict(self, writer: NoteWriter):
        writer.write("Piranesi", "a")
        writer.write("Piranesi", "b", ConflictPolicy.KEEP_BOTH)
        asked: list[str] = []
        answers = iter([ConflictPolicy.KEEP_BOTH, ConflictPolicy.REPLACE])

        def resolve(path: Path) -> ConflictPolicy:
            asked.append(path.name)
            return next(answers)

        path = writer.write("Piranesi", "c", resolve)
        assert asked == ["Piranesi.md", "Piranesi 1.md"]
        assert path.name == "Piranesi 1.md"
        assert path.read_text(encoding="utf-8") == "c"
