"""Note naming and file output."""

from libby_import.output.naming import DEFAULT_NAME_TEMPLATE, format_file_name
from libby_import.output.writer import ConflictResolver, NoteWriter

__all__ = ["DEFAULT_NAME_TEMPLATE", "ConflictResolver", "NoteWriter", "format_file_name"]
