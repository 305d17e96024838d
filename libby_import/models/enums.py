"""Enumerations for Libby Import."""

from enum import StrEnum


class ConflictPolicy(StrEnum):
    """What to do when a note with the target file name already exists."""

    REPLACE = "replace"
    KEEP_BOTH = "new"
    CANCEL = "cancel"
