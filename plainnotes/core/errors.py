from __future__ import annotations

from pathlib import Path


class NoteError(Exception):
    """Base class for all recoverable note errors."""


class NoteNotFoundError(NoteError, LookupError):
    def __init__(self, note_id: str):
        super().__init__(f"note not found: {note_id}")
        self.note_id = note_id


class NoteStoreError(NoteError):
    """
    Filesystem failure at the store boundary (read/write/delete).
    The original OSError is chained as __cause__.
    """

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class NoteValidationError(NoteError, ValueError):
    """Rejected before any I/O (e.g. empty title)."""
