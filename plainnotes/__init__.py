from .core import (
    Note,
    NoteCollection,
    NoteError,
    NoteNotFoundError,
    NoteStoreError,
    NoteValidationError,
    SearchMode,
    filter_notes,
)
from .services import NotesService
from .store import NoteStore

__version__ = "0.1.0"

__all__ = ["Note",
           "NoteCollection",
           "NoteError",
           "NoteNotFoundError",
           "NoteStoreError",
           "NoteValidationError",
           "SearchMode",
           "filter_notes",
           "NotesService",
           "NoteStore"
           ]
