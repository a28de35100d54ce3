from .collection import NoteCollection
from .errors import NoteError, NoteNotFoundError, NoteStoreError, NoteValidationError
from .filenames import validate_title
from .models import Note
from .search import SearchMode, filter_by_title, filter_by_title_or_content, filter_notes

__all__ = ["NoteCollection",
           "NoteError",
           "NoteNotFoundError",
           "NoteStoreError",
           "NoteValidationError",
           "validate_title",
           "Note",
           "SearchMode",
           "filter_by_title",
           "filter_by_title_or_content",
           "filter_notes"
           ]
