from __future__ import annotations

import logging
from pathlib import Path

from plainnotes.core.collection import NoteCollection
from plainnotes.core.errors import NoteNotFoundError
from plainnotes.core.filenames import validate_title
from plainnotes.core.models import Note
from plainnotes.core.search import SearchMode, filter_notes
from plainnotes.services import transfer
from plainnotes.store.repo import NoteStore


log = logging.getLogger(__name__)


class NotesService:
    """
    Keeps the in-memory collection and the directory store in step.

    Every mutation writes to disk first and only then touches the collection,
    so a failed write leaves the visible list unchanged.

    Responsibilities:
    - load notes at startup / on reload
    - save: replace the active note in place, or append a new one
    - delete: remove file and entry
    - search over the collection
    - export / import single notes
    """

    def __init__(self, store: NoteStore, collection: NoteCollection | None = None):
        self.store = store
        self.collection = collection if collection is not None else NoteCollection()

    # ───────────────────────── queries ─────────────────────────

    def notes(self) -> list[Note]:
        return self.collection.all()

    def get(self, note_id: str | None) -> Note | None:
        return self.collection.get(note_id)

    def filter(self, query: str, mode: SearchMode = SearchMode.TITLE) -> list[Note]:
        return filter_notes(self.collection.all(), query, mode)

    # ───────────────────────── mutations ─────────────────────────

    def reload(self) -> list[Note]:
        notes = self.store.load()
        self.collection.clear()
        self.collection.extend(notes)
        return self.collection.all()

    def save(self, title: str, content: str, *, active_id: str | None = None) -> Note:
        """
        Save editor state.

        active_id set   -> update that note in place (position kept)
        active_id None  -> create a new note at the end
        """
        title = validate_title(title)
        content = content or ""

        if active_id is None:
            note = Note.create(title, content)
            self.store.save(note)
            self.collection.add(note)
            log.info("Created note: %s", title)
            return note

        current = self.collection.get(active_id)
        if current is None:
            raise NoteNotFoundError(active_id)

        updated = Note(
            title=current.title,
            content=current.content,
            created_ms=current.created_ms,
            modified_ms=current.modified_ms,
            note_id=current.note_id,
        )
        updated.rename(title)
        updated.update_content(content)

        self.store.save(updated)
        index = self.collection.replace(active_id, updated)
        log.info("Updated note: %s (index=%d)", title, index)
        return updated

    def delete(self, note_id: str | None) -> Note | None:
        note = self.collection.get(note_id)
        if note is None:
            return None
        self.store.delete(note)
        self.collection.remove(note.note_id)
        log.info("Deleted note: %s", note.title)
        return note

    # ───────────────────────── transfer ─────────────────────────

    def export_note(self, note: Note | str, path: Path) -> Path:
        """Export a stored note (by id) or an unsaved editor snapshot."""
        if isinstance(note, str):
            found = self.collection.get(note)
            if found is None:
                raise NoteNotFoundError(note)
            note = found
        return transfer.export_note(note, path)

    def import_text(self, path: Path) -> str:
        return transfer.import_text(path)
