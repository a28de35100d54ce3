from __future__ import annotations

import logging
from pathlib import Path

from plainnotes.core.errors import NoteStoreError
from plainnotes.core.filenames import validate_title
from plainnotes.core.models import Note
from plainnotes.settings import NOTE_SUFFIX
from plainnotes.store.filesystem import atomic_write_text, mtime_ms, read_text_exact


log = logging.getLogger(__name__)


class NoteStore:
    """
    One text file per note: <notes_dir>/<title>.txt holding exactly the content.

    The directory listing is the index. In memory the store also remembers
    which file each note_id lives in, so saving a renamed note removes the
    file written under its old title instead of orphaning it.
    """

    def __init__(self, notes_dir: Path, *, encoding: str = "utf-8") -> None:
        self.notes_dir = Path(notes_dir)
        self.encoding = encoding
        self._paths: dict[str, Path] = {}  # note_id -> file

    def ensure(self) -> None:
        self.notes_dir.mkdir(parents=True, exist_ok=True)

    def note_path(self, title: str) -> Path:
        return self.notes_dir / f"{title}{NOTE_SUFFIX}"

    def path_for(self, note: Note) -> Path | None:
        return self._paths.get(note.note_id)

    def load(self) -> list[Note]:
        self._paths.clear()
        if not self.notes_dir.is_dir():
            log.info("Notes directory does not exist, starting empty: %s", self.notes_dir)
            return []

        try:
            paths = sorted(
                (p for p in self.notes_dir.glob(f"*{NOTE_SUFFIX}") if p.is_file()),
                key=lambda p: p.name.lower(),
            )
        except OSError:
            log.exception("Failed to list notes directory: %s", self.notes_dir)
            return []

        notes: list[Note] = []
        for path in paths:
            try:
                content = read_text_exact(path, encoding=self.encoding)
                ts = mtime_ms(path)
            except (OSError, UnicodeDecodeError):
                log.warning("Skipping unreadable note file: %s", path, exc_info=True)
                continue
            note = Note(title=path.stem, content=content, created_ms=ts, modified_ms=ts)
            self._paths[note.note_id] = path
            notes.append(note)

        log.info("Loaded %d notes from %s", len(notes), self.notes_dir)
        return notes

    def save(self, note: Note) -> Path:
        validate_title(note.title)
        path = self.note_path(note.title)
        try:
            atomic_write_text(path, note.content, encoding=self.encoding)
        except OSError as e:
            log.exception("Failed to save note: %s", path)
            raise NoteStoreError(f"Could not save note '{note.title}': {e}", path=path) from e

        old = self._paths.get(note.note_id)
        self._paths[note.note_id] = path
        if old is not None and old != path:
            self._remove_renamed(old, new=path)

        log.debug("Saved note: id=%s path=%s", note.note_id, path)
        return path

    def _remove_renamed(self, old: Path, *, new: Path) -> None:
        # another note may have claimed the old file name meanwhile
        if old in self._paths.values():
            return
        try:
            # case-only rename on a case-insensitive filesystem
            if old.exists() and old.samefile(new):
                return
            old.unlink(missing_ok=True)
            log.info("Renamed note file: %s -> %s", old.name, new.name)
        except OSError:
            log.warning("Could not remove old file after rename: %s", old, exc_info=True)

    def delete(self, note: Note) -> None:
        path = self._paths.pop(note.note_id, None) or self.note_path(note.title)
        # duplicate titles share one file; keep it while another note uses it
        if path in self._paths.values():
            log.debug("Kept shared file on delete: id=%s path=%s", note.note_id, path)
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            log.exception("Failed to delete note file: %s", path)
            raise NoteStoreError(f"Could not delete note '{note.title}': {e}", path=path) from e
        log.debug("Deleted note: id=%s path=%s", note.note_id, path)
