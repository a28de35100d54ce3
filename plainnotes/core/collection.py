from __future__ import annotations

from typing import Iterable, Iterator

from .errors import NoteNotFoundError
from .models import Note


class NoteCollection:
    """
    In-memory ordered list of notes backing the visible list.

    Index operations mirror a single-selection list widget; the id-addressed
    variants resolve the index at call time so a stale row number can never
    hit the wrong note.
    """

    def __init__(self, notes: Iterable[Note] = ()) -> None:
        self._notes: list[Note] = list(notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    def all(self) -> list[Note]:
        return list(self._notes)

    def add(self, note: Note) -> None:
        self._notes.append(note)

    def extend(self, notes: Iterable[Note]) -> None:
        self._notes.extend(notes)

    def clear(self) -> None:
        self._notes.clear()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._notes):
            raise IndexError(f"note index out of range: {index} (len={len(self._notes)})")

    def replace_at(self, index: int, note: Note) -> None:
        self._check_index(index)
        self._notes[index] = note

    def remove_at(self, index: int) -> Note:
        self._check_index(index)
        return self._notes.pop(index)

    # ───────────────────────── by note_id ─────────────────────────

    def index_of(self, note_id: str) -> int:
        for i, note in enumerate(self._notes):
            if note.note_id == note_id:
                return i
        raise NoteNotFoundError(note_id)

    def get(self, note_id: str | None) -> Note | None:
        if not note_id:
            return None
        for note in self._notes:
            if note.note_id == note_id:
                return note
        return None

    def replace(self, note_id: str, note: Note) -> int:
        index = self.index_of(note_id)
        self.replace_at(index, note)
        return index

    def remove(self, note_id: str) -> Note:
        return self.remove_at(self.index_of(note_id))
