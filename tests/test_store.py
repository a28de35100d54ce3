import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from plainnotes.core.errors import NoteStoreError, NoteValidationError
from plainnotes.core.models import Note
from plainnotes.store.repo import NoteStore


def test_save_writes_exact_content(tmp_path):
    store = NoteStore(tmp_path)
    store.save(Note.create("Todo", "Buy milk"))
    assert (tmp_path / "Todo.txt").read_text(encoding="utf-8") == "Buy milk"


def test_round_trip_title_and_content(tmp_path):
    store = NoteStore(tmp_path)
    store.save(Note.create("Todo", "Buy milk"))
    store.save(Note.create("Empty", ""))
    store.save(Note.create("Lines", "one\r\ntwo\nthree\n"))

    loaded = {n.title: n.content for n in NoteStore(tmp_path).load()}
    assert loaded == {"Todo": "Buy milk", "Empty": "", "Lines": "one\r\ntwo\nthree\n"}


def test_loaded_timestamps_come_from_mtime(tmp_path):
    store = NoteStore(tmp_path)
    store.save(Note.create("Todo", "x"))
    os.utime(tmp_path / "Todo.txt", (1_600_000_000, 1_600_000_000))

    [note] = store.load()
    assert note.created_ms == 1_600_000_000_000
    assert note.modified_ms == note.created_ms


def test_load_missing_directory_is_empty(tmp_path):
    assert NoteStore(tmp_path / "nope").load() == []


def test_load_ignores_other_files_and_sorts(tmp_path):
    (tmp_path / "b.txt").write_text("B", encoding="utf-8")
    (tmp_path / "A.txt").write_text("A", encoding="utf-8")
    (tmp_path / "readme.md").write_text("skip", encoding="utf-8")
    (tmp_path / "folder.txt").mkdir()

    assert [n.title for n in NoteStore(tmp_path).load()] == ["A", "b"]


def test_load_skips_undecodable_file(tmp_path):
    (tmp_path / "good.txt").write_text("ok", encoding="utf-8")
    (tmp_path / "bad.txt").write_bytes(b"\xff\xfe\xfa broken")

    notes = NoteStore(tmp_path).load()
    assert [n.title for n in notes] == ["good"]


def test_save_creates_directory(tmp_path):
    store = NoteStore(tmp_path / "notes")
    store.save(Note.create("A", "a"))
    assert (tmp_path / "notes" / "A.txt").exists()


def test_save_same_title_overwrites(tmp_path):
    store = NoteStore(tmp_path)
    store.save(Note.create("Todo", "first"))
    store.save(Note.create("Todo", "second"))
    assert [p.name for p in tmp_path.iterdir()] == ["Todo.txt"]
    assert (tmp_path / "Todo.txt").read_text(encoding="utf-8") == "second"


def test_rename_removes_old_file(tmp_path):
    store = NoteStore(tmp_path)
    note = Note.create("Old", "text")
    store.save(note)

    note.rename("New")
    store.save(note)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["New.txt"]
    assert store.path_for(note) == tmp_path / "New.txt"


def test_rename_after_load_removes_old_file(tmp_path):
    NoteStore(tmp_path).save(Note.create("Old", "text"))

    store = NoteStore(tmp_path)
    [note] = store.load()
    note.rename("New")
    store.save(note)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["New.txt"]


def test_rename_keeps_file_claimed_by_other_note(tmp_path):
    store = NoteStore(tmp_path)
    first = Note.create("Shared", "one")
    store.save(first)
    second = Note.create("Shared", "two")
    store.save(second)

    first.rename("Moved")
    store.save(first)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["Moved.txt", "Shared.txt"]


def test_delete_removes_file(tmp_path):
    store = NoteStore(tmp_path)
    keep = Note.create("Keep", "k")
    gone = Note.create("Gone", "g")
    store.save(keep)
    store.save(gone)

    store.delete(gone)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["Keep.txt"]


def test_delete_missing_is_noop(tmp_path):
    store = NoteStore(tmp_path)
    store.delete(Note.create("Ghost"))
    store.delete(Note.create("Ghost"))
    assert list(tmp_path.iterdir()) == []


def test_save_failure_raises_store_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = NoteStore(blocker)

    with pytest.raises(NoteStoreError) as exc_info:
        store.save(Note.create("A", "a"))
    assert isinstance(exc_info.value.__cause__, OSError)
    assert exc_info.value.path == blocker / "A.txt"


def test_unstorable_title_rejected_before_io(tmp_path):
    store = NoteStore(tmp_path)
    with pytest.raises(NoteValidationError):
        store.save(Note.create("a/b", "x"))
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("title", [
    "a  b",
    "Draft.",
    "con",
    "x" * 130,
    "Cafe\u0301",
    "a.txt",
])
def test_file_name_is_title_verbatim(tmp_path, title):
    store = NoteStore(tmp_path)
    store.save(Note.create(title, "body"))

    assert (tmp_path / f"{title}.txt").read_text(encoding="utf-8") == "body"
    [loaded] = NoteStore(tmp_path).load()
    assert loaded.title == title
    assert loaded.content == "body"


def test_titles_differing_only_in_spacing_keep_separate_files(tmp_path):
    store = NoteStore(tmp_path)
    store.save(Note.create("a  b", "two spaces"))
    store.save(Note.create("a b", "one space"))

    loaded = {n.title: n.content for n in NoteStore(tmp_path).load()}
    assert loaded == {"a  b": "two spaces", "a b": "one space"}


def test_delete_keeps_file_shared_with_other_note(tmp_path):
    store = NoteStore(tmp_path)
    first = Note.create("Todo", "first")
    second = Note.create("Todo", "second")
    store.save(first)
    store.save(second)

    store.delete(first)

    assert (tmp_path / "Todo.txt").read_text(encoding="utf-8") == "second"
    assert [n.title for n in NoteStore(tmp_path).load()] == ["Todo"]

    store.delete(second)
    assert list(tmp_path.iterdir()) == []
