import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from plainnotes.core.collection import NoteCollection
from plainnotes.core.errors import NoteNotFoundError
from plainnotes.core.models import Note


def _titles(coll):
    return [n.title for n in coll.all()]


def test_add_appends_in_order():
    coll = NoteCollection()
    coll.add(Note.create("A"))
    coll.add(Note.create("B"))
    assert _titles(coll) == ["A", "B"]
    assert len(coll) == 2


def test_replace_at_keeps_position():
    coll = NoteCollection([Note.create("A"), Note.create("B"), Note.create("C")])
    coll.replace_at(1, Note.create("B2"))
    assert _titles(coll) == ["A", "B2", "C"]
    assert len(coll) == 3


def test_remove_at_shifts_left():
    coll = NoteCollection([Note.create("A"), Note.create("B"), Note.create("C")])
    removed = coll.remove_at(0)
    assert removed.title == "A"
    assert _titles(coll) == ["B", "C"]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_index_out_of_range(index):
    coll = NoteCollection([Note.create("A"), Note.create("B"), Note.create("C")])
    with pytest.raises(IndexError):
        coll.replace_at(index, Note.create("X"))
    with pytest.raises(IndexError):
        coll.remove_at(index)
    assert _titles(coll) == ["A", "B", "C"]


def test_all_returns_copy():
    coll = NoteCollection([Note.create("A")])
    view = coll.all()
    view.append(Note.create("B"))
    assert len(coll) == 1


def test_id_addressed_operations():
    a, b = Note.create("A"), Note.create("B")
    coll = NoteCollection([a, b])

    assert coll.index_of(b.note_id) == 1
    assert coll.get(a.note_id) is a
    assert coll.get("missing") is None
    assert coll.get(None) is None

    b2 = Note(title="B2", note_id=b.note_id)
    assert coll.replace(b.note_id, b2) == 1
    assert coll.get(b.note_id) is b2

    assert coll.remove(a.note_id) is a
    assert _titles(coll) == ["B2"]


def test_unknown_id_raises():
    coll = NoteCollection([Note.create("A")])
    with pytest.raises(NoteNotFoundError):
        coll.remove("nope")
    with pytest.raises(LookupError):
        coll.replace("nope", Note.create("X"))
