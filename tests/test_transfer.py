import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from plainnotes.core.errors import NoteStoreError
from plainnotes.core.models import Note
from plainnotes.services.transfer import (
    export_note,
    format_date,
    format_date_range,
    import_text,
    render_export,
)


def test_format_date_shape():
    text = format_date(1_700_000_000_000)
    assert len(text) == len("2023-11-14 22:13:20")
    assert text[4] == "-" and text[10] == " " and text[13] == ":"


def test_date_range_label():
    note = Note(title="A", created_ms=1_700_000_000_000, modified_ms=1_700_000_000_000)
    label = format_date_range(note)
    assert label.startswith("Created: ")
    assert " | Last Modified: " in label


def test_render_export_layout():
    note = Note(title="Todo", content="Buy milk", created_ms=0)
    lines = render_export(note).split("\n")
    assert lines[0] == "Title: Todo"
    assert lines[1] == f"Date: {format_date_range(note)}"
    assert lines[2] == ""
    assert lines[3] == "Content:"
    assert lines[4] == "Buy milk"


def test_export_then_import_is_whole_file(tmp_path):
    note = Note.create("Todo", "Buy milk")
    path = export_note(note, tmp_path / "todo-export.txt")

    imported = import_text(path)
    assert imported == render_export(note)
    assert imported.startswith("Title: Todo")


def test_import_missing_file(tmp_path):
    with pytest.raises(NoteStoreError):
        import_text(tmp_path / "missing.txt")


def test_export_into_missing_parent_is_created(tmp_path):
    path = export_note(Note.create("A", "a"), tmp_path / "sub" / "a.txt")
    assert path.exists()
