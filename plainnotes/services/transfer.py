from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from plainnotes.core.errors import NoteStoreError
from plainnotes.core.models import Note
from plainnotes.store.filesystem import atomic_write_text, read_text_exact


log = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_date(ts_ms: int) -> str:
    return datetime.fromtimestamp(ts_ms / 1000).strftime(DATE_FORMAT)


def format_date_range(note: Note) -> str:
    return f"Created: {format_date(note.created_ms)} | Last Modified: {format_date(note.modified_ms)}"


def render_export(note: Note) -> str:
    """
    Human-readable snapshot. Not meant to be re-imported as structured data:
    import_text() reads a file back as plain content.
    """
    return (
        f"Title: {note.title}\n"
        f"Date: {format_date_range(note)}\n"
        "\n"
        "Content:\n"
        f"{note.content}\n"
    )


def export_note(note: Note, path: Path) -> Path:
    path = Path(path)
    try:
        atomic_write_text(path, render_export(note))
    except OSError as e:
        log.exception("Export failed: %s", path)
        raise NoteStoreError(f"Error exporting note: {e}", path=path) from e
    log.info("Exported note '%s' to %s", note.title, path)
    return path


def import_text(path: Path) -> str:
    path = Path(path)
    try:
        text = read_text_exact(path)
    except (OSError, UnicodeDecodeError) as e:
        log.exception("Import failed: %s", path)
        raise NoteStoreError(f"Error importing note: {e}", path=path) from e
    log.info("Imported %d chars from %s", len(text), path)
    return text
