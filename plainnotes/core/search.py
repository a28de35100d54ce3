from __future__ import annotations

from enum import Enum
from typing import Iterable

from .models import Note


class SearchMode(str, Enum):
    TITLE = "title"
    TITLE_OR_CONTENT = "title_or_content"


def _normalize_query(query: str | None) -> str:
    # Both modes trim. A padded query must never find fewer notes in
    # TITLE_OR_CONTENT than in TITLE, so the two cannot normalise differently.
    return (query or "").strip().lower()


def filter_by_title(notes: Iterable[Note], query: str | None) -> list[Note]:
    """Sidebar filter: case-insensitive substring match on the title only."""
    q = _normalize_query(query)
    if not q:
        return list(notes)
    return [n for n in notes if q in n.title.lower()]


def filter_by_title_or_content(notes: Iterable[Note], query: str | None) -> list[Note]:
    """
    Global search: match if the title or the content contains the query.

    The query is trimmed like the sidebar filter, so a whitespace-only query
    returns everything and " milk" searches for "milk".
    """
    q = _normalize_query(query)
    if not q:
        return list(notes)
    return [n for n in notes if q in n.title.lower() or q in n.content.lower()]


def filter_notes(
    notes: Iterable[Note],
    query: str | None,
    mode: SearchMode = SearchMode.TITLE,
) -> list[Note]:
    """
    Order-preserving filter. An empty (or whitespace-only) query returns every
    note in original order.
    """
    if SearchMode(mode) is SearchMode.TITLE_OR_CONTENT:
        return filter_by_title_or_content(notes, query)
    return filter_by_title(notes, query)
