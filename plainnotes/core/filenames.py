from __future__ import annotations

import re

from .errors import NoteValidationError


# path separators (both platforms) and control characters, NUL included
UNSTORABLE_CHARS_RE = re.compile(r"[/\\\u0000-\u001f\u007f]")


def validate_title(title: str | None) -> str:
    """
    Return the trimmed title, or raise NoteValidationError.

    The title is the file stem verbatim ("<title>.txt"), so anything that
    cannot live in a single file name is rejected instead of rewritten:
    rewriting would let two titles share one file.
    """
    title = (title or "").strip()
    if not title:
        raise NoteValidationError("Please enter a title for the note.")

    bad = sorted(set(UNSTORABLE_CHARS_RE.findall(title)))
    if bad:
        shown = " ".join(repr(ch) for ch in bad)
        raise NoteValidationError(f"A title cannot contain: {shown}")
    return title
