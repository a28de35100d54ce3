from .filesystem import atomic_write_text, mtime_ms, read_text_exact
from .repo import NoteStore

__all__ = ["atomic_write_text",
           "mtime_ms",
           "read_text_exact",
           "NoteStore"
           ]
