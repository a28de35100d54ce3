from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_note_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Note:
    """
    A title/content pair with creation and modification timestamps (ms since epoch).

    note_id is assigned once and never written to disk: it identifies the note
    in memory while the title (and therefore the file name) may change.
    """
    title: str
    content: str = ""
    created_ms: int = field(default_factory=now_ms)
    modified_ms: int = -1
    note_id: str = field(default_factory=generate_note_id)

    def __post_init__(self) -> None:
        if self.modified_ms < self.created_ms:
            self.modified_ms = self.created_ms

    @classmethod
    def create(cls, title: str, content: str = "") -> "Note":
        ts = now_ms()
        return cls(title=title, content=content, created_ms=ts, modified_ms=ts)

    def rename(self, title: str) -> None:
        if title == self.title:
            return
        self.title = title
        self.touch()

    def update_content(self, content: str) -> None:
        if content == self.content:
            return
        self.content = content
        self.touch()

    def touch(self) -> None:
        # clock may go backwards; never break modified >= created
        self.modified_ms = max(now_ms(), self.created_ms)
