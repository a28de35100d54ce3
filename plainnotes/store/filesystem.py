from __future__ import annotations

import os
import uuid
from pathlib import Path


def atomic_write_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    Prevents a half-written note on crash/power loss.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        # only left behind when something above failed
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            pass


def read_text_exact(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a whole file without newline translation (content round-trips as written)."""
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def mtime_ms(path: Path) -> int:
    return Path(path).stat().st_mtime_ns // 1_000_000
