from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtCore import QSettings


@contextmanager
def blocked_signals(obj):
    """Temporarily silence Qt signals on obj; always re-enabled on exit."""
    if obj is None:
        yield
        return
    try:
        obj.blockSignals(True)
        yield
    finally:
        try:
            obj.blockSignals(False)
        except RuntimeError:
            # C++ object already deleted by Qt
            pass


def safe_set_setting(settings: QSettings, key: str, value) -> None:
    """Best-effort QSettings write; never breaks the UI."""
    try:
        settings.setValue(key, value)
    except Exception:
        pass
