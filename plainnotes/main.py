"""App entrypoint.

Plain-text notes: one <title>.txt file per note in a single folder.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from plainnotes.app_settings import SettingsKeys, get_str
from plainnotes.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from plainnotes.services.notes_service import NotesService
from plainnotes.settings import APP_NAME, DEFAULT_NOTES_DIRNAME
from plainnotes.store.repo import NoteStore


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Plain-text notes")
    p.add_argument(
        "--notes-dir",
        type=Path,
        default=Path.cwd() / DEFAULT_NOTES_DIRNAME,
        help="Folder holding one .txt file per note",
    )
    p.add_argument(
        "--theme",
        choices=("light", "dark"),
        default=None,
        help="Colour theme (default: last used)",
    )
    return p.parse_args(argv)


def build_service(notes_dir: Path) -> NotesService:
    store = NoteStore(notes_dir)
    store.ensure()
    service = NotesService(store)
    service.reload()
    return service


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log = setup_logging()
    install_global_exception_hooks(log)

    from PySide6.QtCore import QSettings
    from PySide6.QtWidgets import QApplication

    from plainnotes.ui.main_window import NotesWindow
    from plainnotes.ui.theme import theme_by_name

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    settings = QSettings(APP_NAME, APP_NAME)

    theme = theme_by_name(args.theme or get_str(settings, SettingsKeys.UI_THEME, "light"))

    try:
        service = build_service(args.notes_dir)
    except OSError:
        log.exception("Cannot create notes folder: %s", args.notes_dir)
        service = NotesService(NoteStore(args.notes_dir))

    win = NotesWindow(service, theme=theme, settings=settings)
    win.show()
    log.info("App started: notes_dir=%s sid=%s", args.notes_dir, SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
