from __future__ import annotations

import logging

from PySide6.QtCore import QSettings, Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QCheckBox, QFileDialog, QHBoxLayout, QLabel, QLineEdit, QListWidget,
    QListWidgetItem, QMainWindow, QMessageBox, QPushButton, QSplitter,
    QTextEdit, QVBoxLayout, QWidget,
)

from plainnotes.app_settings import (
    DEFAULT_FONT_SIZE, SettingsKeys, clamp_font_size, get_bool, get_int,
)
from plainnotes.core.errors import NoteError, NoteStoreError, NoteValidationError
from plainnotes.core.models import Note
from plainnotes.core.search import SearchMode
from plainnotes.qt_utils import blocked_signals, safe_set_setting
from plainnotes.services.notes_service import NotesService
from plainnotes.services.transfer import format_date_range
from plainnotes.ui.settings_dialog import ask_theme
from plainnotes.ui.state import UiStateStore
from plainnotes.ui.theme import Theme


log = logging.getLogger(__name__)

TEXT_FILES_FILTER = "Text Files (*.txt)"


class NotesWindow(QMainWindow):
    """
    Sidebar (search + note list) on the left, title/content editor on the right.

    The active note is tracked by note_id. None means "new note": Save appends
    instead of replacing.
    """

    def __init__(self, service: NotesService, *, theme: Theme, settings: QSettings):
        super().__init__()
        self.setWindowTitle("Notes")

        self.service = service
        self._settings = settings
        self._theme = theme
        self._active_id: str | None = None
        self._font_size = clamp_font_size(
            get_int(settings, SettingsKeys.UI_FONT_SIZE, DEFAULT_FONT_SIZE)
        )
        self._ui_state = UiStateStore(owner=self, settings=settings, debounce_ms=400)

        # ---- sidebar ----
        self.search = QLineEdit()
        self.search.setPlaceholderText("Search notes…")
        self.search_content = QCheckBox("Search content")
        self.search_content.setChecked(get_bool(settings, SettingsKeys.SEARCH_CONTENT, False))
        self.listw = QListWidget()

        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(8, 8, 8, 8)
        left_layout.addWidget(QLabel("Search Notes"))
        left_layout.addWidget(self.search)
        left_layout.addWidget(self.search_content)
        left_layout.addWidget(self.listw)

        # ---- editor ----
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Title")
        self.editor = QTextEdit()
        self.editor.setAcceptRichText(False)
        self.editor.setPlaceholderText("Start typing your note…")
        self.date_label = QLabel("")
        self.date_label.setObjectName("dateLabel")

        buttons = QHBoxLayout()
        for text, slot in (
            ("New Note", self.new_note),
            ("Save", self.save_note),
            ("Delete", self.delete_note),
            ("Export", self.export_note),
            ("Import", self.import_note),
        ):
            btn = QPushButton(text)
            btn.clicked.connect(slot)
            buttons.addWidget(btn)
        buttons.addStretch(1)

        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(8, 8, 8, 8)
        right_layout.addWidget(self.title_edit)
        right_layout.addLayout(buttons)
        right_layout.addWidget(self.editor)
        right_layout.addWidget(self.date_label)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(left)
        self.splitter.addWidget(right)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)
        self.setCentralWidget(self.splitter)

        self._ui_state.restore(splitter=self.splitter)
        self.splitter.splitterMoved.connect(lambda *_: self._ui_state.schedule_save())

        # Signals
        self.search.textChanged.connect(self.refresh_list)
        self.search_content.toggled.connect(self._on_search_mode_changed)
        self.listw.itemSelectionChanged.connect(self._on_select_note)

        self._build_menu()
        self.apply_theme(theme)
        self._apply_font_size(self._font_size)
        self.refresh_list()
        self.statusBar().showMessage(f"{len(self.service.notes())} notes loaded")

    def closeEvent(self, event):  # type: ignore[override]
        self._ui_state.save()
        super().closeEvent(event)

    # ───────────────────────── menus ─────────────────────────

    def _action(self, text: str, slot, shortcut=None) -> QAction:
        act = QAction(text, self)
        if shortcut is not None:
            act.setShortcut(shortcut)
        act.triggered.connect(slot)
        return act

    def _build_menu(self) -> None:
        menubar = self.menuBar()

        filem = menubar.addMenu("File")
        filem.addAction(self._action("New Note", self.new_note, QKeySequence.New))
        filem.addAction(self._action("Save", self.save_note, QKeySequence.Save))
        filem.addAction(self._action("Delete", self.delete_note, "Ctrl+D"))
        filem.addSeparator()
        filem.addAction(self._action("Export…", self.export_note))
        filem.addAction(self._action("Import…", self.import_note))
        filem.addSeparator()
        filem.addAction(self._action("Reload Notes", self.reload_notes, "F5"))
        filem.addAction(self._action("Quit", self.close, QKeySequence.Quit))

        editm = menubar.addMenu("Edit")
        editm.addAction(self._action("Edit Note", self.edit_note, "Ctrl+E"))
        editm.addAction(self._action("Find", self.focus_search, QKeySequence.Find))
        editm.addAction(self._action("Clear Search", self.clear_search, "Esc"))

        viewm = menubar.addMenu("View")
        viewm.addAction(self._action("Zoom In", self.zoom_in, QKeySequence.ZoomIn))
        viewm.addAction(self._action("Zoom Out", self.zoom_out, QKeySequence.ZoomOut))
        viewm.addAction(self._action("Reset Zoom", self.reset_zoom, "Ctrl+0"))

        settingsm = menubar.addMenu("Settings")
        settingsm.addAction(self._action("Preferences…", self.show_settings))

    # ───────────────────────── list / selection ─────────────────────────

    def _search_mode(self) -> SearchMode:
        if self.search_content.isChecked():
            return SearchMode.TITLE_OR_CONTENT
        return SearchMode.TITLE

    def refresh_list(self) -> None:
        notes = self.service.filter(self.search.text(), self._search_mode())
        with blocked_signals(self.listw):
            self.listw.clear()
            for note in notes:
                item = QListWidgetItem(note.title)
                item.setData(Qt.UserRole, note.note_id)
                self.listw.addItem(item)
                if note.note_id == self._active_id:
                    self.listw.setCurrentItem(item)

    def _on_search_mode_changed(self, checked: bool) -> None:
        safe_set_setting(self._settings, SettingsKeys.SEARCH_CONTENT, bool(checked))
        self.refresh_list()

    def _on_select_note(self) -> None:
        items = self.listw.selectedItems()
        if not items:
            return
        note = self.service.get(items[0].data(Qt.UserRole))
        if note is None:
            log.warning("Selected note is no longer in the collection")
            self.refresh_list()
            return
        self._show_note(note)

    def _show_note(self, note: Note) -> None:
        self._active_id = note.note_id
        self.title_edit.setText(note.title)
        self.editor.setPlainText(note.content)
        self.date_label.setText(format_date_range(note))

    def focus_search(self) -> None:
        self.search.setFocus()
        self.search.selectAll()

    def clear_search(self) -> None:
        self.search.clear()

    # ───────────────────────── note actions ─────────────────────────

    def new_note(self) -> None:
        self._active_id = None
        self.title_edit.clear()
        self.editor.clear()
        self.date_label.clear()
        with blocked_signals(self.listw):
            self.listw.clearSelection()
        self.title_edit.setFocus()

    def edit_note(self) -> None:
        note = self.service.get(self._active_id)
        if note is None:
            self.statusBar().showMessage("No note selected to edit.")
            return
        self._show_note(note)
        self.statusBar().showMessage(f"Editing note: {note.title}")

    def save_note(self) -> None:
        try:
            note = self.service.save(
                self.title_edit.text(),
                self.editor.toPlainText(),
                active_id=self._active_id,
            )
        except NoteValidationError as e:
            QMessageBox.information(self, "Save Note", str(e))
            self.title_edit.setFocus()
            return
        except NoteError as e:
            log.exception("Save failed")
            QMessageBox.critical(self, "Save Error", str(e))
            return

        self._active_id = note.note_id
        self.title_edit.setText(note.title)
        self.date_label.setText(format_date_range(note))
        self.refresh_list()
        self.statusBar().showMessage(f"Saved: {note.title}")

    def delete_note(self) -> None:
        if self._active_id is None:
            self.statusBar().showMessage("No note selected.")
            return
        try:
            note = self.service.delete(self._active_id)
        except NoteStoreError as e:
            QMessageBox.critical(self, "Delete Error", str(e))
            return

        self.new_note()
        self.refresh_list()
        if note is not None:
            self.statusBar().showMessage(f"Deleted: {note.title}")

    def reload_notes(self) -> None:
        self.service.reload()
        self.new_note()
        self.refresh_list()
        self.statusBar().showMessage(f"{len(self.service.notes())} notes loaded")

    def _editor_snapshot(self) -> Note:
        stored = self.service.get(self._active_id)
        snapshot = Note(title=self.title_edit.text(), content=self.editor.toPlainText())
        if stored is not None:
            snapshot.created_ms = stored.created_ms
            snapshot.modified_ms = stored.modified_ms
        return snapshot

    def export_note(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Export Note", "", TEXT_FILES_FILTER)
        if not path:
            return
        try:
            self.service.export_note(self._editor_snapshot(), path)
        except NoteStoreError as e:
            QMessageBox.critical(self, "Export", str(e))
            return
        self.statusBar().showMessage("Note exported successfully")

    def import_note(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Import Note", "", TEXT_FILES_FILTER)
        if not path:
            return
        try:
            text = self.service.import_text(path)
        except NoteStoreError as e:
            QMessageBox.critical(self, "Import", str(e))
            return
        self.editor.setPlainText(text)
        self.statusBar().showMessage("Note imported successfully")

    # ───────────────────────── view / settings ─────────────────────────

    def apply_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.setStyleSheet(theme.stylesheet())

    def show_settings(self) -> None:
        theme = ask_theme(self, self._theme)
        if theme is None:
            return
        self.apply_theme(theme)
        safe_set_setting(self._settings, SettingsKeys.UI_THEME, theme.name)
        log.info("Theme changed: %s", theme.name)

    def _apply_font_size(self, size: int) -> None:
        self._font_size = clamp_font_size(size)
        font = self.editor.font()
        font.setPointSize(self._font_size)
        self.editor.setFont(font)
        safe_set_setting(self._settings, SettingsKeys.UI_FONT_SIZE, self._font_size)

    def zoom_in(self) -> None:
        self._apply_font_size(self._font_size + 2)

    def zoom_out(self) -> None:
        self._apply_font_size(self._font_size - 2)

    def reset_zoom(self) -> None:
        self._apply_font_size(DEFAULT_FONT_SIZE)
