from __future__ import annotations

from PySide6.QtWidgets import QCheckBox, QDialog, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from plainnotes.ui.theme import DARK, LIGHT, Theme


def ask_theme(parent: QWidget, current: Theme) -> Theme | None:
    """
    Modal settings dialog with the dark mode toggle.
    Returns the chosen theme, or None when cancelled.
    """
    dlg = QDialog(parent)
    dlg.setWindowTitle("Settings")
    dlg.setModal(True)

    layout = QVBoxLayout(dlg)

    dark_check = QCheckBox("Enable Dark Mode")
    dark_check.setChecked(current.is_dark)
    layout.addWidget(dark_check)

    buttons = QHBoxLayout()
    btn_apply = QPushButton("Apply")
    btn_apply.setDefault(True)
    btn_cancel = QPushButton("Cancel")
    btn_apply.clicked.connect(dlg.accept)
    btn_cancel.clicked.connect(dlg.reject)
    buttons.addStretch(1)
    buttons.addWidget(btn_apply)
    buttons.addWidget(btn_cancel)
    layout.addLayout(buttons)

    if not dlg.exec():
        return None
    return DARK if dark_check.isChecked() else LIGHT
