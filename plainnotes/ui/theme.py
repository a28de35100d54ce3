from __future__ import annotations

from dataclasses import dataclass

from plainnotes.app_settings import normalize_theme


@dataclass(frozen=True)
class Theme:
    """Colour palette handed to the window; switching themes means passing a new one."""
    name: str
    background: str
    surface: str
    text: str
    border: str
    accent: str
    hover: str

    @property
    def is_dark(self) -> bool:
        return self.name == "dark"

    def stylesheet(self) -> str:
        return f"""
QMainWindow, QDialog, QWidget {{
    background: {self.background};
    color: {self.text};
}}
QLineEdit, QTextEdit, QPlainTextEdit, QListWidget {{
    background: {self.surface};
    color: {self.text};
    border: 1px solid {self.border};
    border-radius: 4px;
    padding: 4px;
}}
QListWidget::item:selected {{
    background: {self.accent};
    color: #ffffff;
}}
QPushButton {{
    background: {self.surface};
    color: {self.text};
    border: 2px solid {self.accent};
    border-radius: 6px;
    padding: 6px 16px;
}}
QPushButton:hover {{
    background: {self.hover};
}}
QLabel#dateLabel, QStatusBar {{
    color: {self.text};
}}
"""


LIGHT = Theme(
    name="light",
    background="#fafafa",
    surface="#ffffff",
    text="#2c3e50",
    border="#ecf0f1",
    accent="#2980b9",
    hover="#ecf0f1",
)

DARK = Theme(
    name="dark",
    background="#222222",
    surface="#2b2b2b",
    text="#dcdcdc",
    border="#3c3c3c",
    accent="#2980b9",
    hover="#2c3e50",
)


def theme_by_name(name: str) -> Theme:
    return DARK if normalize_theme(name) == "dark" else LIGHT
