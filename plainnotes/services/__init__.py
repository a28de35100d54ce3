from .notes_service import NotesService
from .transfer import export_note, format_date, format_date_range, import_text, render_export

__all__ = ["NotesService",
           "export_note",
           "format_date",
           "format_date_range",
           "import_text",
           "render_export"
           ]
