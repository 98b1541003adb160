from datetime import datetime, timedelta

from PySide6.QtWidgets import QPlainTextEdit
from PySide6.QtCore import Qt

class PlainNoTab(QPlainTextEdit):
    """QPlainTextEdit that uses Tab/Shift+Tab to move focus instead of inserting tabs."""
    def __init__(self, *args, placeholder: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setTabChangesFocus(True)
        if placeholder:
            self.setPlaceholderText(placeholder)

    def set_text_quietly(self, text: str):
        """Replace the text without emitting textChanged (model -> view)."""
        if self.toPlainText() == text:
            return
        self.blockSignals(True)
        try:
            self.setPlainText(text)
        finally:
            self.blockSignals(False)

def note_date_group(created_ms: int, now: datetime | None = None) -> str:
    """Sidebar group heading: Today, Yesterday, or 'March 4, 2026'."""
    now = now or datetime.now()
    d = datetime.fromtimestamp(created_ms / 1000).date()
    if d == now.date():
        return "Today"
    if d == (now - timedelta(days=1)).date():
        return "Yesterday"
    return f"{d.strftime('%B')} {d.day}, {d.year}"

def note_display_label(note) -> str:
    t = datetime.fromtimestamp(note.created_at / 1000)
    hour = t.hour % 12 or 12
    when = f"{hour}:{t.minute:02d} {'PM' if t.hour >= 12 else 'AM'}"
    title = (note.title or "").strip() or "Untitled note"
    return f"{title}\n{when}"
