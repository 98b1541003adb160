# ui/widgets/common.py
from __future__ import annotations
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QPalette, QColor
from PySide6.QtWidgets import QLabel, QFrame, QSizePolicy

def _blend(a: QColor, b: QColor, t: float) -> QColor:
    """Linear blend between two colors: 0 -> a, 1 -> b."""
    return QColor(
        int(a.red()   + (b.red()   - a.red())   * t),
        int(a.green() + (b.green() - a.green()) * t),
        int(a.blue()  + (b.blue()  - a.blue())  * t),
        int(a.alpha() + (b.alpha() - a.alpha()) * t),
    )

_STATE_COLORS = {
    # kind: (foreground, background)
    "pending": ("#8A6D00", "#FFF8E1"),
    "saved":   ("#1B6E1B", "#E9F7E9"),
    "info":    ("#1A4F85", "#EAF2FB"),
    "error":   ("#8B0000", "#FDECEC"),
}

class StatusLine(QLabel):
    """
    Small status pill for background saves, readable in light/dark themes.
      - set_pending()       # edits waiting for the debounce to elapse
      - set_saved_now()     # brief green pulse then neutral
      - show_info("…")
      - show_error("…")     # stays until the next state change
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("StatusPill")
        self.setTextInteractionFlags(Qt.NoTextInteraction)
        self.setFrameStyle(QFrame.Panel | QFrame.Sunken)
        self.setSizePolicy(QSizePolicy.Maximum, QSizePolicy.Fixed)
        self.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)

        # auto-revert for transient states
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._revert_to_neutral)

        self._neutral_text = "Ready"
        self._revert_to_neutral()

    # ---------- Public API ----------

    def show_neutral(self, text: str = "Ready"):
        self._timer.stop()
        self._neutral_text = text or "Ready"
        self._revert_to_neutral()

    def set_pending(self, text: str = "● Saving…"):
        self._show("pending", text)

    def set_saved_now(self, text: str = "✓ Saved"):
        self._show("saved", text)
        self._timer.start(1350)

    def show_info(self, text: str):
        self._show("info", text)
        self._timer.start(2500)

    def show_error(self, text: str):
        self._show("error", text)

    # ---------- Internals ----------

    def _show(self, kind: str, text: str):
        self._timer.stop()
        self._apply_state_style(kind)
        self.setText(text)

    def _revert_to_neutral(self):
        pal = self.palette()
        base = pal.color(QPalette.Window)
        txt  = pal.color(QPalette.WindowText)
        self._set_colors(txt, _blend(base, txt, 0.06), _blend(base, txt, 0.35), weight=400)
        self.setText(self._neutral_text)

    def _apply_state_style(self, kind: str):
        pal  = self.palette()
        base = pal.color(QPalette.Window)
        txt  = pal.color(QPalette.WindowText)
        fg, bg = (QColor(c) for c in _STATE_COLORS[kind])
        # blend with the theme so dark mode stays gentle
        self._set_colors(_blend(txt, fg, 0.75), _blend(base, bg, 0.85), _blend(txt, fg, 0.75), weight=500)

    def _set_colors(self, fg: QColor, bg: QColor, border: QColor, weight: int):
        self.setStyleSheet(f"""
            QLabel {{
                color: {fg.name()};
                background-color: {bg.name()};
                border: 1px solid {border.name()};
                border-radius: 4px;
                padding: 2px 8px;
                font-weight: {weight};
            }}
        """)

    def hideEvent(self, ev):
        self._timer.stop()
        super().hideEvent(ev)
