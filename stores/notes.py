from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from PySide6.QtCore import QObject, Signal

from stores.common import next_selection, now_ms
from stores.models import SOAP_FIELDS, Note, new_id
from stores.save_scheduler import SaveScheduler

logger = logging.getLogger(__name__)


class NotesStore(QObject):
    """
    In-memory notes (newest first) plus the selected note id.

    Field edits update memory right away and hand the new snapshot to the
    save scheduler. create()/delete() write to the database first and touch
    memory only if that write succeeded.
    """

    notesChanged = Signal()          # list membership/order changed
    noteUpdated = Signal(str)        # one note's fields changed
    selectionChanged = Signal(object)  # note id or None

    def __init__(self, db, scheduler: Optional[SaveScheduler] = None, parent=None):
        super().__init__(parent)
        self.db = db
        self.scheduler = scheduler or SaveScheduler(db.note_update, parent=self, name="note")
        self.notes: list[Note] = []
        self.selected_id: Optional[str] = None

    # --- Queries -------------------------------------------------------------

    def get(self, note_id: Optional[str]) -> Optional[Note]:
        for n in self.notes:
            if n.id == note_id:
                return n
        return None

    def index_of(self, note_id: str) -> int:
        for i, n in enumerate(self.notes):
            if n.id == note_id:
                return i
        return -1

    def selected(self) -> Optional[Note]:
        return self.get(self.selected_id)

    def search(self, query: str) -> list[Note]:
        return [n for n in self.notes if n.matches(query)]

    # --- Loading / selection -------------------------------------------------

    def load(self) -> bool:
        """Fetch all notes once. On failure the store stays empty."""
        try:
            rows = self.db.note_list()
        except sqlite3.Error:
            logger.exception("failed to load notes")
            self.notes = []
            self._set_selected(None)
            self.notesChanged.emit()
            return False
        self.notes = [Note.from_row(r) for r in rows]
        logger.info("loaded %d notes", len(self.notes))
        self.notesChanged.emit()
        self._set_selected(self.notes[0].id if self.notes else None)
        return True

    def select(self, note_id: Optional[str]) -> None:
        if note_id is not None and self.get(note_id) is None:
            return
        self._set_selected(note_id)

    def _set_selected(self, note_id: Optional[str]) -> None:
        if note_id == self.selected_id:
            return
        self.selected_id = note_id
        self.selectionChanged.emit(note_id)

    # --- Structural ----------------------------------------------------------

    def create(self) -> Optional[Note]:
        now = now_ms()
        note = Note(id=new_id(), created_at=now, updated_at=now)
        try:
            self.db.note_insert(note)
        except sqlite3.Error:
            logger.exception("failed to create note")
            return None
        self.notes.insert(0, note)
        self.notesChanged.emit()
        self._set_selected(note.id)
        return note

    def delete(self, note_id: str) -> bool:
        index = self.index_of(note_id)
        if index < 0:
            return False

        self.scheduler.cancel(note_id)
        try:
            self.db.note_delete(note_id)
        except sqlite3.Error:
            logger.exception("failed to delete note %s", note_id)
            return False

        del self.notes[index]
        self.notesChanged.emit()
        if self.selected_id == note_id:
            self._set_selected(next_selection([n.id for n in self.notes], index))
        return True

    # --- Field edits ---------------------------------------------------------

    def _apply(self, note_id: str, **changes) -> Optional[Note]:
        index = self.index_of(note_id)
        if index < 0:
            return None
        current = self.notes[index]
        updated = current.with_changes(updated_at=now_ms(current.updated_at), **changes)
        self.notes[index] = updated
        self.scheduler.schedule(updated)
        self.noteUpdated.emit(note_id)
        return updated

    def update_title(self, note_id: str, title: str) -> Optional[Note]:
        return self._apply(note_id, title=title)

    def update_field(self, note_id: str, field: str, value: str) -> Optional[Note]:
        if field not in SOAP_FIELDS:
            raise ValueError(f"unknown note field: {field!r}")
        return self._apply(note_id, **{field: value})

    def update_transcription(self, note_id: str, value: str) -> Optional[Note]:
        return self._apply(note_id, transcription=value)

    def append_transcription(self, note_id: str, text: str) -> Optional[Note]:
        note = self.get(note_id)
        if note is None or not (text or "").strip():
            return note
        existing = note.transcription.rstrip()
        value = f"{existing}\n\n{text.strip()}" if existing else text.strip()
        return self._apply(note_id, transcription=value)

    def set_template(self, note_id: str, template_id: Optional[str]) -> Optional[Note]:
        return self._apply(note_id, template_id=template_id)
