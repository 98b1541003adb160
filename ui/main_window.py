from PySide6.QtCore import Qt, Slot, QSettings
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QSplitter, QVBoxLayout, QHBoxLayout, QListWidget,
    QListWidgetItem, QLineEdit, QLabel, QPushButton, QTabWidget, QMessageBox,
    QComboBox, QApplication, QScrollArea, QProgressBar,
)

import config
from stores.models import SOAP_FIELDS
from ui.widgets.common import StatusLine
from ui.widgets.dialogs import TemplatesDialog
from ui.widgets.helpers import PlainNoTab, note_date_group, note_display_label
from utils.prompt import compile_prompt
from utils.transcription import RecordingSession

SOAP_LABELS = {
    "subjective": "Subjective",
    "objective": "Objective",
    "assessment": "Assessment",
    "plan": "Plan",
}


class MainWindow(QMainWindow):
    """Notes sidebar on the left, the selected note's editor on the right."""

    def __init__(self, notes, templates, recorder: RecordingSession | None = None, dev_mode: bool = False):
        super().__init__()
        self.notes = notes
        self.templates = templates
        self.recorder = recorder or RecordingSession(parent=self)
        self.dev_mode = dev_mode
        self.resize(1200, 760)
        self.setWindowTitle(config.APP_NAME + (" [dev]" if dev_mode else ""))

        self._build_ui()
        self._build_actions()
        self._wire()

        self.populate_notes_list()
        self.populate_template_combo()
        self.show_selected_note()

    # ---------- UI ----------

    def _build_ui(self):
        # Left: search + New + list
        self.searchEdit = QLineEdit()
        self.searchEdit.setPlaceholderText("Search notes")
        self.searchEdit.setClearButtonEnabled(True)
        self.btnNewNote = QPushButton("New")
        self.notesList = QListWidget()
        self.notesList.setSelectionMode(QListWidget.SingleSelection)

        left = QWidget(); lv = QVBoxLayout(left); lv.setContentsMargins(6, 6, 6, 6); lv.setSpacing(6)
        top = QHBoxLayout(); top.addWidget(self.searchEdit, 1); top.addWidget(self.btnNewNote)
        lv.addLayout(top)
        lv.addWidget(self.notesList, 1)

        # Right: header row + tabs
        self.titleEdit = QLineEdit()
        self.titleEdit.setPlaceholderText("Untitled note")
        f = self.titleEdit.font(); f.setPointSizeF(14.0); self.titleEdit.setFont(f)
        self.templateCombo = QComboBox()
        self.templateCombo.setToolTip("Template used to generate this note")
        self.btnDeleteNote = QPushButton("Delete")
        self.status = StatusLine(self)

        head = QHBoxLayout(); head.setContentsMargins(0, 0, 0, 0)
        head.addWidget(self.titleEdit, 1)
        head.addWidget(self.templateCombo)
        head.addWidget(self.btnDeleteNote)

        # Note tab: SOAP editors
        self.soapEdits: dict[str, PlainNoTab] = {}
        noteHost = QWidget(); nv = QVBoxLayout(noteHost); nv.setContentsMargins(0, 0, 0, 0)
        for field in SOAP_FIELDS:
            nv.addWidget(QLabel(f"<b>{SOAP_LABELS[field]}</b>"))
            ed = PlainNoTab(placeholder=f"{SOAP_LABELS[field]}…")
            ed.setMinimumHeight(110)
            self.soapEdits[field] = ed
            nv.addWidget(ed)
        nv.addStretch(1)
        noteScroll = QScrollArea(); noteScroll.setWidgetResizable(True); noteScroll.setWidget(noteHost)

        # Transcription tab
        self.transcriptionEdit = PlainNoTab(placeholder="Transcription of the visit")
        self.btnRecord = QPushButton("Record")
        self.recordProgress = QProgressBar(); self.recordProgress.setRange(0, 100); self.recordProgress.hide()
        trHost = QWidget(); tv = QVBoxLayout(trHost); tv.setContentsMargins(0, 0, 0, 0)
        recRow = QHBoxLayout(); recRow.addWidget(self.btnRecord); recRow.addWidget(self.recordProgress, 1)
        tv.addLayout(recRow)
        tv.addWidget(self.transcriptionEdit, 1)

        self.tabs = QTabWidget()
        self.tabs.addTab(trHost, "Transcription")
        self.tabs.addTab(noteScroll, "Note")
        self.tabs.setCurrentIndex(1)

        self.editorPane = QWidget()
        rv = QVBoxLayout(self.editorPane); rv.setContentsMargins(6, 6, 6, 6); rv.setSpacing(6)
        rv.addLayout(head)
        rv.addWidget(self.tabs, 1)

        self.emptyLabel = QLabel("No note selected. Press Ctrl+N to create one.")
        self.emptyLabel.setAlignment(Qt.AlignCenter)

        right = QWidget(); rl = QVBoxLayout(right); rl.setContentsMargins(0, 0, 0, 0)
        rl.addWidget(self.editorPane, 1)
        rl.addWidget(self.emptyLabel, 1)

        splitter = QSplitter()
        splitter.addWidget(left)
        splitter.addWidget(right)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([280, 920])
        self.setCentralWidget(splitter)
        self.statusBar().addPermanentWidget(self.status)

    def _build_actions(self):
        m = self.menuBar().addMenu("&File")
        self.actNewNote = QAction("New Note", self)
        self.actNewNote.setShortcut(QKeySequence.New)
        self.actDeleteNote = QAction("Delete Note", self)
        self.actCopyPrompt = QAction("Copy Generation Prompt", self)
        self.actCopyPrompt.setShortcut(QKeySequence("Ctrl+Shift+C"))
        self.actTemplates = QAction("Templates…", self)
        self.actTemplates.setShortcut(QKeySequence("Ctrl+,"))
        self.actQuit = QAction("Quit", self)
        self.actQuit.setShortcut(QKeySequence.Quit)
        for a in (self.actNewNote, self.actDeleteNote, None, self.actCopyPrompt,
                  self.actTemplates, None, self.actQuit):
            if a is None:
                m.addSeparator()
            else:
                m.addAction(a)

        v = self.menuBar().addMenu("&View")
        self.actShowTranscription = QAction("Transcription", self)
        self.actShowTranscription.setShortcut(QKeySequence("Ctrl+1"))
        self.actShowNote = QAction("Note", self)
        self.actShowNote.setShortcut(QKeySequence("Ctrl+2"))
        v.addAction(self.actShowTranscription)
        v.addAction(self.actShowNote)

    def _wire(self):
        # view -> store
        self.actNewNote.triggered.connect(self.cmd_new_note)
        self.btnNewNote.clicked.connect(self.cmd_new_note)
        self.actDeleteNote.triggered.connect(self.cmd_delete_note)
        self.btnDeleteNote.clicked.connect(self.cmd_delete_note)
        self.actCopyPrompt.triggered.connect(self.cmd_copy_prompt)
        self.actTemplates.triggered.connect(self.cmd_open_templates)
        self.actQuit.triggered.connect(self.close)
        self.actShowTranscription.triggered.connect(lambda: self.tabs.setCurrentIndex(0))
        self.actShowNote.triggered.connect(lambda: self.tabs.setCurrentIndex(1))

        self.searchEdit.textChanged.connect(lambda _t: self.populate_notes_list())
        self.notesList.currentItemChanged.connect(self._on_list_current_changed)
        self.titleEdit.textEdited.connect(self._on_title_edited)
        for field, ed in self.soapEdits.items():
            ed.textChanged.connect(lambda f=field, e=ed: self._on_soap_edited(f, e.toPlainText()))
        self.transcriptionEdit.textChanged.connect(self._on_transcription_edited)
        self.templateCombo.activated.connect(self._on_template_chosen)

        # store -> view
        self.notes.notesChanged.connect(self.populate_notes_list)
        self.notes.selectionChanged.connect(lambda _id: self.show_selected_note())
        self.templates.templatesChanged.connect(self.populate_template_combo)
        for sched in (self.notes.scheduler, self.templates.scheduler):
            sched.saved.connect(lambda _id: self._on_saved())
            sched.saveFailed.connect(lambda _id, err: self.status.show_error("Not saved: " + err))

        # recording
        self.btnRecord.setEnabled(self.recorder.available)
        if not self.recorder.available:
            self.btnRecord.setToolTip("No transcription engine configured")
        self.btnRecord.clicked.connect(self.recorder.toggle)
        self.recorder.stateChanged.connect(self._on_recorder_state)
        self.recorder.downloadProgress.connect(self._on_download_progress)
        self.recorder.transcriptionReady.connect(self._on_transcription_ready)
        self.recorder.failed.connect(lambda msg: QMessageBox.warning(self, "Recording", msg))

    # ---------- Populate ----------

    @Slot()
    def populate_notes_list(self):
        query = self.searchEdit.text()
        self.notesList.blockSignals(True)
        self.notesList.clear()
        group = None
        for note in self.notes.search(query):
            g = note_date_group(note.created_at)
            if g != group:
                header = QListWidgetItem(g)
                header.setFlags(Qt.NoItemFlags)
                f = header.font(); f.setBold(True); header.setFont(f)
                self.notesList.addItem(header)
                group = g
            it = QListWidgetItem(note_display_label(note))
            it.setData(Qt.UserRole, note.id)
            self.notesList.addItem(it)
            if note.id == self.notes.selected_id:
                self.notesList.setCurrentItem(it)
        self.notesList.blockSignals(False)

    @Slot()
    def populate_template_combo(self):
        self.templateCombo.blockSignals(True)
        self.templateCombo.clear()
        for t in self.templates.templates:
            self.templateCombo.addItem(t.title or "(Untitled)", t.id)
        self.templateCombo.blockSignals(False)
        self._sync_template_combo()

    def _sync_template_combo(self):
        note = self.notes.selected()
        tid = note.template_id if note else None
        idx = self.templateCombo.findData(tid) if tid else -1
        self.templateCombo.blockSignals(True)
        self.templateCombo.setCurrentIndex(idx if idx >= 0 else (0 if self.templateCombo.count() else -1))
        self.templateCombo.blockSignals(False)

    def show_selected_note(self):
        note = self.notes.selected()
        self.editorPane.setVisible(note is not None)
        self.emptyLabel.setVisible(note is None)
        self.actDeleteNote.setEnabled(note is not None)
        self.actCopyPrompt.setEnabled(note is not None)
        if note is None:
            return

        self.titleEdit.blockSignals(True)
        self.titleEdit.setText(note.title)
        self.titleEdit.blockSignals(False)
        for field, ed in self.soapEdits.items():
            ed.set_text_quietly(getattr(note, field))
        self.transcriptionEdit.set_text_quietly(note.transcription)
        self._sync_template_combo()

        for i in range(self.notesList.count()):
            it = self.notesList.item(i)
            if it.data(Qt.UserRole) == note.id:
                self.notesList.blockSignals(True)
                self.notesList.setCurrentItem(it)
                self.notesList.blockSignals(False)
                break

    # ---------- Edits ----------

    def _on_list_current_changed(self, cur: QListWidgetItem, prev: QListWidgetItem):
        nid = cur.data(Qt.UserRole) if cur else None
        if nid:
            self.notes.select(nid)

    def _on_title_edited(self, text: str):
        nid = self.notes.selected_id
        if nid is None:
            return
        self.notes.update_title(nid, text)
        self.status.set_pending()
        for i in range(self.notesList.count()):
            it = self.notesList.item(i)
            if it.data(Qt.UserRole) == nid:
                it.setText(note_display_label(self.notes.get(nid)))
                break

    def _on_soap_edited(self, field: str, value: str):
        nid = self.notes.selected_id
        if nid is not None:
            self.notes.update_field(nid, field, value)
            self.status.set_pending()

    def _on_transcription_edited(self):
        nid = self.notes.selected_id
        if nid is not None:
            self.notes.update_transcription(nid, self.transcriptionEdit.toPlainText())
            self.status.set_pending()

    def _on_template_chosen(self, index: int):
        nid = self.notes.selected_id
        if nid is not None:
            self.notes.set_template(nid, self.templateCombo.itemData(index))
            self.status.set_pending()

    def _on_saved(self):
        if not (self.notes.scheduler.pending_ids() or self.templates.scheduler.pending_ids()):
            self.status.set_saved_now()

    # ---------- Commands ----------

    def cmd_new_note(self):
        if self.searchEdit.text():
            self.searchEdit.clear()
        if self.notes.create() is None:
            self.status.show_error("Could not create note")
            return
        self.tabs.setCurrentIndex(1)
        self.titleEdit.setFocus()

    def cmd_delete_note(self):
        note = self.notes.selected()
        if note is None:
            return
        label = note.title.strip() or "this untitled note"
        if QMessageBox.question(self, "Delete note", f"Delete {label}?") != QMessageBox.Yes:
            return
        if not self.notes.delete(note.id):
            self.status.show_error("Could not delete note")

    def selected_template(self):
        note = self.notes.selected()
        if note is not None and note.template_id:
            t = self.templates.get(note.template_id)
            if t is not None:
                return t
        return self.templates.get(self.templateCombo.currentData()) or (
            self.templates.templates[0] if self.templates.templates else None)

    def cmd_copy_prompt(self):
        note = self.notes.selected()
        template = self.selected_template()
        if note is None or template is None:
            return
        if not note.transcription.strip():
            self.status.show_info("Nothing to send: the transcription is empty")
            return
        QApplication.clipboard().setText(compile_prompt(note.transcription, template))
        self.status.show_info(f"Prompt copied ({template.title})")

    def cmd_open_templates(self):
        dlg = TemplatesDialog(self.templates, self)
        dlg.exec()

    # ---------- Recording ----------

    def _on_recorder_state(self, state: str):
        self.btnRecord.setText({"idle": "Record", "recording": "Stop",
                                "transcribing": "Transcribing…"}.get(state, "Record"))
        self.btnRecord.setEnabled(state != RecordingSession.TRANSCRIBING)
        if state != RecordingSession.TRANSCRIBING:
            self.recordProgress.hide()

    def _on_download_progress(self, percent: int):
        self.recordProgress.setVisible(percent < 100)
        self.recordProgress.setValue(percent)
        self.recordProgress.setFormat("Downloading speech model… %p%")
        QApplication.processEvents()

    def _on_transcription_ready(self, text: str):
        nid = self.notes.selected_id
        if nid is None:
            note = self.notes.create()
            if note is None:
                self.status.show_error("Could not create note for the transcription")
                return
            nid = note.id
        self.notes.append_transcription(nid, text)
        self.transcriptionEdit.set_text_quietly(self.notes.get(nid).transcription)
        self.tabs.setCurrentIndex(0)
        self.status.show_info("Transcription added")

    # ---------- Lifecycle ----------

    def closeEvent(self, ev):
        settings = QSettings(config.ORG_NAME, config.APP_NAME)
        settings.setValue("last_note_id", self.notes.selected_id or "")
        self.notes.scheduler.flush()
        self.templates.scheduler.flush()
        super().closeEvent(ev)
