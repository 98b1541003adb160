from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QWidget, QSplitter, QVBoxLayout, QHBoxLayout, QLineEdit, QLabel,
    QPushButton, QMessageBox, QComboBox, QDialog, QListWidget, QListWidgetItem,
    QFormLayout, QScrollArea, QFrame, QToolButton,
)

from stores.models import DetailLevel, SectionStyle
from ui.widgets.helpers import PlainNoTab


class SectionEditor(QFrame):
    """One template section: title, style, detail level, instructions, move/remove."""
    changed = Signal(str, dict)     # section id, patch
    moveRequested = Signal(int, int)  # index, direction
    removeRequested = Signal(str)

    def __init__(self, section, index: int, total: int, read_only: bool, parent=None):
        super().__init__(parent)
        self.section_id = section.id
        self.index = index
        self.setFrameShape(QFrame.StyledPanel)

        self.titleEdit = QLineEdit(section.title)
        self.titleEdit.setPlaceholderText("Section title")
        self.styleCombo = QComboBox()
        self.styleCombo.addItems([s.value for s in SectionStyle])
        self.styleCombo.setCurrentText(section.style.value)
        self.detailCombo = QComboBox()
        self.detailCombo.addItems([d.value for d in DetailLevel])
        self.detailCombo.setCurrentText(section.detail_level.value)
        self.instructionsEdit = PlainNoTab(placeholder="Instructions for this section")
        self.instructionsEdit.setPlainText(section.instructions)
        self.instructionsEdit.setMinimumHeight(90)

        self.btnUp = QToolButton(); self.btnUp.setText("↑"); self.btnUp.setToolTip("Move up")
        self.btnDown = QToolButton(); self.btnDown.setText("↓"); self.btnDown.setToolTip("Move down")
        self.btnRemove = QToolButton(); self.btnRemove.setText("✕"); self.btnRemove.setToolTip("Remove section")
        self.btnUp.setEnabled(index > 0)
        self.btnDown.setEnabled(index < total - 1)

        head = QHBoxLayout(); head.setContentsMargins(0, 0, 0, 0)
        head.addWidget(self.titleEdit, 1)
        head.addWidget(self.styleCombo)
        head.addWidget(self.detailCombo)
        head.addWidget(self.btnUp); head.addWidget(self.btnDown); head.addWidget(self.btnRemove)

        lay = QVBoxLayout(self); lay.setContentsMargins(6, 6, 6, 6); lay.setSpacing(4)
        lay.addLayout(head)
        lay.addWidget(self.instructionsEdit)

        for w in (self.titleEdit, self.styleCombo, self.detailCombo,
                  self.btnUp, self.btnDown, self.btnRemove):
            w.setEnabled(w.isEnabled() and not read_only)
        self.instructionsEdit.setReadOnly(read_only)

        self.titleEdit.textEdited.connect(lambda v: self.changed.emit(self.section_id, {"title": v}))
        self.styleCombo.currentTextChanged.connect(lambda v: self.changed.emit(self.section_id, {"style": v}))
        self.detailCombo.currentTextChanged.connect(lambda v: self.changed.emit(self.section_id, {"detail_level": v}))
        self.instructionsEdit.textChanged.connect(
            lambda: self.changed.emit(self.section_id, {"instructions": self.instructionsEdit.toPlainText()}))
        self.btnUp.clicked.connect(lambda: self.moveRequested.emit(self.index, -1))
        self.btnDown.clicked.connect(lambda: self.moveRequested.emit(self.index, 1))
        self.btnRemove.clicked.connect(lambda: self.removeRequested.emit(self.section_id))


class TemplatesDialog(QDialog):
    """
    Template manager. System templates are shown read-only; duplicate one
    to customise it. Edits go straight to the store (saved in the background).
    """

    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store
        self.setWindowTitle("Templates")
        self.resize(900, 600)

        # Left: header + list
        self.leftHeader = QWidget()
        lh = QHBoxLayout(self.leftHeader); lh.setContentsMargins(0, 0, 0, 0)
        self.btnNew = QPushButton("New")
        self.btnNew.setIcon(QIcon.fromTheme("document-new"))
        lh.addWidget(QLabel("<b>Templates</b>")); lh.addStretch(1); lh.addWidget(self.btnNew)

        self.list = QListWidget()
        self.list.setSelectionMode(QListWidget.SingleSelection)

        leftWrap = QWidget(); lv = QVBoxLayout(leftWrap); lv.setContentsMargins(6, 6, 6, 6); lv.setSpacing(6)
        lv.addWidget(self.leftHeader)
        lv.addWidget(self.list, 1)

        # Right: fields + sections
        self.readOnlyHint = QLabel("Built-in template (read-only). Duplicate it to make changes.")
        self.readOnlyHint.setStyleSheet("color: #888; font-size: 11px;")
        self.titleEdit = QLineEdit()
        self.descEdit = QLineEdit()
        self.generalEdit = PlainNoTab(placeholder="General instructions applied to the whole note")
        self.generalEdit.setMaximumHeight(110)

        form = QFormLayout()
        form.addRow("Title:", self.titleEdit)
        form.addRow("Description:", self.descEdit)
        form.addRow("General instructions:", self.generalEdit)

        self.sectionsLabel = QLabel()
        self.btnAddSection = QPushButton("Add section")
        secHead = QHBoxLayout(); secHead.setContentsMargins(0, 0, 0, 0)
        secHead.addWidget(self.sectionsLabel); secHead.addStretch(1); secHead.addWidget(self.btnAddSection)

        self.sectionsHost = QWidget()
        self.sectionsLayout = QVBoxLayout(self.sectionsHost)
        self.sectionsLayout.setContentsMargins(0, 0, 0, 0)
        self.sectionsLayout.addStretch(1)
        scroll = QScrollArea(); scroll.setWidgetResizable(True); scroll.setWidget(self.sectionsHost)

        self.btnDuplicate = QPushButton("Duplicate")
        self.btnDelete = QPushButton("Delete")
        self.btnClose = QPushButton("Close")
        rowBtns = QHBoxLayout(); rowBtns.setContentsMargins(0, 0, 0, 0)
        rowBtns.addWidget(self.btnDuplicate); rowBtns.addWidget(self.btnDelete)
        rowBtns.addStretch(1); rowBtns.addWidget(self.btnClose)

        rightWrap = QWidget(); rv = QVBoxLayout(rightWrap); rv.setContentsMargins(6, 6, 6, 6); rv.setSpacing(6)
        rv.addWidget(self.readOnlyHint)
        rv.addLayout(form)
        rv.addLayout(secHead)
        rv.addWidget(scroll, 1)
        rv.addLayout(rowBtns)

        splitter = QSplitter()
        splitter.addWidget(leftWrap)
        splitter.addWidget(rightWrap)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        QVBoxLayout(self).addWidget(splitter)

        # Signals
        self.list.currentItemChanged.connect(self._on_list_current_changed)
        self.btnNew.clicked.connect(lambda: self.store.create())
        self.btnDuplicate.clicked.connect(self._duplicate)
        self.btnDelete.clicked.connect(self._delete)
        self.btnClose.clicked.connect(self.accept)
        self.btnAddSection.clicked.connect(self._add_section)
        self.titleEdit.textEdited.connect(self._on_title_edited)
        self.descEdit.textEdited.connect(lambda v: self._update(description=v))
        self.generalEdit.textChanged.connect(
            lambda: self._update(general_instructions=self.generalEdit.toPlainText()))

        self.store.templatesChanged.connect(self._load_list)
        self.store.selectionChanged.connect(self._on_store_selection)

        self._load_list()

    # --- Helpers ---
    def _current(self):
        return self.store.selected()

    def _update(self, **patch):
        t = self._current()
        if t is not None and not t.is_system:
            self.store.update(t.id, **patch)

    def _load_list(self):
        self.list.blockSignals(True)
        self.list.clear()
        for t in self.store.templates:
            it = QListWidgetItem(("🔒 " if t.is_system else "") + (t.title or "(Untitled)"))
            it.setData(Qt.UserRole, t.id)
            self.list.addItem(it)
            if t.id == self.store.selected_id:
                self.list.setCurrentItem(it)
        self.list.blockSignals(False)
        self._load_form()

    def _on_list_current_changed(self, cur: QListWidgetItem, prev: QListWidgetItem):
        self.store.select(cur.data(Qt.UserRole) if cur else None)

    def _on_store_selection(self, template_id):
        for i in range(self.list.count()):
            if self.list.item(i).data(Qt.UserRole) == template_id:
                self.list.blockSignals(True)
                self.list.setCurrentRow(i)
                self.list.blockSignals(False)
                break
        self._load_form()

    def _load_form(self):
        t = self._current()
        read_only = t is None or t.is_system
        for w, value in ((self.titleEdit, t.title if t else ""),
                         (self.descEdit, t.description if t else "")):
            w.blockSignals(True)
            w.setText(value)
            w.setReadOnly(read_only)
            w.blockSignals(False)
        self.generalEdit.set_text_quietly(t.general_instructions if t else "")
        self.generalEdit.setReadOnly(read_only)
        self.readOnlyHint.setVisible(bool(t and t.is_system))
        self.btnAddSection.setEnabled(not read_only)
        self.btnDelete.setEnabled(not read_only)
        self.btnDuplicate.setEnabled(t is not None)
        self._rebuild_sections()

    def _rebuild_sections(self):
        while self.sectionsLayout.count() > 1:
            w = self.sectionsLayout.takeAt(0).widget()
            if w is not None:
                w.deleteLater()
        t = self._current()
        sections = t.sections if t else ()
        self.sectionsLabel.setText(f"<b>Sections</b> ({len(sections)})")
        for i, s in enumerate(sections):
            ed = SectionEditor(s, i, len(sections), read_only=t.is_system, parent=self.sectionsHost)
            ed.changed.connect(self._on_section_changed)
            ed.moveRequested.connect(self._on_move_section)
            ed.removeRequested.connect(self._on_remove_section)
            self.sectionsLayout.insertWidget(i, ed)

    # --- Actions ---
    def _on_title_edited(self, text: str):
        self._update(title=text)
        it = self.list.currentItem()
        if it is not None:
            it.setText(text or "(Untitled)")

    def _on_section_changed(self, section_id: str, patch: dict):
        t = self._current()
        if t is not None:
            self.store.update_section(t.id, section_id, **patch)

    def _on_move_section(self, index: int, direction: int):
        t = self._current()
        if t is not None and self.store.move_section(t.id, index, direction):
            self._rebuild_sections()

    def _on_remove_section(self, section_id: str):
        t = self._current()
        if t is not None and self.store.remove_section(t.id, section_id):
            self._rebuild_sections()

    def _add_section(self):
        t = self._current()
        if t is not None and self.store.add_section(t.id) is not None:
            self._rebuild_sections()

    def _duplicate(self):
        t = self._current()
        if t is None:
            return
        if self.store.create(from_template=t) is None:
            QMessageBox.warning(self, "Templates", "Could not duplicate the template.")

    def _delete(self):
        t = self._current()
        if t is None or t.is_system:
            return
        if QMessageBox.question(self, "Delete template",
                                f"Delete template “{t.title or '(Untitled)'}”?") != QMessageBox.Yes:
            return
        if not self.store.delete(t.id):
            QMessageBox.warning(self, "Templates", "Could not delete the template.")
