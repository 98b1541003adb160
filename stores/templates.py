from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from PySide6.QtCore import QObject, Signal

from stores.common import next_selection, now_ms
from stores.models import Template, TemplateSection, new_id
from stores.save_scheduler import SaveScheduler

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "general_instructions", "sections")


def _checked_sections(sections) -> tuple[TemplateSection, ...]:
    out = []
    seen = set()
    for s in sections:
        if isinstance(s, dict):
            s = TemplateSection.from_dict(s)
        elif not isinstance(s, TemplateSection):
            raise TypeError(f"not a template section: {s!r}")
        if s.id in seen:
            raise ValueError(f"duplicate section id {s.id}")
        seen.add(s.id)
        out.append(s)
    return tuple(out)


class TemplatesStore(QObject):
    """
    In-memory templates (system first, then oldest user templates first).

    System templates are read-only: every mutation on one returns without
    doing anything and never reaches the scheduler or the database.

    No-op convention: mutations that hand back an object (`update`,
    `add_section`, `update_section`) return None when nothing changed
    (unknown id or system template); the others (`delete`,
    `remove_section`, `move_section`) return False.

    Section ids are unique within a template. `add_section` always mints a
    fresh id and `update(sections=...)` rejects duplicates with ValueError.
    """

    templatesChanged = Signal()
    templateUpdated = Signal(str)
    selectionChanged = Signal(object)

    def __init__(self, db, scheduler: Optional[SaveScheduler] = None, parent=None):
        super().__init__(parent)
        self.db = db
        self.scheduler = scheduler or SaveScheduler(db.template_update, parent=self, name="template")
        self.templates: list[Template] = []
        self.selected_id: Optional[str] = None

    # --- Queries -------------------------------------------------------------

    def get(self, template_id: Optional[str]) -> Optional[Template]:
        for t in self.templates:
            if t.id == template_id:
                return t
        return None

    def index_of(self, template_id: str) -> int:
        for i, t in enumerate(self.templates):
            if t.id == template_id:
                return i
        return -1

    def selected(self) -> Optional[Template]:
        return self.get(self.selected_id)

    # --- Loading / selection -------------------------------------------------

    def load(self) -> bool:
        try:
            rows = self.db.template_list()
        except sqlite3.Error:
            logger.exception("failed to load templates")
            self.templates = []
            self._set_selected(None)
            self.templatesChanged.emit()
            return False
        self.templates = [Template.from_row(r) for r in rows]
        logger.info("loaded %d templates", len(self.templates))
        self.templatesChanged.emit()
        self._set_selected(self.templates[0].id if self.templates else None)
        return True

    def select(self, template_id: Optional[str]) -> None:
        if template_id is not None and self.get(template_id) is None:
            return
        self._set_selected(template_id)

    def _set_selected(self, template_id: Optional[str]) -> None:
        if template_id == self.selected_id:
            return
        self.selected_id = template_id
        self.selectionChanged.emit(template_id)

    # --- Structural ----------------------------------------------------------

    def create(self, from_template: Optional[Template] = None) -> Optional[Template]:
        """New empty user template, or a copy of `from_template` with fresh section ids."""
        now = now_ms()
        if from_template is not None:
            template = Template(
                id=new_id(),
                is_system=False,
                title=f"{from_template.title} (Copy)",
                description=from_template.description,
                general_instructions=from_template.general_instructions,
                sections=tuple(s.with_changes(id=new_id()) for s in from_template.sections),
                created_at=now,
                updated_at=now,
            )
        else:
            template = Template(id=new_id(), title="New Template", created_at=now, updated_at=now)

        try:
            self.db.template_insert(template)
        except sqlite3.Error:
            logger.exception("failed to create template")
            return None

        self.templates.append(template)
        self.templatesChanged.emit()
        self._set_selected(template.id)
        return template

    def delete(self, template_id: str) -> bool:
        index = self.index_of(template_id)
        if index < 0 or self.templates[index].is_system:
            return False

        self.scheduler.cancel(template_id)
        try:
            self.db.template_delete(template_id)
        except sqlite3.Error:
            logger.exception("failed to delete template %s", template_id)
            return False

        del self.templates[index]
        self.templatesChanged.emit()
        if self.selected_id == template_id:
            self._set_selected(next_selection([t.id for t in self.templates], index))
        return True

    # --- Edits ---------------------------------------------------------------

    def update(self, template_id: str, **patch) -> Optional[Template]:
        unknown = set(patch) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"not editable on a template: {sorted(unknown)}")
        index = self.index_of(template_id)
        if index < 0:
            return None
        current = self.templates[index]
        if current.is_system:
            return None
        if "sections" in patch:
            patch["sections"] = _checked_sections(patch["sections"])

        updated = current.with_changes(updated_at=now_ms(current.updated_at), **patch)
        self.templates[index] = updated
        self.scheduler.schedule(updated)
        self.templateUpdated.emit(template_id)
        return updated

    def add_section(self, template_id: str, **fields) -> Optional[TemplateSection]:
        template = self.get(template_id)
        if template is None or template.is_system:
            return None
        fields.pop("id", None)
        section = TemplateSection().with_changes(**fields)
        self.update(template_id, sections=(*template.sections, section))
        return section

    def update_section(self, template_id: str, section_id: str, **patch) -> Optional[TemplateSection]:
        template = self.get(template_id)
        if template is None or template.is_system:
            return None
        i = template.section_index(section_id)
        if i < 0:
            return None
        patch.pop("id", None)
        section = template.sections[i].with_changes(**patch)
        sections = list(template.sections)
        sections[i] = section
        self.update(template_id, sections=sections)
        return section

    def remove_section(self, template_id: str, section_id: str) -> bool:
        template = self.get(template_id)
        if template is None or template.is_system:
            return False
        if template.section_index(section_id) < 0:
            return False
        self.update(template_id, sections=[s for s in template.sections if s.id != section_id])
        return True

    def move_section(self, template_id: str, index: int, direction: int) -> bool:
        """Swap the section at `index` with its neighbour (-1 up, +1 down)."""
        template = self.get(template_id)
        if template is None or template.is_system:
            return False
        target = index + direction
        if not (0 <= index < len(template.sections)) or not (0 <= target < len(template.sections)):
            return False
        sections = list(template.sections)
        sections[index], sections[target] = sections[target], sections[index]
        self.update(template_id, sections=sections)
        return True
