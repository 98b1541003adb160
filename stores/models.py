from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)

SOAP_FIELDS = ("subjective", "objective", "assessment", "plan")


class SectionStyle(str, Enum):
    AUTO = "Auto"
    BULLET_LIST = "Bullet List"
    PARAGRAPH = "Paragraph"

    @classmethod
    def coerce(cls, value) -> "SectionStyle":
        try:
            return cls(value)
        except ValueError:
            return cls.AUTO


class DetailLevel(str, Enum):
    NORMAL = "Normal"
    HIGH = "High"

    @classmethod
    def coerce(cls, value) -> "DetailLevel":
        try:
            return cls(value)
        except ValueError:
            return cls.NORMAL


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class TemplateSection:
    title: str = ""
    style: SectionStyle = SectionStyle.AUTO
    detail_level: DetailLevel = DetailLevel.NORMAL
    instructions: str = ""
    id: str = field(default_factory=new_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "style": self.style.value,
            "detail_level": self.detail_level.value,
            "instructions": self.instructions,
        }

    def with_changes(self, **changes) -> "TemplateSection":
        if "style" in changes:
            changes["style"] = SectionStyle.coerce(changes["style"])
        if "detail_level" in changes:
            changes["detail_level"] = DetailLevel.coerce(changes["detail_level"])
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, d: dict) -> "TemplateSection":
        return cls(
            id=str(d.get("id") or new_id()),
            title=str(d.get("title") or ""),
            style=SectionStyle.coerce(d.get("style")),
            detail_level=DetailLevel.coerce(d.get("detail_level")),
            instructions=str(d.get("instructions") or ""),
        )


def sections_to_json(sections) -> str:
    return json.dumps([s.to_dict() for s in sections], ensure_ascii=False)


def sections_from_json(s: str, *, template_id: str | None = None) -> tuple[TemplateSection, ...]:
    """
    Rebuild the ordered section list from its stored blob.
    A blob that is not a JSON list yields no sections; bad items are skipped.
    """
    try:
        raw = json.loads(s or "[]")
    except (TypeError, ValueError):
        logger.warning("failed to parse template sections JSON (template %s)", template_id)
        return ()
    if not isinstance(raw, list):
        logger.warning("template sections JSON is not a list (template %s)", template_id)
        return ()
    out = []
    for item in raw:
        if isinstance(item, dict):
            out.append(TemplateSection.from_dict(item))
        else:
            logger.warning("skipping malformed section in template %s", template_id)
    return tuple(out)


@dataclass(frozen=True)
class Note:
    id: str
    title: str = ""
    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""
    transcription: str = ""
    template_id: Optional[str] = None
    created_at: int = 0   # epoch ms
    updated_at: int = 0   # epoch ms

    @classmethod
    def from_row(cls, row) -> "Note":
        keys = row.keys()
        return cls(
            id=row["id"],
            title=row["title"] or "",
            subjective=row["subjective"] or "",
            objective=row["objective"] or "",
            assessment=row["assessment"] or "",
            plan=row["plan"] or "",
            transcription=row["transcription"] or "",
            template_id=row["template_id"] if "template_id" in keys else None,
            created_at=int(row["created_at"]),
            updated_at=int(row["updated_at"]),
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title, SOAP fields and transcription."""
        q = (query or "").strip().lower()
        if not q:
            return True
        haystack = (self.title, *(getattr(self, f) for f in SOAP_FIELDS), self.transcription)
        return any(q in (h or "").lower() for h in haystack)

    def with_changes(self, **changes) -> "Note":
        return replace(self, **changes)


@dataclass(frozen=True)
class Template:
    id: str
    is_system: bool = False
    title: str = ""
    description: str = ""
    general_instructions: str = ""
    sections: tuple[TemplateSection, ...] = ()
    created_at: int = 0
    updated_at: int = 0

    @classmethod
    def from_row(cls, row) -> "Template":
        return cls(
            id=row["id"],
            is_system=int(row["is_system"] or 0) == 1,
            title=row["title"] or "",
            description=row["description"] or "",
            general_instructions=row["general_instructions"] or "",
            sections=sections_from_json(row["sections"], template_id=row["id"]),
            created_at=int(row["created_at"]),
            updated_at=int(row["updated_at"]),
        )

    def section_index(self, section_id: str) -> int:
        for i, s in enumerate(self.sections):
            if s.id == section_id:
                return i
        return -1

    def with_changes(self, **changes) -> "Template":
        if "sections" in changes:
            changes["sections"] = tuple(changes["sections"])
        return replace(self, **changes)
