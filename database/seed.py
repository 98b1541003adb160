import logging

from database.system_templates import SYSTEM_TEMPLATES
from stores.common import now_ms
from stores.models import Template
from utils.prompt import parse_prompt_sections

logger = logging.getLogger(__name__)

def seed_system_templates(db) -> int:
    """
    Insert the built-in templates unless any system template exists already.
    Returns how many were inserted.
    """
    if db.template_system_count() > 0:
        return 0

    now = now_ms()
    for d in SYSTEM_TEMPLATES:
        db.template_insert(Template(
            id=d.id,
            is_system=True,
            title=d.title,
            description=d.description,
            general_instructions="",
            sections=tuple(parse_prompt_sections(d.prompt)),
            created_at=now,
            updated_at=now,
        ))

    logger.info("seeded %d system templates", len(SYSTEM_TEMPLATES))
    return len(SYSTEM_TEMPLATES)
