from __future__ import annotations
import logging
import sqlite3
from pathlib import Path
from typing import Optional, Sequence

from database.schema import ensure_schema
from database.migrations import upgrade
from database.seed import seed_system_templates
from stores.models import sections_to_json

logger = logging.getLogger(__name__)

NOTE_COLUMNS = ("id", "title", "subjective", "objective", "assessment", "plan",
                "transcription", "template_id", "created_at", "updated_at")


class Database:
    """
    Store handle for the local SQLite file.

    The connection is opened on first use and reused for the lifetime of the
    object. Every write commits immediately; sqlite3.Error propagates to the
    caller.
    """

    def __init__(self, path: str | Path):
        self.path = str(path)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = self._open()
        return self._conn

    def _open(self) -> sqlite3.Connection:
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        if self.path != ":memory:":
            conn.execute("PRAGMA journal_mode = WAL;")
        conn.execute("PRAGMA synchronous = NORMAL;")
        logger.debug("opened database %s", self.path)
        return conn

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def init(self) -> int:
        """
        Schema, migrations, then built-in templates. Safe on every start.
        Returns the number of system templates seeded (0 once seeded).
        """
        # 1) Base schema (v1)
        ensure_schema(self.conn)
        # 2) Migrations to latest
        upgrade(self.conn)
        # 3) Built-in templates, once
        seeded = seed_system_templates(self)
        logger.info("database initialised (%s)", self.path)
        return seeded

    # ---- Generic
    def execute(self, sql: str, params: Sequence = ()) -> None:
        c = self.conn.cursor()
        try:
            c.execute(sql, tuple(params))
            self.conn.commit()
        except sqlite3.Error:
            self.conn.rollback()
            raise

    def select(self, sql: str, params: Sequence = ()) -> list[sqlite3.Row]:
        c = self.conn.cursor()
        c.execute(sql, tuple(params))
        return c.fetchall()

    # ---- Notes
    def note_list(self) -> list[sqlite3.Row]:
        return self.select("""SELECT id, title, subjective, objective, assessment, plan,
                                     transcription, template_id, created_at, updated_at
                              FROM notes ORDER BY created_at DESC, rowid DESC""")

    def note_insert(self, note) -> None:
        self.execute(f"""INSERT INTO notes({", ".join(NOTE_COLUMNS)})
                         VALUES ({", ".join("?" * len(NOTE_COLUMNS))})""",
                     (note.id, note.title, note.subjective, note.objective,
                      note.assessment, note.plan, note.transcription,
                      note.template_id, note.created_at, note.updated_at))

    def note_update(self, note) -> None:
        self.execute("""UPDATE notes
                        SET title=?, subjective=?, objective=?, assessment=?, plan=?,
                            transcription=?, template_id=?, updated_at=?
                        WHERE id=?""",
                     (note.title, note.subjective, note.objective, note.assessment,
                      note.plan, note.transcription, note.template_id,
                      note.updated_at, note.id))

    def note_delete(self, note_id: str) -> None:
        self.execute("DELETE FROM notes WHERE id=?", (note_id,))

    # ---- Templates
    def template_list(self) -> list[sqlite3.Row]:
        return self.select("""SELECT id, is_system, title, description, general_instructions,
                                     sections, created_at, updated_at
                              FROM templates ORDER BY is_system DESC, created_at ASC, rowid ASC""")

    def template_system_count(self) -> int:
        r = self.select("SELECT COUNT(*) AS count FROM templates WHERE is_system = 1")
        return int(r[0]["count"] or 0) if r else 0

    def template_insert(self, template) -> None:
        self.execute("""INSERT INTO templates
                          (id, is_system, title, description, general_instructions,
                           sections, created_at, updated_at)
                        VALUES (?,?,?,?,?,?,?,?)""",
                     (template.id, 1 if template.is_system else 0, template.title,
                      template.description, template.general_instructions,
                      sections_to_json(template.sections),
                      template.created_at, template.updated_at))

    def template_update(self, template) -> None:
        # system rows are never rewritten
        self.execute("""UPDATE templates
                        SET title=?, description=?, general_instructions=?,
                            sections=?, updated_at=?
                        WHERE id=? AND is_system = 0""",
                     (template.title, template.description, template.general_instructions,
                      sections_to_json(template.sections), template.updated_at,
                      template.id))

    def template_delete(self, template_id: str) -> None:
        self.execute("DELETE FROM templates WHERE id=? AND is_system = 0", (template_id,))
