import sqlite3

import pytest

from database.db import Database
from database.migrations import get_user_version
from database.schema import LATEST_SCHEMA_VERSION
from database.system_templates import SYSTEM_TEMPLATES
from stores.models import SectionStyle, Template


def _columns(db, table):
    return {r[1] for r in db.select(f"PRAGMA table_info({table})")}


def test_connection_is_opened_lazily_and_reused(db_path):
    d = Database(db_path)
    assert not d.is_open
    c1 = d.conn
    assert d.is_open
    assert d.conn is c1
    d.close()
    assert not d.is_open


def test_init_creates_tables_and_template_column(db):
    assert {"id", "title", "subjective", "objective", "assessment", "plan",
            "transcription", "template_id", "created_at", "updated_at"} <= _columns(db, "notes")
    assert {"id", "is_system", "title", "description", "general_instructions",
            "sections", "created_at", "updated_at"} <= _columns(db, "templates")
    assert get_user_version(db.conn) == LATEST_SCHEMA_VERSION


def test_seeding_is_idempotent(db_path, qapp):
    d = Database(db_path)
    assert d.init() == len(SYSTEM_TEMPLATES)
    assert d.init() == 0
    rows_before = [tuple(r) for r in d.template_list()]
    assert d.init() == 0
    rows_after = [tuple(r) for r in d.template_list()]
    assert rows_before == rows_after
    assert d.template_system_count() == len(SYSTEM_TEMPLATES)
    d.close()


def test_init_survives_reopen(db_path, qapp):
    d = Database(db_path)
    d.init()
    d.close()
    d2 = Database(db_path)
    assert d2.init() == 0
    assert d2.template_system_count() == len(SYSTEM_TEMPLATES)
    d2.close()


def test_legacy_notes_table_gets_template_column(db_path, qapp):
    conn = sqlite3.connect(db_path)
    conn.execute("""CREATE TABLE notes (
        id TEXT PRIMARY KEY NOT NULL, title TEXT NOT NULL DEFAULT '',
        subjective TEXT NOT NULL DEFAULT '', objective TEXT NOT NULL DEFAULT '',
        assessment TEXT NOT NULL DEFAULT '', plan TEXT NOT NULL DEFAULT '',
        transcription TEXT NOT NULL DEFAULT '',
        created_at INTEGER NOT NULL, updated_at INTEGER NOT NULL)""")
    conn.execute("INSERT INTO notes(id, title, created_at, updated_at) VALUES ('n1', 'old', 1, 1)")
    conn.commit()
    conn.close()

    d = Database(db_path)
    d.init()
    assert "template_id" in _columns(d, "notes")
    row = d.note_list()[0]
    assert row["title"] == "old"
    assert row["template_id"] is None
    d.close()


def test_template_column_already_present_is_not_fatal(db_path, qapp):
    d = Database(db_path)
    d.init()
    # pretend the version bump never happened: the column add runs again
    d.conn.execute("PRAGMA user_version = 1;")
    d.init()
    assert get_user_version(d.conn) == LATEST_SCHEMA_VERSION
    d.close()


def test_seeded_templates_have_structured_sections(db):
    by_id = {t.id: t for t in (Template.from_row(r) for r in db.template_list())}
    assert set(by_id) == {d.id for d in SYSTEM_TEMPLATES}

    soap = by_id["system-soap"]
    assert soap.is_system
    assert soap.general_instructions == ""
    assert [s.title for s in soap.sections] == ["Subjective", "Objective", "Assessment", "Plan"]
    for s in soap.sections:
        assert s.style in (SectionStyle.BULLET_LIST, SectionStyle.PARAGRAPH)
        assert not s.instructions.startswith("## ")
    # Subjective has several top-level "- " bullets
    assert soap.sections[0].style == SectionStyle.BULLET_LIST


def test_system_rows_are_not_rewritten_by_update_or_delete(db):
    row = db.select("SELECT * FROM templates WHERE id = ?", ("system-soap",))[0]
    t = Template.from_row(row).with_changes(title="hacked", sections=())
    db.template_update(t)
    db.template_delete("system-soap")
    after = db.select("SELECT * FROM templates WHERE id = ?", ("system-soap",))
    assert len(after) == 1
    assert tuple(after[0]) == tuple(row)


def test_execute_raises_and_rolls_back(db):
    with pytest.raises(sqlite3.Error):
        db.execute("INSERT INTO no_such_table VALUES (?)", (1,))
    # the connection is still usable
    assert db.select("SELECT 1 AS one")[0]["one"] == 1
