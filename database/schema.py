# privacyscribe/database/schema.py
import sqlite3

LATEST_SCHEMA_VERSION = 2  # keep in sync with migrations.py

def ensure_schema(conn: sqlite3.Connection) -> None:
    """
    Create base schema if it doesn't exist (v1), but do not add new columns
    introduced by later versions. Migrations will handle upgrades.
    """
    cur = conn.cursor()

    # --- Notes ---
    # timestamps are epoch milliseconds, written by the app (not CURRENT_TIMESTAMP)
    cur.executescript("""
    CREATE TABLE IF NOT EXISTS notes (
        id            TEXT PRIMARY KEY NOT NULL,
        title         TEXT NOT NULL DEFAULT '',
        subjective    TEXT NOT NULL DEFAULT '',
        objective     TEXT NOT NULL DEFAULT '',
        assessment    TEXT NOT NULL DEFAULT '',
        plan          TEXT NOT NULL DEFAULT '',
        transcription TEXT NOT NULL DEFAULT '',
        created_at    INTEGER NOT NULL,
        updated_at    INTEGER NOT NULL
    );
    """)

    # --- Templates ---
    cur.executescript("""
    CREATE TABLE IF NOT EXISTS templates (
        id                   TEXT PRIMARY KEY NOT NULL,
        is_system            INTEGER NOT NULL DEFAULT 0,
        title                TEXT NOT NULL DEFAULT '',
        description          TEXT NOT NULL DEFAULT '',
        general_instructions TEXT NOT NULL DEFAULT '',
        sections             TEXT NOT NULL DEFAULT '[]',   -- JSON array of sections, in order
        created_at           INTEGER NOT NULL,
        updated_at           INTEGER NOT NULL
    );
    """)

    conn.commit()
