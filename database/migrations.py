import logging
import sqlite3

from .schema import LATEST_SCHEMA_VERSION

logger = logging.getLogger(__name__)

def get_user_version(conn: sqlite3.Connection) -> int:
    return conn.execute("PRAGMA user_version;").fetchone()[0] or 0

def set_user_version(conn: sqlite3.Connection, v: int) -> None:
    conn.execute(f"PRAGMA user_version = {v};")

def _ensure_indexes(conn: sqlite3.Connection) -> None:
    c = conn.cursor()
    # Sidebar ordering (newest first)
    c.execute("""CREATE INDEX IF NOT EXISTS idx_notes_created
                 ON notes(created_at)""")
    # Template list: system first, then creation order
    c.execute("""CREATE INDEX IF NOT EXISTS idx_templates_system_created
                 ON templates(is_system, created_at)""")
    conn.commit()

def _safe_add_column(cur: sqlite3.Cursor, table: str, col: str, decl: str) -> bool:
    """Add a column unless it is already there. Returns True if it was added."""
    cur.execute(f"PRAGMA table_info({table})")
    cols = {r[1] for r in cur.fetchall()}
    if col in cols:
        return False
    try:
        cur.execute(f"ALTER TABLE {table} ADD COLUMN {col} {decl}")
    except sqlite3.OperationalError as e:
        # another writer got there first; the column exists either way
        if "duplicate column" not in str(e).lower():
            raise
        return False
    return True

def upgrade(conn: sqlite3.Connection) -> None:
    """
    Upgrade DB from current PRAGMA user_version to LATEST_SCHEMA_VERSION.
    Each migration is idempotent; additive ones are re-checked on every start.
    """
    cur_ver = get_user_version(conn)

    with conn:
        # v0 → v1: base schema comes from ensure_schema()
        if cur_ver == 0:
            set_user_version(conn, 1)
            cur_ver = 1

        # v1 → v2: notes.template_id (template used for generation)
        _migration_v2(conn)
        if cur_ver < 2:
            set_user_version(conn, 2)
            cur_ver = 2

    if cur_ver != LATEST_SCHEMA_VERSION:
        logger.warning("schema at v%s, expected v%s", cur_ver, LATEST_SCHEMA_VERSION)

    _ensure_indexes(conn)

## Migrations ##
def _migration_v2(conn: sqlite3.Connection) -> None:
    """Add nullable template reference to notes."""
    c = conn.cursor()
    if _safe_add_column(c, "notes", "template_id", "TEXT"):
        logger.info("migration: added notes.template_id")
