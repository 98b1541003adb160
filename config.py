"""
Global configuration for PrivacyScribe.
"""
import os
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_NAME = "PrivacyScribe"
ORG_NAME = "PrivacyScribe"

# Toggle development mode features
DEV_MODE = os.getenv("PRIVACYSCRIBE_DEV", "0").strip().lower() in ("1", "true", "yes")

# Quiet period before an edited note/template is written to disk
SAVE_DEBOUNCE_MS = int(os.getenv("PRIVACYSCRIBE_SAVE_DEBOUNCE_MS", "500"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def default_db_path() -> str:
    """privacyscribe.db inside the platform app-data directory."""
    base = QStandardPaths.writableLocation(QStandardPaths.AppDataLocation)
    if not base:
        base = str(Path.home() / f".{APP_NAME.lower()}")
    Path(base).mkdir(parents=True, exist_ok=True)
    return str(Path(base) / "privacyscribe.db")


# Database path selection
if DEV_MODE:
    DB_PATH = ":memory:"  # In-memory DB for quick testing
else:
    # None: app.py resolves default_db_path() once the QApplication is named
    DB_PATH = os.getenv("PRIVACYSCRIBE_DB")
