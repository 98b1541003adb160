import logging
import sys
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

import config
from database.db import Database
from stores.notes import NotesStore
from stores.templates import TemplatesStore
from ui.main_window import MainWindow
from utils.log import setup_logging

logger = logging.getLogger(__name__)

def main():
    setup_logging(config.LOG_LEVEL)
    logger.info("starting %s%s", config.APP_NAME, " (dev mode)" if config.DEV_MODE else "")

    app = QApplication(sys.argv)
    app.setOrganizationName(config.ORG_NAME)
    app.setApplicationName(config.APP_NAME)

    db = Database(config.DB_PATH or config.default_db_path())
    db.init()

    notes = NotesStore(db)
    templates = TemplatesStore(db)
    notes.load()
    templates.load()

    last = QSettings(config.ORG_NAME, config.APP_NAME).value("last_note_id", "")
    if last:
        notes.select(str(last))

    # pending edits must land before the connection goes away
    app.aboutToQuit.connect(notes.scheduler.flush)
    app.aboutToQuit.connect(templates.scheduler.flush)
    app.aboutToQuit.connect(db.close)

    w = MainWindow(notes, templates, dev_mode=config.DEV_MODE)
    w.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
