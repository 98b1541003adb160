from __future__ import annotations

import sqlite3

import pytest
from PySide6.QtCore import QCoreApplication, QEvent, QObject

from database.db import Database


@pytest.fixture(scope="session")
def qapp():
    # timers need an application object; created once per test session
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
    app.processEvents()


@pytest.fixture()
def owner(qapp):
    """Parent for every QObject a test builds; destroyed when the test ends."""
    obj = QObject()
    yield obj
    obj.deleteLater()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)


@pytest.fixture()
def db_path(tmp_path) -> str:
    return str(tmp_path / "test.sqlite3")


@pytest.fixture()
def db(db_path, qapp):
    d = Database(db_path)
    d.init()
    yield d
    d.close()


class RecordingWriter:
    """Stands in for a Database write method; remembers every snapshot it got."""

    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def __call__(self, snapshot):
        if self.fail:
            raise sqlite3.OperationalError("disk I/O error")
        self.calls.append(snapshot)


@pytest.fixture()
def writer():
    return RecordingWriter()


@pytest.fixture()
def failing_writer():
    return RecordingWriter(fail=True)
