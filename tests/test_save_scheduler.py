import logging
from dataclasses import dataclass

from PySide6.QtCore import QCoreApplication, QEvent, QObject
from PySide6.QtTest import QTest

from stores.save_scheduler import SaveScheduler

DELAY = 30


@dataclass(frozen=True)
class Snap:
    id: str
    value: int = 0


def test_burst_collapses_to_one_write_with_last_snapshot(owner, writer):
    s = SaveScheduler(writer, delay_ms=DELAY, parent=owner)
    for i in range(5):
        s.schedule(Snap("a", i))
    assert writer.calls == []
    assert s.is_pending("a")

    QTest.qWait(DELAY * 5)
    assert writer.calls == [Snap("a", 4)]
    assert not s.is_pending("a")


def test_rescheduling_restarts_the_quiet_period(owner, writer):
    s = SaveScheduler(writer, delay_ms=300, parent=owner)
    s.schedule(Snap("a", 1))
    QTest.qWait(200)
    s.schedule(Snap("a", 2))
    QTest.qWait(200)
    # 400ms since the first call, only 200ms since the last
    assert writer.calls == []
    QTest.qWait(400)
    assert writer.calls == [Snap("a", 2)]


def test_ids_are_debounced_independently(owner, writer):
    s = SaveScheduler(writer, delay_ms=DELAY, parent=owner)
    s.schedule(Snap("a", 1))
    s.schedule(Snap("b", 1))
    s.schedule(Snap("a", 2))
    QTest.qWait(DELAY * 5)
    assert sorted(writer.calls, key=lambda x: x.id) == [Snap("a", 2), Snap("b", 1)]


def test_cancel_prevents_the_write(owner, writer):
    s = SaveScheduler(writer, delay_ms=DELAY, parent=owner)
    s.schedule(Snap("a", 1))
    assert s.cancel("a") is True
    QTest.qWait(DELAY * 5)
    assert writer.calls == []
    assert s.cancel("a") is False


def test_cancel_after_fire_is_a_no_op(owner, writer):
    s = SaveScheduler(writer, delay_ms=DELAY, parent=owner)
    s.schedule(Snap("a", 1))
    QTest.qWait(DELAY * 5)
    assert s.cancel("a") is False
    assert writer.calls == [Snap("a", 1)]


def test_write_failure_is_logged_and_swallowed(owner, failing_writer, caplog):
    s = SaveScheduler(failing_writer, delay_ms=DELAY, name="note", parent=owner)
    failures = []
    s.saveFailed.connect(lambda eid, err: failures.append((eid, err)))

    with caplog.at_level(logging.ERROR, logger="stores.save_scheduler"):
        s.schedule(Snap("a", 1))
        QTest.qWait(DELAY * 5)

    assert failures and failures[0][0] == "a"
    assert "failed to save note a" in caplog.text
    assert not s.is_pending("a")

    # no automatic retry
    QTest.qWait(DELAY * 5)
    assert len(failures) == 1


def test_next_edit_after_failure_writes_again(owner, failing_writer):
    s = SaveScheduler(failing_writer, delay_ms=DELAY, parent=owner)
    s.schedule(Snap("a", 1))
    QTest.qWait(DELAY * 5)

    failing_writer.fail = False
    s.schedule(Snap("a", 2))
    QTest.qWait(DELAY * 5)
    assert failing_writer.calls == [Snap("a", 2)]


def test_flush_writes_pending_immediately(owner, writer):
    s = SaveScheduler(writer, delay_ms=10_000, parent=owner)
    saved = []
    s.saved.connect(saved.append)
    s.schedule(Snap("a", 1))
    s.schedule(Snap("b", 7))

    assert s.flush() == 2
    assert sorted(saved) == ["a", "b"]
    assert s.pending_ids() == []
    QTest.qWait(20)
    assert len(writer.calls) == 2


def test_per_call_delay_override(owner, writer):
    s = SaveScheduler(writer, delay_ms=10_000, parent=owner)
    s.schedule(Snap("a", 1), delay_ms=DELAY)
    QTest.qWait(DELAY * 5)
    assert writer.calls == [Snap("a", 1)]


def test_destroying_the_parent_drops_pending_timers(qapp, writer):
    parent = QObject()
    s = SaveScheduler(writer, delay_ms=DELAY, parent=parent)
    s.schedule(Snap("a", 1))

    parent.deleteLater()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)
    QTest.qWait(DELAY * 5)
    assert writer.calls == []
