from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

import config

logger = logging.getLogger(__name__)


class SaveScheduler(QObject):
    """
    Debounced, per-entity writer.

    schedule() (re)starts a single-shot timer for the snapshot's id; when it
    fires, `writer(snapshot)` runs once with the latest snapshot for that id.
    Earlier snapshots for the same id are dropped, not batched.

    A failed write is logged and reported through `saveFailed`; it is not
    retried. The next schedule() for that id writes current data again.
    """

    saved = Signal(str)             # entity id
    saveFailed = Signal(str, str)   # entity id, error text

    def __init__(self, writer: Callable[[Any], None], delay_ms: Optional[int] = None,
                 parent: Optional[QObject] = None, name: str = "entity"):
        super().__init__(parent)
        self._writer = writer
        self._delay_ms = config.SAVE_DEBOUNCE_MS if delay_ms is None else int(delay_ms)
        self._name = name
        self._timers: dict[str, QTimer] = {}
        self._snapshots: dict[str, Any] = {}

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    # ---------- Public API ----------

    def schedule(self, snapshot, delay_ms: Optional[int] = None) -> None:
        entity_id = snapshot.id
        self._snapshots[entity_id] = snapshot

        timer = self._timers.get(entity_id)
        if timer is None:
            timer = QTimer(self)
            timer.setSingleShot(True)
            timer.timeout.connect(lambda eid=entity_id: self._fire(eid))
            self._timers[entity_id] = timer
        # start() on an active timer restarts it
        timer.start(self._delay_ms if delay_ms is None else int(delay_ms))

    def cancel(self, entity_id: str) -> bool:
        """Drop the pending write for `entity_id`. False if nothing was pending."""
        timer = self._timers.pop(entity_id, None)
        self._snapshots.pop(entity_id, None)
        if timer is None:
            return False
        timer.stop()
        timer.deleteLater()
        logger.debug("cancelled pending %s save %s", self._name, entity_id)
        return True

    def is_pending(self, entity_id: str) -> bool:
        return entity_id in self._timers

    def pending_ids(self) -> list[str]:
        return list(self._timers)

    def flush(self) -> int:
        """Write every pending snapshot now (e.g. on quit). Returns the count attempted."""
        ids = self.pending_ids()
        for entity_id in ids:
            self._fire(entity_id)
        return len(ids)

    # ---------- Internals ----------

    def _fire(self, entity_id: str) -> None:
        timer = self._timers.pop(entity_id, None)
        snapshot = self._snapshots.pop(entity_id, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()
        if snapshot is None:
            return
        try:
            self._writer(snapshot)
        except Exception as e:
            logger.exception("failed to save %s %s", self._name, entity_id)
            self.saveFailed.emit(entity_id, str(e))
            return
        logger.debug("%s %s saved", self._name, entity_id)
        self.saved.emit(entity_id)
