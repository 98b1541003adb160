from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class TranscriptionError(RuntimeError):
    """Recording or speech-to-text failed."""


class Transcriber(Protocol):
    """Audio capture + local speech-to-text engine."""

    def start_recording(self) -> None: ...

    def stop_recording(self) -> str:
        """Stop capture; returns the path of the recorded audio file."""
        ...

    def transcribe_and_delete(self, path: str,
                              progress: Optional[Callable[[int], None]] = None) -> str:
        """
        Transcribe the file at `path` and remove it. `progress` receives
        download percentages while a model is fetched the first time.
        """
        ...


class RecordingSession(QObject):
    """
    Record / stop / transcribe cycle driven by a single toggle.

    States: "idle" -> "recording" -> "transcribing" -> "idle".
    Failures are reported once through `failed` and never retried.
    """

    IDLE, RECORDING, TRANSCRIBING = "idle", "recording", "transcribing"

    stateChanged = Signal(str)
    transcriptionReady = Signal(str)
    downloadProgress = Signal(int)
    failed = Signal(str)

    def __init__(self, transcriber: Optional[Transcriber] = None, parent=None):
        super().__init__(parent)
        self.transcriber = transcriber
        self.state = self.IDLE

    @property
    def available(self) -> bool:
        return self.transcriber is not None

    def toggle(self) -> None:
        if self.state == self.RECORDING:
            self._stop_and_transcribe()
        elif self.state == self.IDLE:
            self._start()

    def _set_state(self, state: str) -> None:
        if state != self.state:
            self.state = state
            self.stateChanged.emit(state)

    def _start(self) -> None:
        if self.transcriber is None:
            self.failed.emit("No transcription engine configured")
            return
        try:
            self.transcriber.start_recording()
        except Exception as e:
            logger.exception("could not start recording")
            self.failed.emit(f"Could not access the microphone: {e}")
            return
        self._set_state(self.RECORDING)

    def _stop_and_transcribe(self) -> None:
        self._set_state(self.TRANSCRIBING)
        try:
            path = self.transcriber.stop_recording()
            text = self.transcriber.transcribe_and_delete(path, progress=self.downloadProgress.emit)
        except Exception as e:
            logger.exception("transcription failed")
            self.failed.emit(f"Transcription failed: {e}")
            return
        finally:
            self._set_state(self.IDLE)

        text = (text or "").strip()
        if text:
            self.transcriptionReady.emit(text)
