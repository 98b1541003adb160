import pytest

from utils.transcription import RecordingSession, TranscriptionError


class FakeTranscriber:
    def __init__(self, text="  hello there \n", fail_on=None):
        self.text = text
        self.fail_on = fail_on
        self.calls = []

    def start_recording(self):
        self.calls.append("start")
        if self.fail_on == "start":
            raise TranscriptionError("no microphone")

    def stop_recording(self):
        self.calls.append("stop")
        return "/tmp/recording.wav"

    def transcribe_and_delete(self, path, progress=None):
        self.calls.append(("transcribe", path))
        if progress is not None:
            progress(50)
            progress(100)
        if self.fail_on == "transcribe":
            raise TranscriptionError("model crashed")
        return self.text


@pytest.fixture()
def events(owner):
    return {"state": [], "text": [], "progress": [], "failed": []}


def _session(transcriber, events, owner):
    s = RecordingSession(transcriber, parent=owner)
    s.stateChanged.connect(events["state"].append)
    s.transcriptionReady.connect(events["text"].append)
    s.downloadProgress.connect(events["progress"].append)
    s.failed.connect(events["failed"].append)
    return s


def test_toggle_records_then_transcribes(events, owner):
    fake = FakeTranscriber()
    s = _session(fake, events, owner)

    s.toggle()
    assert s.state == RecordingSession.RECORDING
    s.toggle()

    assert s.state == RecordingSession.IDLE
    assert events["state"] == ["recording", "transcribing", "idle"]
    assert events["text"] == ["hello there"]
    assert events["progress"] == [50, 100]
    assert fake.calls == ["start", "stop", ("transcribe", "/tmp/recording.wav")]


def test_blank_transcription_is_not_delivered(events, owner):
    s = _session(FakeTranscriber(text="   \n "), events, owner)
    s.toggle()
    s.toggle()
    assert events["text"] == []
    assert events["failed"] == []
    assert s.state == RecordingSession.IDLE


def test_transcription_failure_reports_once_and_returns_to_idle(events, owner):
    s = _session(FakeTranscriber(fail_on="transcribe"), events, owner)
    s.toggle()
    s.toggle()
    assert len(events["failed"]) == 1
    assert "model crashed" in events["failed"][0]
    assert events["text"] == []
    assert s.state == RecordingSession.IDLE


def test_start_failure_stays_idle(events, owner):
    s = _session(FakeTranscriber(fail_on="start"), events, owner)
    s.toggle()
    assert s.state == RecordingSession.IDLE
    assert events["state"] == []
    assert len(events["failed"]) == 1


def test_without_transcriber_toggle_fails(events, owner):
    s = _session(None, events, owner)
    assert not s.available
    s.toggle()
    assert s.state == RecordingSession.IDLE
    assert events["failed"] == ["No transcription engine configured"]
