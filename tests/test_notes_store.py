import sqlite3
from types import SimpleNamespace

import pytest
from PySide6.QtTest import QTest

import stores.common
from stores.models import Note
from stores.notes import NotesStore
from stores.save_scheduler import SaveScheduler

DELAY = 30


@pytest.fixture()
def store(db, owner):
    s = NotesStore(db, parent=owner)
    s.scheduler = SaveScheduler(db.note_update, delay_ms=DELAY, parent=s, name="note")
    s.load()
    return s


def _row(db, note_id):
    rows = db.select("SELECT * FROM notes WHERE id = ?", (note_id,))
    return rows[0] if rows else None


def test_create_inserts_row_and_selects_new_note(store, db):
    note = store.create()
    assert note is not None
    assert store.notes[0] is note
    assert store.selected_id == note.id
    assert note.created_at == note.updated_at
    assert (note.title, note.subjective, note.transcription, note.template_id) == ("", "", "", None)
    assert _row(db, note.id) is not None


def test_field_edits_are_debounced_into_one_write(store, db):
    note = store.create()
    for text in ("p", "pa", "pat", "pati", "patient"):
        store.update_field(note.id, "subjective", text)

    # memory is updated right away, disk only after the quiet period
    assert store.get(note.id).subjective == "patient"
    assert _row(db, note.id)["subjective"] == ""

    QTest.qWait(DELAY * 5)
    row = _row(db, note.id)
    assert row["subjective"] == "patient"
    assert row["updated_at"] == store.get(note.id).updated_at


def test_updated_at_never_goes_backwards(store, monkeypatch):
    note = store.create()
    seen = [note.updated_at]
    # wall clock jumps around, including backwards
    offsets = iter([5_000, 1_000, 9_000, 2_000])
    fake_time = SimpleNamespace(time=lambda: (note.created_at + next(offsets)) / 1000)
    monkeypatch.setattr(stores.common, "time", fake_time)

    store.update_title(note.id, "a")
    seen.append(store.get(note.id).updated_at)
    store.update_field(note.id, "plan", "b")
    seen.append(store.get(note.id).updated_at)
    store.update_transcription(note.id, "c")
    seen.append(store.get(note.id).updated_at)
    store.set_template(note.id, "system-soap")
    seen.append(store.get(note.id).updated_at)

    assert seen == sorted(seen)


def test_unknown_field_is_rejected(store):
    note = store.create()
    with pytest.raises(ValueError):
        store.update_field(note.id, "title", "x")


def test_delete_cancels_pending_write(store, db):
    note = store.create()
    store.update_title(note.id, "draft")
    assert store.scheduler.is_pending(note.id)

    assert store.delete(note.id) is True
    assert not store.scheduler.is_pending(note.id)
    QTest.qWait(DELAY * 5)
    assert _row(db, note.id) is None
    assert store.get(note.id) is None


def test_selection_after_deleting_middle_note(store):
    c = store.create()
    b = store.create()
    a = store.create()
    assert [n.id for n in store.notes] == [a.id, b.id, c.id]

    store.select(b.id)
    store.delete(b.id)
    assert store.selected_id == c.id


def test_selection_after_deleting_last_position_falls_back(store):
    b = store.create()
    a = store.create()
    store.select(b.id)
    store.delete(b.id)
    assert store.selected_id == a.id


def test_deleting_only_note_clears_selection(store):
    note = store.create()
    changes = []
    store.selectionChanged.connect(changes.append)
    store.delete(note.id)
    assert store.selected_id is None
    assert changes == [None]
    assert store.notes == []


def test_deleting_unselected_note_keeps_selection(store):
    b = store.create()
    a = store.create()
    store.select(a.id)
    store.delete(b.id)
    assert store.selected_id == a.id


def test_create_failure_leaves_memory_untouched(store, monkeypatch):
    existing = store.create()

    def boom(_note):
        raise sqlite3.OperationalError("database is locked")
    monkeypatch.setattr(store.db, "note_insert", boom)

    assert store.create() is None
    assert [n.id for n in store.notes] == [existing.id]
    assert store.selected_id == existing.id


def test_delete_failure_leaves_memory_untouched(store, monkeypatch):
    note = store.create()

    def boom(_id):
        raise sqlite3.OperationalError("database is locked")
    monkeypatch.setattr(store.db, "note_delete", boom)

    assert store.delete(note.id) is False
    assert store.get(note.id) is not None
    assert store.selected_id == note.id


def test_load_round_trips_saved_notes(store, db):
    a = store.create()
    store.update_title(a.id, "Back pain")
    store.update_field(a.id, "assessment", "mechanical")
    store.set_template(a.id, "system-soap")
    store.scheduler.flush()

    fresh = NotesStore(db, parent=store)
    assert fresh.load() is True
    loaded = fresh.get(a.id)
    assert loaded == store.get(a.id)
    assert fresh.selected_id == a.id


def test_load_failure_leaves_store_empty(db, owner, monkeypatch):
    s = NotesStore(db, parent=owner)

    def boom():
        raise sqlite3.OperationalError("no such table: notes")
    monkeypatch.setattr(db, "note_list", boom)

    assert s.load() is False
    assert s.notes == []
    assert s.selected_id is None


def test_append_transcription_joins_with_blank_line(store):
    note = store.create()
    store.append_transcription(note.id, "  first part ")
    store.append_transcription(note.id, "second part")
    store.append_transcription(note.id, "   ")
    assert store.get(note.id).transcription == "first part\n\nsecond part"


def test_search_matches_any_text_field(store):
    a = store.create()
    b = store.create()
    store.update_title(a.id, "Knee pain")
    store.update_transcription(b.id, "Patient reports a persistent COUGH")

    assert [n.id for n in store.search("cough")] == [b.id]
    assert [n.id for n in store.search("KNEE")] == [a.id]
    assert len(store.search("")) == 2


def test_edit_snapshots_are_not_mutated_later(store, writer):
    store.scheduler = SaveScheduler(writer, delay_ms=DELAY, parent=store)
    note = store.create()
    store.update_title(note.id, "one")
    first = store.get(note.id)
    store.update_title(note.id, "two")
    assert first.title == "one"
    assert isinstance(store.get(note.id), Note)
    QTest.qWait(DELAY * 5)
    assert [n.title for n in writer.calls] == ["two"]
