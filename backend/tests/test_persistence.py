"""
Tests for best-effort persistence of chat exchanges.
"""
import asyncio

from homeo_chat.services.persistence import PersistenceRecorder

from conftest import RecordingStore


def test_records_user_then_assistant():
    store = RecordingStore()
    recorder = PersistenceRecorder(store)

    asyncio.run(recorder.record_exchange("c-1", "Ich habe Kopfschmerzen", "Seit wann?"))

    assert store.append_attempts == [
        ("c-1", "user", "Ich habe Kopfschmerzen"),
        ("c-1", "assistant", "Seit wann?"),
    ]
    assert recorder.snapshot() == {"writes": 2, "failures": 0}


def test_failures_are_counted_not_raised(caplog):
    store = RecordingStore(fail_appends=True)
    recorder = PersistenceRecorder(store)

    asyncio.run(recorder.record_exchange("c-1", "Hallo", "Hallo!"))

    assert len(store.append_attempts) == 2
    assert recorder.snapshot() == {"writes": 0, "failures": 2}
    assert "c-1" in caplog.text


def test_missing_user_turn_records_only_reply():
    store = RecordingStore()
    recorder = PersistenceRecorder(store)

    asyncio.run(recorder.record_exchange("c-1", None, "Hallo!"))

    assert store.append_attempts == [("c-1", "assistant", "Hallo!")]
