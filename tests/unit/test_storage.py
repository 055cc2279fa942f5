"""Test JSON file persistence of appointments."""
import json
import os
import stat

import pytest

from dental_intake.core.errors import PersistenceError
from dental_intake.models.appointment import Appointment, AppointmentStatus
from dental_intake.services.storage import AppointmentFileStorage


def make_appointment(appointment_id="1", status=AppointmentStatus.PENDING) -> Appointment:
    return Appointment(
        id=appointment_id,
        name="Иван Петров",
        phone="+7 (900) 123-45-67",
        created_at="2025-03-01T09:30:00.000Z",
        status=status
    )


def test_load_missing_file_returns_empty(storage, appointments_file):
    assert not appointments_file.exists()
    assert storage.load() == []


def test_load_corrupted_file_returns_empty(storage, appointments_file):
    appointments_file.parent.mkdir(parents=True)
    appointments_file.write_text("{not json", encoding="utf-8")

    assert storage.load() == []


def test_load_non_array_returns_empty(storage, appointments_file):
    appointments_file.parent.mkdir(parents=True)
    appointments_file.write_text('{"id": "1"}', encoding="utf-8")

    assert storage.load() == []


def test_load_skips_malformed_records(storage, appointments_file):
    appointments_file.parent.mkdir(parents=True)
    records = [
        make_appointment("1").to_record(),
        {"id": "2", "name": "Без телефона"},
        {**make_appointment("3").to_record(), "status": "unknown"},
    ]
    appointments_file.write_text(json.dumps(records), encoding="utf-8")

    loaded = storage.load()

    assert [a.id for a in loaded] == ["1"]


def test_save_then_load_round_trip(storage):
    appointments = [
        make_appointment("1"),
        make_appointment("2", status=AppointmentStatus.CANCELLED),
    ]

    storage.save(appointments)

    assert storage.load() == appointments


def test_save_writes_pretty_json_with_record_field_names(storage, appointments_file):
    storage.save([make_appointment("1")])

    text = appointments_file.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert "Иван Петров" in text
    assert json.loads(text) == [{
        "id": "1",
        "name": "Иван Петров",
        "phone": "+7 (900) 123-45-67",
        "createdAt": "2025-03-01T09:30:00.000Z",
        "status": "приём"
    }]


def test_save_leaves_no_temp_files(storage, appointments_file):
    storage.save([make_appointment("1")])
    storage.save([])

    assert os.listdir(appointments_file.parent) == ["appointments.json"]
    assert json.loads(appointments_file.read_text(encoding="utf-8")) == []


def test_save_failure_raises_and_keeps_previous_file(storage, appointments_file, monkeypatch):
    storage.save([make_appointment("1")])
    before = appointments_file.read_bytes()

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", broken_replace)

    with pytest.raises(PersistenceError):
        storage.save([make_appointment("1"), make_appointment("2")])

    assert appointments_file.read_bytes() == before
    assert os.listdir(appointments_file.parent) == ["appointments.json"]


def test_save_keeps_existing_file_mode(storage, appointments_file):
    storage.save([make_appointment("1")])
    os.chmod(appointments_file, 0o644)

    storage.save([make_appointment("1"), make_appointment("2")])

    assert stat.S_IMODE(os.stat(appointments_file).st_mode) == 0o644


def test_save_new_file_follows_umask(storage, appointments_file):
    current = os.umask(0o022)
    os.umask(current)

    storage.save([make_appointment("1")])

    assert stat.S_IMODE(os.stat(appointments_file).st_mode) == 0o666 & ~current
