"""Shared test fixtures."""
import itertools

import pytest
from fastapi.testclient import TestClient

from dental_intake.core.config import Settings
from dental_intake.main import create_app
from dental_intake.services.appointment_store import AppointmentStore
from dental_intake.services.storage import AppointmentFileStorage


@pytest.fixture
def appointments_file(tmp_path):
    return tmp_path / "data" / "appointments.json"


@pytest.fixture
def storage(appointments_file) -> AppointmentFileStorage:
    return AppointmentFileStorage(str(appointments_file))


@pytest.fixture
def store(storage) -> AppointmentStore:
    """Store with predictable ids and timestamps."""
    counter = itertools.count(1)
    return AppointmentStore(
        storage,
        id_factory=lambda: f"appt-{next(counter)}",
        clock=lambda: "2025-03-01T09:30:00.000Z"
    )


@pytest.fixture
def settings(tmp_path, appointments_file) -> Settings:
    static_dir = tmp_path / "public_html"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>Запись на приём</h1>", encoding="utf-8")
    (static_dir / "admin.html").write_text("<h1>Админ</h1>", encoding="utf-8")
    return Settings(
        port=8080,
        host="127.0.0.1",
        appointments_file=str(appointments_file),
        static_dir=str(static_dir),
        _env_file=None
    )


@pytest.fixture
def client(settings, store):
    """Create FastAPI test client."""
    app = create_app(settings=settings, store=store)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
