import logging
import re
import threading
import uuid
from datetime import datetime
from typing import Callable, List, Optional

import pytz

from dental_intake.core import messages
from dental_intake.core.errors import (
    AppointmentNotFoundError,
    InvalidAppointmentError,
    InvalidStatusError,
)
from dental_intake.models.appointment import Appointment, AppointmentStatus
from dental_intake.services.storage import AppointmentFileStorage

logger = logging.getLogger(__name__)

# Optional leading +, then at least 10 digits, spaces, hyphens or parentheses
PHONE_PATTERN = re.compile(r"\+?[0-9\s\-()]{10,}")


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(pytz.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AppointmentStore:
    """
    In-memory appointment collection mirrored to an AppointmentFileStorage.

    Mutations run under a single lock and are copy-on-write: the new
    collection is saved first and only then becomes the current one, so a
    failed save leaves both memory and file as they were.
    """
    def __init__(
        self,
        storage: AppointmentFileStorage,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], str]] = None
    ):
        self.storage = storage
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)
        self._now = clock or utc_timestamp
        self._lock = threading.Lock()
        self._appointments: List[Appointment] = storage.load()
        logger.info(f"Loaded {len(self._appointments)} appointments from {storage.path}")

    def __len__(self) -> int:
        return len(self._appointments)

    def _commit(self, appointments: List[Appointment]) -> None:
        self.storage.save(appointments)
        self._appointments = appointments

    def _index_of(self, appointment_id: str) -> int:
        for index, appointment in enumerate(self._appointments):
            if appointment.id == appointment_id:
                return index
        raise AppointmentNotFoundError(appointment_id)

    def _unique_id(self) -> str:
        existing = {appointment.id for appointment in self._appointments}
        appointment_id = self._new_id()
        while appointment_id in existing:
            appointment_id = self._new_id()
        return appointment_id

    def create(self, name: Optional[str], phone: Optional[str]) -> Appointment:
        name = (name or "").strip()
        phone = (phone or "").strip()

        if not name or not phone:
            raise InvalidAppointmentError(messages.FILL_ALL_FIELDS)
        if not PHONE_PATTERN.fullmatch(phone):
            raise InvalidAppointmentError(messages.INVALID_PHONE)

        with self._lock:
            appointment = Appointment(
                id=self._unique_id(),
                name=name,
                phone=phone,
                created_at=self._now(),
                status=AppointmentStatus.PENDING
            )
            self._commit(self._appointments + [appointment])

        logger.info(f"New appointment: {appointment.to_record()}")
        return appointment

    def list_all(self) -> List[Appointment]:
        with self._lock:
            return list(self._appointments)

    def update_status(self, appointment_id: str, status: Optional[str]) -> Appointment:
        try:
            new_status = AppointmentStatus(status)
        except ValueError:
            raise InvalidStatusError()

        with self._lock:
            index = self._index_of(appointment_id)
            updated = self._appointments[index].model_copy(update={"status": new_status})
            appointments = list(self._appointments)
            appointments[index] = updated
            self._commit(appointments)

        logger.info(f"Appointment {appointment_id} status set to {new_status.value}")
        return updated

    def delete(self, appointment_id: str) -> Appointment:
        with self._lock:
            index = self._index_of(appointment_id)
            removed = self._appointments[index]
            self._commit(self._appointments[:index] + self._appointments[index + 1:])

        logger.info(f"Appointment {appointment_id} deleted")
        return removed
