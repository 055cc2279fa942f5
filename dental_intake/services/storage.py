import json
import logging
import os
import stat
import tempfile
from typing import List, Sequence

from pydantic import ValidationError

from dental_intake.core.errors import PersistenceError
from dental_intake.models.appointment import Appointment

logger = logging.getLogger(__name__)

# os.umask can only be read by setting it
_UMASK = os.umask(0)
os.umask(_UMASK)

class AppointmentFileStorage:
    """
    Keeps the whole appointment collection in a single JSON file.
    Every save rewrites the file; the write goes through a temporary file
    and os.replace so readers never see a half-written collection.
    """
    def __init__(self, path: str):
        self.path = os.path.abspath(path)

    def load(self) -> List[Appointment]:
        """Returns the stored appointments, or an empty list if the file is missing or unreadable."""
        if not os.path.exists(self.path):
            logger.info(f"No appointments file at {self.path}, starting empty")
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading appointments from {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Error loading appointments from {self.path}: expected a JSON array, got {type(data).__name__}")
            return []

        appointments = []
        for index, record in enumerate(data):
            try:
                appointments.append(Appointment.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping malformed appointment #{index} in {self.path}: {e.error_count()} error(s)")
        return appointments

    def _file_mode(self) -> int:
        """Mode of the existing file, or the umask default for a new one."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return 0o666 & ~_UMASK

    def save(self, appointments: Sequence[Appointment]) -> None:
        """Atomically overwrites the file with the full collection."""
        payload = json.dumps(
            [appointment.to_record() for appointment in appointments],
            ensure_ascii=False,
            indent=2
        )
        directory = os.path.dirname(self.path)

        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".appointments-", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                # mkstemp creates 0600 files
                os.chmod(tmp_path, self._file_mode())
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error saving appointments to {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError() from e
