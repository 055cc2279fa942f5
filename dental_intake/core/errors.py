from dental_intake.core import messages


class AppointmentError(Exception):
    """
    Base class for errors that map onto a JSON error envelope.
    `message` is safe to show to the client; `status_code` is the HTTP status.
    """
    status_code = 500

    def __init__(self, message: str = messages.SERVER_ERROR):
        super().__init__(message)
        self.message = message


class InvalidAppointmentError(AppointmentError):
    status_code = 400


class InvalidStatusError(InvalidAppointmentError):
    def __init__(self, message: str = messages.INVALID_STATUS):
        super().__init__(message)


class AppointmentNotFoundError(AppointmentError):
    status_code = 404

    def __init__(self, appointment_id: str):
        super().__init__(messages.APPOINTMENT_NOT_FOUND)
        self.appointment_id = appointment_id


class PersistenceError(AppointmentError):
    """The durable store could not be written. Details stay server-side."""
    status_code = 500


class ApiEndpointNotFoundError(AppointmentError):
    status_code = 404

    def __init__(self, message: str = messages.API_NOT_FOUND):
        super().__init__(message)
