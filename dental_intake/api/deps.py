from fastapi import Request
from dental_intake.core.config import Settings
from dental_intake.services.appointment_store import AppointmentStore

def get_store(request: Request) -> AppointmentStore:
    """
    Returns the appointment store built by create_app.
    """
    return request.app.state.store

def get_settings(request: Request) -> Settings:
    return request.app.state.settings
