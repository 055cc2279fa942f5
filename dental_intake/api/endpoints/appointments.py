from fastapi import APIRouter, Depends
from dental_intake.api.deps import get_store
from dental_intake.core import messages
from dental_intake.core.errors import PersistenceError
from dental_intake.schemas.appointment import (
    AppointmentCreate,
    AppointmentCreateResponse,
    AppointmentListResponse,
    AppointmentStatusUpdate,
    AppointmentSummary,
    AppointmentUpdateResponse,
    MessageResponse,
)
from dental_intake.services.appointment_store import AppointmentStore

router = APIRouter()

# Plain def: store calls do blocking file writes, so they run in the threadpool
# and the store lock serializes them. Trailing-slash paths are accepted too.
@router.post("", response_model=AppointmentCreateResponse, status_code=201)
@router.post("/", response_model=AppointmentCreateResponse, status_code=201, include_in_schema=False)
def create_appointment(
    appointment_in: AppointmentCreate,
    store: AppointmentStore = Depends(get_store)
):
    """
    Accept a booking submission from the public form.
    """
    try:
        appointment = store.create(appointment_in.name, appointment_in.phone)
    except PersistenceError as e:
        raise PersistenceError(messages.APPOINTMENT_FAILED) from e

    return AppointmentCreateResponse(
        message=messages.APPOINTMENT_ACCEPTED,
        appointment=AppointmentSummary.model_validate(appointment)
    )

@router.get("", response_model=AppointmentListResponse)
@router.get("/", response_model=AppointmentListResponse, include_in_schema=False)
def list_appointments(
    store: AppointmentStore = Depends(get_store)
):
    """
    List all appointments in submission order (admin page).
    """
    appointments = store.list_all()
    return AppointmentListResponse(count=len(appointments), appointments=appointments)

@router.patch("/{appointment_id}", response_model=AppointmentUpdateResponse)
@router.patch("/{appointment_id}/", response_model=AppointmentUpdateResponse, include_in_schema=False)
def update_appointment_status(
    appointment_id: str,
    status_in: AppointmentStatusUpdate,
    store: AppointmentStore = Depends(get_store)
):
    """
    Set the status of an appointment (приём | отмена).
    """
    appointment = store.update_status(appointment_id, status_in.status)
    return AppointmentUpdateResponse(appointment=appointment)

@router.delete("/{appointment_id}", response_model=MessageResponse)
@router.delete("/{appointment_id}/", response_model=MessageResponse, include_in_schema=False)
def delete_appointment(
    appointment_id: str,
    store: AppointmentStore = Depends(get_store)
):
    store.delete(appointment_id)
    return MessageResponse(success=True, message=messages.APPOINTMENT_DELETED)
