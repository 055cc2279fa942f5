from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from dental_intake.models.appointment import Appointment

class AppointmentCreate(BaseModel):
    # Presence and shape are checked by the store so the client gets a specific message
    name: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

class AppointmentStatusUpdate(BaseModel):
    status: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

class AppointmentSummary(BaseModel):
    id: str
    name: str
    phone: str

    model_config = ConfigDict(from_attributes=True)

class AppointmentCreateResponse(BaseModel):
    success: bool = True
    message: str
    appointment: AppointmentSummary

class AppointmentListResponse(BaseModel):
    success: bool = True
    count: int
    appointments: List[Appointment]

class AppointmentUpdateResponse(BaseModel):
    success: bool = True
    appointment: Appointment

class MessageResponse(BaseModel):
    success: bool
    message: str

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    port: int
    host: str
