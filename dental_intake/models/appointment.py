from pydantic import BaseModel, ConfigDict, Field
import enum

class AppointmentStatus(str, enum.Enum):
    # Wire values are shared with the admin page and existing appointment files
    PENDING = "приём"
    CANCELLED = "отмена"

class Appointment(BaseModel):
    id: str
    name: str
    phone: str
    created_at: str = Field(alias="createdAt")
    status: AppointmentStatus = AppointmentStatus.PENDING

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_record(self) -> dict:
        """Serializable form with the persisted field names."""
        return self.model_dump(mode="json", by_alias=True)
