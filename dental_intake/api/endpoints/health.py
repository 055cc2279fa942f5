from fastapi import APIRouter, Depends
from dental_intake.api.deps import get_settings
from dental_intake.core.config import Settings
from dental_intake.schemas.appointment import HealthResponse
from dental_intake.services.appointment_store import utc_timestamp

router = APIRouter()

@router.get("", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(
        status="ok",
        timestamp=utc_timestamp(),
        port=settings.port,
        host=settings.host
    )
