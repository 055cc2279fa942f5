from fastapi import APIRouter
from dental_intake.api.endpoints import appointments, health
from dental_intake.core.errors import ApiEndpointNotFoundError

api_router = APIRouter()
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(health.router, prefix="/health", tags=["health"])

# Must stay last: anything else under /api is answered here, not by the static mount
@api_router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False
)
async def api_not_found(path: str):
    raise ApiEndpointNotFoundError()
