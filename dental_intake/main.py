import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from dental_intake.api.api import api_router
from dental_intake.core import messages
from dental_intake.core.config import Settings, settings as default_settings
from dental_intake.core.errors import AppointmentError
from dental_intake.core.logging import setup_logging
from dental_intake.services.appointment_store import AppointmentStore
from dental_intake.services.storage import AppointmentFileStorage

logger = logging.getLogger(__name__)

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    base_url = f"http://{settings.host}:{settings.port}"
    logger.info("=" * 50)
    logger.info(f"Server is running on {base_url}")
    logger.info(f"API: {base_url}/api/appointments")
    logger.info(f"Admin: {base_url}/admin")
    logger.info(f"Health: {base_url}/api/health")
    logger.info(f"Static files: {os.path.abspath(settings.static_dir)}")
    logger.info(f"Appointments file: {app.state.store.storage.path}")
    logger.info(f"Loaded {len(app.state.store)} appointments")
    logger.info("=" * 50)
    yield

def create_app(settings: Optional[Settings] = None, store: Optional[AppointmentStore] = None) -> FastAPI:
    if settings is None:
        settings = default_settings
    if store is None:
        store = AppointmentStore(AppointmentFileStorage(settings.appointments_file))

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    @app.exception_handler(AppointmentError)
    async def appointment_error(request: Request, exc: AppointmentError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc!r} (cause: {exc.__cause__!r})")
        else:
            logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} invalid body: {exc.errors()}")
        return error_response(400, messages.FILL_ALL_FIELDS)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Server error on {request.method} {request.url.path}: {exc}")
        return error_response(500, messages.UNHANDLED_ERROR)

    app.include_router(api_router, prefix="/api")

    admin_path = os.path.join(settings.static_dir, settings.admin_page)

    # Admin page must be routed before the static mount
    @app.get("/admin", include_in_schema=False)
    @app.get("/admin/", include_in_schema=False)
    async def admin_page():
        if not os.path.isfile(admin_path):
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(admin_path)

    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory {os.path.abspath(settings.static_dir)} not found, front-end is not served")

    return app

def run():
    # log_config=None keeps uvicorn from replacing the handlers set up below
    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_config=None)

setup_logging(default_settings)
app = create_app()

if __name__ == "__main__":
    run()
