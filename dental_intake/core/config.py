from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    app_name: str = "Dental Family Intake"

    # Listen address (0.0.0.0 = accept connections from any host)
    port: int = 3000
    host: str = "0.0.0.0"

    # Durable store and front-end
    appointments_file: str = "appointments.json"
    static_dir: str = "public_html"
    admin_page: str = "admin.html"

    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"
    new_relic_license_key: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
