import logging
import sys
from typing import Optional

import newrelic.agent

from dental_intake.core.config import Settings, settings as default_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(settings: Optional[Settings] = None):
    """
    Configures logging for the application.
    Integrates with New Relic if configured.
    """
    settings = settings or default_settings

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)

    # New Relic's formatter adds trace/entity metadata (Logs in Context)
    if settings.new_relic_license_key:
        handler.setFormatter(newrelic.agent.NewRelicContextFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.addHandler(handler)

    # Request lines are logged by our own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
