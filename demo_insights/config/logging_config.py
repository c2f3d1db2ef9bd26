"""
Logging setup.

Modules log through logging.getLogger(__name__); this configures the
root handler once for the process.
"""

import logging
import sys
from typing import Optional

from .settings import Settings, get_settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings (debug forces DEBUG level)."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.value)

    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger("demo_insights").setLevel(level)
