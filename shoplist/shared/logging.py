"""
Logging setup for applications embedding shoplist.

Library modules only create module-level loggers; calling setup_logging()
is left to the host application.
"""

import logging
from typing import Optional

from .config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """Attach a console handler to the shoplist logger hierarchy."""
    log_level = (level or get_settings().log_level).upper()

    package_logger = logging.getLogger("shoplist")
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(handler)
