"""
Logging setup for scripts and the CLI

Library modules only create named loggers (logging.getLogger(__name__));
handlers are configured once by the entry point.
"""
import logging
from typing import Optional

from storefront.core.config import get_settings

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL
    """
    level_name = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
