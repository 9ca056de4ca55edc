import sys
from loguru import logger

from flipside.config import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}"

def configure_logging(level: str | None = None):
    """Route loguru output to a single stderr sink."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level or settings.LOG_LEVEL)
    return logger
