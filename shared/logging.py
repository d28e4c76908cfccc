import sys
from typing import Optional

from loguru import logger

from shared.config import LOG_LEVEL

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with a single stderr sink at ``level``."""
    global _configured
    logger.remove()
    logger.configure(extra={"name": "hot_products"})
    logger.add(
        sys.stderr,
        level=(level or LOG_LEVEL).upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )
    _configured = True


def get_logger(name: str):
    if not _configured:
        configure_logging()
    return logger.bind(name=name)
