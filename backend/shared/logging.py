"""Logging setup shared by the API and scripts."""

import sys

from loguru import logger


def configure_logging(settings) -> None:
    """Configure loguru sinks from application settings."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)
    
    if settings.log_dir is not None:
        settings.log_dir.mkdir(exist_ok=True, parents=True)
        logger.add(
            settings.log_dir / "devtools_{time}.log",
            rotation="1 day",
            retention="7 days",
            level=settings.log_level,
        )
