"""
Logging configuration for the application.

Every module logs through ``logging.getLogger(__name__)``; this module only
installs the root handler and format once at startup.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger for the application process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # SQL echo is controlled by settings.DEBUG on the engine itself.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
