"""Logging for the API entry point: one stdout handler, levels from LOG_LEVEL."""
import logging
import sys

from kitchen.utilities.config import LOG_LEVEL

APP_LOGGER = "kitchen_app"
# Module loggers live under the package name (logging.getLogger(__name__))
PACKAGE_LOGGER = "kitchen"
LOG_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    '''
    Attaches a stdout handler to the kitchen loggers and sets their level.
    Calling it again only updates the level. Returns the application logger.
    '''
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    for name in (APP_LOGGER, PACKAGE_LOGGER):
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        if not logger.handlers:
            logger.addHandler(handler)
        # uvicorn configures the root logger on its own
        logger.propagate = False
    return logging.getLogger(APP_LOGGER)
