import logging
import sys

from celestius.config.settings import settings


PROJECT_LOGGER = "celestius"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Route the `celestius.*` loggers to stdout.
    Entry points call this once; repeated calls only change the level.
    """
    project = logging.getLogger(PROJECT_LOGGER)
    project.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))
    if not project.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        project.addHandler(handler)
        project.propagate = False
    return project
