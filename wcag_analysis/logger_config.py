import logging
import sys

from wcag_analysis.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = "wcag_analysis") -> logging.Logger:
    log = logging.getLogger(name)
    if not log.handlers:  # avoid duplicate handlers on uvicorn reload
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = setup_logger()
