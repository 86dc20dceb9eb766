from __future__ import annotations

import logging
import sys
from typing import Optional

from linesketch_playground.config import log_level_from_env

_LOGGING_INITIALIZED = False

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def init_logging(level: Optional[int] = None) -> None:
    """
    Configure the ``linesketch_playground`` logger once per process:
    - console handler on stderr
    - level from the argument, else ``LINESKETCH_LOG_LEVEL``, else INFO
    """
    global _LOGGING_INITIALIZED
    if _LOGGING_INITIALIZED:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("linesketch_playground")
    package_logger.setLevel(log_level_from_env() if level is None else level)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    _LOGGING_INITIALIZED = True
    package_logger.debug("Logging initialised")
