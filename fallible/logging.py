from __future__ import annotations

import logging
from typing import Literal

logger = logging.getLogger(__package__)
logger.addHandler(logging.NullHandler())


def enable(level: int | Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = logging.INFO) -> logging.Logger:
    """Print the package's log records to stderr.

    The package logger only carries a ``NullHandler`` by default, so records
    reach whatever the host application configured. Calling this attaches a
    stream handler and stops propagation to the root logger.
    """
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        formatter = logging.Formatter(
            "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger
