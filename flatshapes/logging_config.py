from __future__ import annotations

import logging
import sys
from typing import TextIO


LOGGER_NAME = "flatshapes"


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a single stream handler to the `flatshapes` logger.

    Calling it again replaces the previous handler instead of stacking another one.
    The library itself never calls this; applications opt in.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
