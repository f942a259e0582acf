# mediaconv/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "mediaconv", level: int = logging.INFO) -> logging.Logger:
    """
    Return a named logger for the engine.
    If neither the root nor this logger has handlers, we add a basicConfig once
    so library users that never configure logging still see warnings.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
