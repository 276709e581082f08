from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attach one stream handler to the package logger.

    Safe to call more than once; the handler is only installed the first time.
    Unknown level names fall back to INFO.
    """
    logger = logging.getLogger("pypad")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_pypad_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._pypad_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
