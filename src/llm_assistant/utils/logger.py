import logging
import os
import sys

LOG_LEVEL_ENV = "LLM_ASSISTANT_LOG_LEVEL"


def setup_logger(name: str = "llm_assistant", level: str | None = None) -> logging.Logger:
    """Configure the assistant's logger.

    `level` wins over ``LLM_ASSISTANT_LOG_LEVEL``; both the bridge and the CLI
    read that variable so one setting covers either entry point.
    """
    level = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()

    # Reuse Uvicorn's error logger handlers so bridge output lands in the same console
    base_logger = logging.getLogger("uvicorn.error")
    logger = logging.getLogger(name)
    if base_logger.handlers and not logger.handlers:
        for h in base_logger.handlers:
            logger.addHandler(h)
    logger.propagate = False
    logger.setLevel(level)
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
