# utils/logger.py
import logging
import os
import sys
from config.paths import LOG_PATH

# Engine modules log through getLogger(__name__), so they all sit under "scheduler"
ENGINE_LOGGER_NAME = "scheduler"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
STREAM_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_engine_logger(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Attach the run-log file handler and a stdout handler to the engine logger.

    Safe to call repeatedly; handlers are only added the first time.
    """
    engine_logger = logging.getLogger(ENGINE_LOGGER_NAME)
    engine_logger.setLevel(level)

    if engine_logger.handlers:
        return engine_logger

    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    # stdout -> docker logs
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(STREAM_FORMAT))

    engine_logger.addHandler(file_handler)
    engine_logger.addHandler(stream_handler)
    return engine_logger


logger = configure_engine_logger()
