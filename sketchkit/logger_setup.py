import logging
import os
from typing import Optional

from .config import SketchConfig


LOGGER_NAME = "sketchkit"


def setup_logging(config: Optional[SketchConfig] = None) -> logging.Logger:
    """
    Sets up logging for the package.

    Configures the dedicated "sketchkit" logger (not the root logger) to
    output to the console and, if the config names a log file, to that file
    as well. The library modules only ever emit through child loggers, so
    nothing is printed until an application calls this.

    Data Contract:
    - Inputs: config (SketchConfig) - level, format and optional log file.
    - Outputs: the configured logger.
    - Side Effects:
        - Replaces any handlers previously attached to "sketchkit".
        - Creates the log file's directory if needed.
    """
    config = config or SketchConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # --- Prevent logs from propagating to the root logger ---
    logger.propagate = False

    formatter = logging.Formatter(config.log_format)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if config.log_file:
        log_dir = os.path.dirname(config.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized. Level: {config.log_level}. Log file: {config.log_file}")
    return logger
