import logging
import os
import sys

from logging.handlers import RotatingFileHandler

from f95postparser.config import LOG_FILE_PATH, LOG_LEVEL

LOGGER_NAME = "F95PostParser"


def setup_logging(log_file_path=LOG_FILE_PATH, level=LOG_LEVEL):
    """Configures the package logger with an optional rotating file."""
    logger = logging.getLogger(LOGGER_NAME)
    try:
        logger.setLevel(level)
        unknown_level = None
    except (ValueError, TypeError):
        logger.setLevel(logging.INFO)
        unknown_level = level

    # Avoid adding handlers multiple times if function is called repeatedly
    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(module)s - %(message)s')

        if log_file_path:
            log_dir = os.path.dirname(os.path.abspath(log_file_path))
            try:
                os.makedirs(log_dir, exist_ok=True)
                file_handler = RotatingFileHandler(
                    log_file_path,
                    maxBytes=5*1024*1024, # 5 MB
                    backupCount=5,
                    encoding='utf-8',
                    delay=False
                )
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError as e:
                print(f"Failed to set up file logging at {log_file_path}: {e}")

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if unknown_level is not None:
        logger.warning(f"Unknown log level {unknown_level!r}, falling back to INFO")

    return logger

logger = setup_logging()
