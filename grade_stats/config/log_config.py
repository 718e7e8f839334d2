"""
Logging configuration for the grade statistics service.
Centralizes all logging setup to follow DRY and SoC principles.
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler
from grade_stats.config.settings import LogConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def setup_logging(log_dir=None, level=None):
    """
    Set up logging for the grade_stats package.

    Args:
        log_dir: Directory for the rotating log file (defaults to LOG_DIR)
        level: Log level name (defaults to LOG_LEVEL)

    Returns:
        The package logger configured with file and console handlers
    """
    log_dir = log_dir or LogConfig.LOG_DIR
    level = level or LogConfig.LEVEL

    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger("grade_stats")
    logger.setLevel(level)

    # Only configure if handlers haven't been added yet
    if not logger.handlers:
        logger.addFilter(DuplicateFilter())
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        try:
            os.makedirs(log_dir, exist_ok=True)
            # delay=True avoids opening the file until the first message
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, "grade_stats.log"),
                maxBytes=LogConfig.MAX_LOG_SIZE,
                backupCount=LogConfig.BACKUP_COUNT,
                delay=True
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    return logger
