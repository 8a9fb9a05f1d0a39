"""
# src/flightmail/utils/logger.py
# Shared logger factory
"""

import logging
import os
from datetime import datetime

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    if not logger.handlers:
        level = os.getenv('FLIGHTMAIL_LOG_LEVEL', 'INFO').upper()
        logger.setLevel(level)
        formatter = logging.Formatter(LOG_FORMAT)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # File handler only when a log directory is configured
        log_dir = os.getenv('FLIGHTMAIL_LOG_DIR')
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(
                os.path.join(log_dir, f'flightmail_{datetime.now().strftime("%Y%m%d")}.log')
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.propagate = False

    return logger
