import logging
import os

from config import config

# Create a custom logger
logger = logging.getLogger("nav_handoff")
logger.setLevel(logging.DEBUG)

# Check if handler already exists to avoid duplicate logs on reload
if not logger.handlers:
    try:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(config.LOG_DIR, "app.log"), encoding="utf-8")
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(module)s: %(message)s')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.addHandler(logging.StreamHandler())
        logger.warning(f"Failed to setup file logging: {e}")


def log_debug(msg):
    logger.debug(msg)


def log_info(msg):
    logger.info(msg)


def log_warning(msg):
    logger.warning(msg)


def log_error(msg, exc_info=False):
    logger.error(msg, exc_info=exc_info)
