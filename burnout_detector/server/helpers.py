# server/helpers.py
import logging

PACKAGE_LOGGER = "burnout_detector"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Project-wide logger; module loggers propagate to it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)-8s %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
