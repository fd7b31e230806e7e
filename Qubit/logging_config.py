"""
Logging Configuration
Sets up the package loggers for the qubit core and its renderers.
"""
import logging
import sys
from typing import Optional, Sequence

PACKAGE_LOGGERS = ("Qubit", "Renderers")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    namespaces: Sequence[str] = PACKAGE_LOGGERS,
) -> None:
    """
    Configures the 'Qubit' and 'Renderers' namespace loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        namespaces: Logger names to configure.
    """
    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    for namespace in namespaces:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        # Drop handlers from a previous call to avoid duplicate lines
        if logger.hasHandlers():
            logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logging.getLogger(namespaces[0]).info("Logging initialized.")
