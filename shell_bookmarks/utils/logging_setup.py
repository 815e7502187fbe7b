"""
Logging configuration for shell-bookmarks.

This module sets up logging based on configuration settings.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    config=None,
    log_file: Optional[Union[str, Path]] = None,
    verbose: bool = False,
) -> None:
    """
    Set up logging configuration.

    Args:
        config: Configuration object supplying level and log file
        log_file: Optional log file path override
        verbose: Lower the level to INFO if it is configured higher
    """
    log_level = "WARNING"
    if config is not None:
        log_level = config.get_log_level()
        if log_file is None:
            log_file = config.get_log_file()
    if verbose and logging.getLevelName(log_level) > logging.INFO:
        log_level = "INFO"

    handlers = []

    # Console output goes to stderr so generated text on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handlers.append(console_handler)

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=getattr(logging, log_level.upper()), handlers=handlers)
    logging.getLogger().setLevel(getattr(logging, log_level.upper()))

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {log_level}")
    if log_file is not None:
        logger.info(f"Logging to file: {log_file}")
