"""
Logging configuration for filetranslate.
Console logging goes to stderr so it never mixes with the translated text on stdout.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(logger_name: str = 'filetranslate',
                 log_file: Optional[Union[str, Path]] = None,
                 level: int = logging.INFO,
                 console: bool = True) -> logging.Logger:
    """
    Set up a logger with optional file and console handlers.

    Args:
        logger_name (str): Name of the logger
        log_file (str, optional): Log file path. No file handler if None.
        level (int, optional): Logging level. Defaults to logging.INFO.
        console (bool, optional): Whether to log to stderr. Defaults to True.

    Returns:
        logging.Logger: Configured logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
