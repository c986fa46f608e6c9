"""Logging setup for standings runs."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def setup_logging(log_dir: Optional[Path] = None, quiet: bool = False) -> logging.Logger:
    """
    Configure the `dgfl` logger for one standings run.

    Console messages go to stderr (standings own stdout): INFO and up
    normally, only errors when quiet. With a log directory, every record
    down to DEBUG (ignored ranking rows, JSON loads) is also written to
    a per-run file, standings_<timestamp>.log.

    Args:
        log_dir: Directory for the run's log file (default: no file)
        quiet: Only show errors on the console

    Returns:
        The configured `dgfl` logger
    """
    logger = logging.getLogger('dgfl')
    logger.handlers = []
    logger.setLevel(logging.DEBUG if log_dir is not None else logging.INFO)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'standings_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    # Connection pool chatter from requests
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    return logger
