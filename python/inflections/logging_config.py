"""
Logging configuration for inflections.

The library only emits records under the "inflections" logger and never
installs handlers on import. Applications that want to see bootstrap
warnings (for example a broken inflections.json) call setup_logging().

Console logging goes to stderr. A daily rotating file can be added with
log_dir: <log_dir>/inflections-YYYY-MM-DD.log (new file each day).
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    backup_count: int = 30,  # Keep 30 days of logs
    console: bool = True,
) -> logging.Logger:
    """
    Set up logging for inflections.

    Calling it again is safe: handlers that already exist are not added
    twice, only the level is updated.

    Args:
        level: Logging level (default: INFO)
        log_dir: Directory for daily log files (default: no file logging)
        backup_count: Number of daily backup files to keep (default: 30 days)
        console: If True, log to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("inflections")
    logger.setLevel(level)

    has_file_handler = any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler)
        for h in logger.handlers
    )
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
        for h in logger.handlers
    )

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir is not None and not has_file_handler:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"inflections-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info(f"Log file: {log_file}")
        logger.info(f"Log level: {logging.getLevelName(level)}")

    return logger


def get_logger(name: str = "inflections") -> logging.Logger:
    """
    Get an inflections logger instance.

    Args:
        name: Logger name (default: "inflections")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
