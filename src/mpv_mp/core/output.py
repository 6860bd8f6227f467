"""
Logging setup using Loguru.

The file sink is always on; stderr mirroring only when asked for, so that
stdout and stderr stay clean for scripting.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_data_dir

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def get_log_file_path() -> Path:
    """Get the path to the default log file."""
    return get_data_dir() / "mpv-mp.log"


def setup_loguru(
    logging_config: LoggingConfig, verbose: bool = False
) -> Optional[Path]:
    """
    Configure loguru sinks for a single invocation.

    Args:
        logging_config: Logging section of the loaded config
        verbose: Mirror DEBUG records to stderr regardless of config

    Returns:
        Path of the log file in use, or None if it couldn't be opened
    """
    # Remove default handler
    logger.remove()

    log_file: Optional[Path] = (
        Path(logging_config.log_file)
        if logging_config.log_file
        else get_log_file_path()
    )
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation=f"{logging_config.max_file_size_mb} MB",
            retention=logging_config.backup_count,
            level=logging_config.level,
            format=LOG_FORMAT,
            enqueue=False,  # Synchronous writes, the process is short-lived
        )
    except OSError as e:
        # Logging must never make a command fail
        log_file = None
        sys.stderr.write(f"mpv-mp: logging to file disabled: {e}\n")

    if verbose or logging_config.console_output:
        logger.add(
            sys.stderr,
            level="DEBUG" if verbose else logging_config.level,
            format="{level}: {message}",
        )

    logger.debug(f"Loguru initialized: {log_file} (level={logging_config.level})")
    return log_file
