"""Logging setup for nmskeys.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

and leave handler configuration to the entry points below: the CLI logs
to stderr, the TUI logs to a rotating file so output does not draw over
the screen.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from nmskeys.config.settings import get_config_dir

# Max log file size: 1MB, keep 2 backups
_MAX_LOG_BYTES = 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_cli_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the ``nmskeys`` logger for command-line use.

    Args:
        verbose: Show DEBUG messages
        quiet: Only show errors

    Returns:
        The package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger("nmskeys")
    logger.setLevel(level)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

    return logger


def setup_tui_logging(module_name: str) -> logging.Logger:
    """
    Set up file logging for the TUI.

    nmskeys.* loggers go to <config dir>/tui.log at INFO.

    Returns:
        The logger for ``module_name``
    """
    package_logger = logging.getLogger("nmskeys")
    package_logger.setLevel(logging.INFO)

    # Drop the stderr handler installed by the CLI callback
    for handler in list(package_logger.handlers):
        if not isinstance(handler, RotatingFileHandler):
            package_logger.removeHandler(handler)

    try:
        log_dir = get_config_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "tui.log"

        has_file_handler = any(
            isinstance(h, RotatingFileHandler) for h in package_logger.handlers
        )
        if not has_file_handler:
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
            package_logger.addHandler(handler)
        package_logger.propagate = False
    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    return logging.getLogger(module_name)
