"""
Core Log Utilities for narrow-widgets.

Attaches file and console handlers to the package logger from the runtime
configuration, and reports which log file is in use.
"""

import logging
from pathlib import Path
from typing import Optional

from narrow_widgets.protocols.form_config import NarrowWidgetsConfig, get_widget_config

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _get_log_dir(config: NarrowWidgetsConfig) -> Path:
    """Return configured log directory or default."""
    if config.log_dir:
        return Path(config.log_dir)
    return Path.home() / ".local" / "share" / "narrow_widgets" / "logs"


def _get_log_prefix(config: NarrowWidgetsConfig) -> str:
    return (config.log_prefixes or ["narrow_widgets_"])[0]


def configure_logging(config: Optional[NarrowWidgetsConfig] = None, console: bool = True) -> Path:
    """Attach file (and optionally console) handlers to the package logger.

    Calling this again replaces the handlers added by a previous call
    instead of stacking them.

    Args:
        config: Configuration to use (defaults to the global one)
        console: Whether to also log to stderr

    Returns:
        Path of the log file
    """
    config = config or get_widget_config()
    package_logger = logging.getLogger(config.log_root_logger_name)
    package_logger.setLevel(config.log_level)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_narrow_widgets_handler", False):
            package_logger.removeHandler(handler)
            handler.close()

    log_dir = _get_log_dir(config)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{_get_log_prefix(config)}main.log"

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler._narrow_widgets_handler = True
    package_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        console_handler._narrow_widgets_handler = True
        package_logger.addHandler(console_handler)

    logger.debug(f"Logging to {log_file}")
    return log_file


def get_current_log_file_path(config: Optional[NarrowWidgetsConfig] = None) -> Optional[str]:
    """Get the file the package logger currently writes to, if any."""
    config = config or get_widget_config()
    for name in (config.log_root_logger_name, ""):
        for handler in logging.getLogger(name).handlers:
            if isinstance(handler, logging.FileHandler):
                return handler.baseFilename
    return None
