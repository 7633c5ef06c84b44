"""Base configuration class for the narrow widgets.

Provides hooks for applications to customize logging and messages.
"""

from typing import Optional, List
from dataclasses import dataclass, field


@dataclass
class NarrowWidgetsConfig:
    """Runtime configuration for narrow widget behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        log_dir: Directory for the package log file (defaults under the home directory)
        log_prefixes: File name prefixes for package log files; the first one is used
        log_root_logger_name: Logger handlers are attached to
        log_level: Level name for the package logger
        wrapper_id_suffix: Suffix of the ajax wrapper id around the reference input
        min_error_message: Template for the minimum-not-met message
        max_error_message: Template for the maximum-exceeded message
        no_view_option_label: Label of the "no view selection" handler option
    """

    log_dir: Optional[str] = None
    log_prefixes: List[str] = field(default_factory=lambda: ["narrow_widgets_"])
    log_root_logger_name: str = "narrow_widgets"
    log_level: str = "INFO"
    wrapper_id_suffix: str = "type"
    min_error_message: str = "The minimum required amount of values for @label is @number."
    max_error_message: str = "The maximum number of values for @label is @number."
    no_view_option_label: str = "Don't use view selection"


# Global config instance (set by application)
_widget_config: Optional[NarrowWidgetsConfig] = None


def set_widget_config(config: Optional[NarrowWidgetsConfig]) -> None:
    """Set the global narrow widgets configuration.

    Args:
        config: NarrowWidgetsConfig instance, or None to restore defaults
    """
    global _widget_config
    _widget_config = config


def get_widget_config() -> NarrowWidgetsConfig:
    """Get the current narrow widgets configuration.

    Returns:
        Current NarrowWidgetsConfig or default if not set
    """
    if _widget_config is None:
        return NarrowWidgetsConfig()
    return _widget_config
