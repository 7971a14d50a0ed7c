"""Configuration module for newsview."""

from newsview.config.factory import create_from_config
from newsview.config.loader import get_default_config_path, load_config
from newsview.config.models import (
    ConsoleOutputConfig,
    GNewsConfig,
    HtmlOutputConfig,
    LoggingConfig,
    NewsViewConfig,
    OutputConfig,
    PlaceholderConfig,
    ViewerConfig,
)

__all__ = [
    "ConsoleOutputConfig",
    "GNewsConfig",
    "HtmlOutputConfig",
    "LoggingConfig",
    "NewsViewConfig",
    "OutputConfig",
    "PlaceholderConfig",
    "ViewerConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
