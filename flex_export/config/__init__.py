"""Configuration loading for the flex rate export tool."""

from .loader import DEFAULT_CONFIG_PATH, ConfigError, ExportConfig, load_config

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "ExportConfig",
    "load_config",
]
