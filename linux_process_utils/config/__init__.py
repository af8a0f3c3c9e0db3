"""Module de configuration."""

from linux_process_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from linux_process_utils.config.models import (
    LauncherConfig,
    LoggingSettings,
    load_launcher_config,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "LauncherConfig",
    "LoggingSettings",
    "load_launcher_config",
]
