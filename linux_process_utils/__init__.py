"""
Linux Process Utils - Lancement et contrôle de processus enfants.

Modules disponibles:
- commands: Commande configurable par options (Command, system,
  look_path, options)
- errors: Hiérarchie d'exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger)
- config: Chargement de configuration (TOML, JSON, Pydantic)
"""

__version__ = "1.0.0"

from linux_process_utils.logging import Logger, FileLogger
from linux_process_utils.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    CommandError,
    CommandUsageError,
    NotInitializedError,
    AlreadyStartedError,
    NotStartedError,
    AlreadyWaitedError,
    OptionError,
    AlreadySetError,
    StreamRelayError,
    ExecutableNotFoundError,
    ExitError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from linux_process_utils.commands import (
    Command,
    system,
    look_path,
    options,
    CommandFormatter,
    PlainCommandFormatter,
)
from linux_process_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    LauncherConfig,
    LoggingSettings,
    load_launcher_config,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Erreurs - Exceptions
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "CommandError",
    "CommandUsageError",
    "NotInitializedError",
    "AlreadyStartedError",
    "NotStartedError",
    "AlreadyWaitedError",
    "OptionError",
    "AlreadySetError",
    "StreamRelayError",
    "ExecutableNotFoundError",
    "ExitError",
    # Erreurs - Handlers
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Commands
    "Command",
    "system",
    "look_path",
    "options",
    # Commands - Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "LauncherConfig",
    "LoggingSettings",
    "load_launcher_config",
]
