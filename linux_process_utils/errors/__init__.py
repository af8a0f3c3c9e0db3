"""Module de gestion des erreurs."""

from linux_process_utils.errors.base import ErrorHandler, ErrorHandlerChain
from linux_process_utils.errors.exceptions import (ApplicationError,
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
                                                   ExitError)
from linux_process_utils.errors.console_handler import ConsoleErrorHandler
from linux_process_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
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
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
