"""Module de logging."""

from linux_process_utils.logging.base import Logger
from linux_process_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
