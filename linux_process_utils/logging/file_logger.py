"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import TYPE_CHECKING

from linux_process_utils.logging.base import Logger

if TYPE_CHECKING:
    from linux_process_utils.config.models import LoggingSettings

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console (stderr)
    """

    def __init__(
        self,
        log_file: str,
        level: str = "INFO",
        fmt: str = DEFAULT_FORMAT,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            level: Niveau de log (DEBUG, INFO, WARNING, ERROR)
            fmt: Format des enregistrements (syntaxe logging)
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level = getattr(logging, level.upper(), logging.INFO)

        self.logger = logging.getLogger(f"linux_process_utils.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            formatter = logging.Formatter(fmt)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    @classmethod
    def from_settings(
        cls,
        settings: "LoggingSettings",
        console_output: bool = False
    ) -> "FileLogger":
        """
        Construit un logger depuis la section [logging] de la config.

        Args:
            settings: Section logging validée (fichier requis)
            console_output: Activer la sortie console

        Returns:
            Instance de FileLogger

        Raises:
            ValueError: Si aucun fichier de log n'est configuré
        """
        if not settings.file:
            raise ValueError("Aucun fichier de log configuré.")
        return cls(
            settings.file,
            level=settings.level,
            fmt=settings.format,
            console_output=console_output,
        )

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()
