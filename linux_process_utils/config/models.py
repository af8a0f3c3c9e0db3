"""Modèle de configuration du lanceur de processus.

Exemple de fichier TOML accepté :

    shell = "/bin/bash"
    dir = "/srv/app"
    env_file = "/srv/app/.env"

    [env]
    LANG = "C.UTF-8"

    [logging]
    level = "DEBUG"
    file = "/var/log/linux-process-utils.log"
"""

import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from linux_process_utils.commands import options
from linux_process_utils.commands.launcher import DEFAULT_SHELL
from linux_process_utils.commands.options import Option
from linux_process_utils.config.loader import ConfigLoader, FileConfigLoader
from linux_process_utils.errors.exceptions import FileConfigurationError
from linux_process_utils.logging.file_logger import DEFAULT_FORMAT


class LoggingSettings(BaseModel):
    """Section [logging] : journalisation du cycle de vie."""

    model_config = {"extra": "forbid"}

    level: str = "INFO"
    format: str = DEFAULT_FORMAT
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Niveau de log invalide : {value}")
        return level


class LauncherConfig(BaseModel):
    """Configuration appliquée aux commandes lancées.

    Attributes:
        shell: Shell utilisé par system() (chemin absolu).
        dir: Répertoire de travail par défaut.
        env: Variables ajoutées à l'environnement de l'enfant.
        env_file: Fichier .env appliqué avant env.
        logging: Section de journalisation.
    """

    model_config = {"extra": "forbid"}

    shell: str = DEFAULT_SHELL
    dir: Optional[str] = None
    env: Dict[str, str] = Field(default_factory=dict)
    env_file: Optional[str] = None
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("shell")
    @classmethod
    def _check_shell(cls, value: str) -> str:
        if not os.path.isabs(value):
            raise ValueError(f"Le shell doit être un chemin absolu : {value}")
        return value

    @field_validator("env")
    @classmethod
    def _check_env(cls, value: Dict[str, str]) -> Dict[str, str]:
        for key in value:
            if not key or "=" in key:
                raise ValueError(f"Nom de variable invalide : {key!r}")
        return value

    def options(self) -> List[Option]:
        """Traduit la configuration en options de commande.

        Ordre : répertoire, fichier .env, puis variables de [env].

        Returns:
            Liste d'options à passer à start(), run() ou output().
        """
        opts: List[Option] = []
        if self.dir:
            opts.append(options.dir(self.dir))
        if self.env_file:
            opts.append(options.env_file(self.env_file))
        opts.extend(options.setenv(k, v) for k, v in self.env.items())
        return opts


def load_launcher_config(
    config_path: Optional[Union[str, Path]] = None,
    loader: Optional[ConfigLoader] = None,
) -> LauncherConfig:
    """Charge la configuration du lanceur.

    Args:
        config_path: Fichier TOML ou JSON. None : valeurs par défaut.
        loader: Chargeur injectable (FileConfigLoader par défaut).

    Returns:
        Configuration validée.

    Raises:
        FileConfigurationError: Si le fichier est absent, illisible
            ou invalide.
    """
    if config_path is None:
        return LauncherConfig()
    loader = loader or FileConfigLoader()
    try:
        return loader.load(config_path, schema=LauncherConfig)
    except (OSError, ValueError) as e:
        raise FileConfigurationError(
            f"Configuration invalide ({config_path}) : {e}"
        ) from e
