"""
Module contenant les exceptions du lanceur de processus.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Toutes les erreurs détectées par une commande sont levées vers
l'appelant immédiat ; aucune n'est journalisée puis ignorée.
"""
import signal
from typing import Optional, Sequence


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration absent ou invalide."""
    pass


class CommandError(ApplicationError):
    """Exception de base pour toutes les erreurs de commande.

    Attributes:
        output: Sortie standard capturée par Command.output avant
            l'erreur (vide sinon).
    """

    output: bytes = b""


class CommandUsageError(CommandError):
    """Mauvaise utilisation du cycle de vie d'une commande."""
    pass


class NotInitializedError(CommandUsageError):
    """Commande non construite via Command(programme, *args)."""
    pass


class AlreadyStartedError(CommandUsageError):
    """La commande a déjà été démarrée."""
    pass


class NotStartedError(CommandUsageError):
    """wait() appelé sur une commande jamais démarrée."""
    pass


class AlreadyWaitedError(CommandUsageError):
    """wait() a déjà été appelé."""
    pass


class OptionError(CommandError, ConfigurationError):
    """Option de commande invalide."""
    pass


class AlreadySetError(OptionError):
    """Champ à écriture unique déjà défini (flux ou hook)."""
    pass


class StreamRelayError(CommandError):
    """Erreur d'E/S pendant le relais d'un flux standard."""
    pass


class ExecutableNotFoundError(CommandError, FileNotFoundError):
    """Exécutable introuvable dans le PATH."""
    pass


class ExitError(CommandError):
    """Le processus s'est terminé avec un statut non nul ou un signal.

    Attributes:
        argv: Ligne de commande exécutée.
        returncode: Code de retour (négatif si tué par un signal).
    """

    def __init__(self, argv: Sequence[str], returncode: int) -> None:
        """
        Initialise l'erreur de sortie.

        Args:
            argv: Ligne de commande exécutée
            returncode: Code de retour renvoyé par Popen.wait()
        """
        self.argv = list(argv)
        self.returncode = returncode
        if returncode < 0:
            message = f"signal : {self.signal}"
        else:
            message = f"statut de sortie {returncode}"
        super().__init__(message)

    @property
    def signal(self) -> Optional[str]:
        """Nom du signal ayant terminé le processus, ou None."""
        if self.returncode >= 0:
            return None
        try:
            return signal.Signals(-self.returncode).name
        except ValueError:
            return str(-self.returncode)
