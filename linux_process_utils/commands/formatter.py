"""Formateurs des messages de cycle de vie d'une commande.

Les messages sont destinés au Logger injecté dans Command. Ils
distinguent les commandes lancées par root des commandes utilisateur
par un préfixe textuel [ROOT] ou [user].

Example :
        [user] Démarrage (pid 4242) : git status
        [user] Terminé (statut 0) : git status
"""

from abc import ABC, abstractmethod
from typing import Sequence


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    @abstractmethod
    def format_start(
        self, command: Sequence[str], pid: int, is_root: bool
    ) -> str:
        """Formate le message de démarrage du processus.

        Args:
            command: Ligne de commande (programme puis arguments).
            pid: Identifiant du processus créé.
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_exit(
        self, command: Sequence[str], returncode: int, is_root: bool
    ) -> str:
        """Formate le message de fin du processus.

        Args:
            command: Ligne de commande.
            returncode: Code de retour (négatif si signal).
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_discarded_hook_error(
        self, command: Sequence[str], error: Exception, is_root: bool
    ) -> str:
        """Formate l'erreur d'un hook after écartée au profit de
        l'erreur du processus.

        Args:
            command: Ligne de commande.
            error: Exception levée par le hook.
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    N'utilise aucun code ANSI : compatible avec les fichiers de log,
    les outils grep et les éditeurs de texte.
    """

    _ROOT_PREFIX = "[ROOT]"
    _USER_PREFIX = "[user]"

    def _prefix(self, is_root: bool) -> str:
        """Retourne le préfixe [ROOT] ou [user]."""
        return self._ROOT_PREFIX if is_root else self._USER_PREFIX

    def format_start(
        self, command: Sequence[str], pid: int, is_root: bool
    ) -> str:
        cmd_str = " ".join(command)
        return f"{self._prefix(is_root)} Démarrage (pid {pid}) : {cmd_str}"

    def format_exit(
        self, command: Sequence[str], returncode: int, is_root: bool
    ) -> str:
        cmd_str = " ".join(command)
        return (
            f"{self._prefix(is_root)} "
            f"Terminé (statut {returncode}) : {cmd_str}"
        )

    def format_discarded_hook_error(
        self, command: Sequence[str], error: Exception, is_root: bool
    ) -> str:
        cmd_str = " ".join(command)
        return (
            f"{self._prefix(is_root)} Erreur du hook after ignorée "
            f"({type(error).__name__}: {error}) : {cmd_str}"
        )
