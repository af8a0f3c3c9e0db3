"""
    ConsoleErrorHandler (générique, configurable)
"""
import sys

from linux_process_utils.errors.base import ErrorHandler
from linux_process_utils.errors.exceptions import (ApplicationError,
                                                   ConfigurationError,
                                                   CommandUsageError,
                                                   ExecutableNotFoundError,
                                                   ExitError,
                                                   OptionError,
                                                   StreamRelayError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs sur la sortie d'erreur.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche une solution adaptée au type d'erreur.
    Les solutions fournies à l'instanciation sont prioritaires.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                             connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}.
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur avec un message utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la suggestion de solution pour une erreur connue."""
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, ExecutableNotFoundError):
            return "Vérifiez le nom du programme et la variable PATH."
        if isinstance(error, ExitError):
            return "La commande a échoué, consultez sa sortie d'erreur."
        if isinstance(error, OptionError):
            return ("Chaque flux et chaque hook ne peuvent être "
                    "définis qu'une seule fois.")
        if isinstance(error, CommandUsageError):
            return ("Une commande se démarre une fois et s'attend "
                    "une fois.")
        if isinstance(error, StreamRelayError):
            return "Vérifiez les flux fournis à la commande."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {error}", file=sys.stderr)
        print(f"\n🔧 Solution : {self._solution_for(error)}",
              file=sys.stderr)

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {error}", file=sys.stderr)
        print(f"Type: {type(error).__name__}", file=sys.stderr)
