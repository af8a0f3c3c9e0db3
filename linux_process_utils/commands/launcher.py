"""Fonctions utilitaires de lancement : system() et look_path()."""

import shutil
import sys
from typing import Optional

from linux_process_utils.commands.command import Command
from linux_process_utils.commands.options import (
    Option,
    stderr,
    stdin,
    stdout,
)
from linux_process_utils.errors.exceptions import ExecutableNotFoundError
from linux_process_utils.logging.base import Logger

DEFAULT_SHELL = "/bin/sh"


def system(
    command_line: str,
    *opts: Option,
    shell: str = DEFAULT_SHELL,
    logger: Optional[Logger] = None,
) -> None:
    """Exécute command_line via « shell -c » et attend sa fin.

    stdin, stdout et stderr de l'enfant sont ceux de l'appelant
    (sys.stdin, sys.stdout, sys.stderr). opts sont appliquées après
    ces valeurs par défaut : une option de flux y lève donc
    AlreadySetError.

    Limitation connue : la ligne est découpée sur les espaces, sans
    gestion des guillemets ni des échappements, et chaque mot devient
    un argument distinct de « sh -c ». Seul le premier mot est donc
    interprété comme script par le shell, les suivants deviennent
    $0, $1, ... Une commande avec arguments n'est pas supportée.

    Args:
        command_line: Ligne de commande à exécuter.
        *opts: Options supplémentaires.
        shell: Shell à invoquer.
        logger: Logger optionnel transmis à la commande.

    Raises:
        Voir Command.run().
    """
    command = Command(shell, "-c", *command_line.split(), logger=logger)
    command.run(
        stdin(sys.stdin),
        stdout(sys.stdout),
        stderr(sys.stderr),
        *opts,
    )


def look_path(name: str) -> str:
    """Cherche un exécutable dans les répertoires du PATH.

    Si name contient un séparateur de chemin, il est testé
    directement sans consulter le PATH. Le résultat peut être un
    chemin absolu ou relatif au répertoire courant.

    Args:
        name: Nom ou chemin de l'exécutable.

    Returns:
        Chemin de l'exécutable trouvé.

    Raises:
        ExecutableNotFoundError: Si aucun exécutable n'est trouvé.
    """
    path = shutil.which(name)
    if path is None:
        raise ExecutableNotFoundError(
            f"Exécutable {name!r} introuvable dans le PATH"
        )
    return path
