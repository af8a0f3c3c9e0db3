"""Options composables appliquées à une commande.

Une option est un callable recevant la commande à configurer. Elle
la modifie, ou lève une CommandError sans rien modifier si sa
précondition n'est pas respectée. Les options sont appliquées dans
l'ordre fourni et l'application s'arrête à la première erreur.

La fonction dir masque volontairement le builtin du même nom dans ce
module : utilisez options.dir plutôt qu'un import direct.

Example:
    Redirection de stdout et surcharge de l'environnement :

        from linux_process_utils.commands import Command, options

        cmd = Command("git", "status")
        cmd.run(
            options.dir("/tmp"),
            options.stdout(sys.stdout),
            options.setenv("GIT_PAGER", "cat"),
        )
"""

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable, Union

from dotenv import dotenv_values

from linux_process_utils.commands.streams import Stream
from linux_process_utils.errors.exceptions import (
    AlreadySetError,
    FileConfigurationError,
    OptionError,
)

if TYPE_CHECKING:
    from linux_process_utils.commands.command import Command

Option = Callable[["Command"], None]
Hook = Callable[["Command"], None]


def apply_options(command: "Command", opts: Iterable[Option]) -> None:
    """Applique les options dans l'ordre, jusqu'à la première erreur.

    Args:
        command: Commande à configurer.
        opts: Options à appliquer.
    """
    for option in opts:
        option(command)


def dir(path: Union[str, Path]) -> Option:
    """Répertoire de travail de la commande.

    Chaîne vide : le répertoire courant de l'appelant. Contrairement
    aux flux et aux hooks, une nouvelle valeur remplace la précédente.
    """
    def option(command: "Command") -> None:
        command.dir = str(path)
    return option


def stdin(source: Stream) -> Option:
    """Entrée standard du processus."""
    def option(command: "Command") -> None:
        if command.stdin is not None:
            raise AlreadySetError("Stdin déjà défini")
        command.stdin = source
    return option


def stdout(sink: Stream) -> Option:
    """Sortie standard du processus."""
    def option(command: "Command") -> None:
        if command.stdout is not None:
            raise AlreadySetError("Stdout déjà défini")
        command.stdout = sink
    return option


def stderr(sink: Stream) -> Option:
    """Sortie d'erreur du processus."""
    def option(command: "Command") -> None:
        if command.stderr is not None:
            raise AlreadySetError("Stderr déjà défini")
        command.stderr = sink
    return option


def before_func(fn: Hook) -> Option:
    """Exécute fn juste avant le lancement du processus.

    Si fn lève une exception, le processus n'est pas créé et
    l'exception est propagée par start().
    """
    def option(command: "Command") -> None:
        if command.before is not None:
            raise AlreadySetError("BeforeFunc déjà défini")
        command.before = fn
    return option


def after_func(fn: Hook) -> Option:
    """Exécute fn juste après la fin du processus, dans wait().

    L'exception levée par fn n'est propagée que si le processus
    s'est terminé proprement.
    """
    def option(command: "Command") -> None:
        if command.after is not None:
            raise AlreadySetError("AfterFunc déjà défini")
        command.after = fn
    return option


def setenv(key: str, val: str) -> Option:
    """Définit (ou remplace) une variable d'environnement de l'enfant.

    Une clé déjà présente est remplacée sur place, sinon elle est
    ajoutée en fin d'environnement.

    Raises:
        OptionError: À l'application, si la clé est vide ou contient
            '=' ou un caractère nul.
    """
    def option(command: "Command") -> None:
        if not key or "=" in key or "\0" in key:
            raise OptionError(f"Nom de variable invalide : {key!r}")
        command.environ()[key] = val
    return option


def env_file(path: Union[str, Path]) -> Option:
    """Applique les variables d'un fichier .env, dans l'ordre du fichier.

    Le fichier est lu par python-dotenv au moment de l'application.
    Les clés sans valeur (ligne « CLE » seule) sont ignorées.

    Raises:
        FileConfigurationError: À l'application, si le fichier
            n'existe pas.
    """
    def option(command: "Command") -> None:
        env_path = Path(path)
        if not env_path.is_file():
            raise FileConfigurationError(
                f"Fichier .env introuvable : {env_path}"
            )
        values = dotenv_values(env_path)
        for key, value in values.items():
            if value is not None:
                setenv(key, value)(command)
    return option
