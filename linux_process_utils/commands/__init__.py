"""Module de lancement de processus.

Ce module fournit une commande configurable par options composables
autour de subprocess.Popen.

Classes et fonctions disponibles :
    Command : Commande externe (start, wait, run, output).
    system : Exécution d'une ligne de commande via /bin/sh -c.
    look_path : Recherche d'un exécutable dans le PATH.
    options : Constructeurs d'options (dir, stdin, stdout, stderr,
        before_func, after_func, setenv, env_file).
    CommandFormatter : Interface abstraite de formatage des logs.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
"""

from linux_process_utils.commands import options
from linux_process_utils.commands.command import Command
from linux_process_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from linux_process_utils.commands.launcher import (
    DEFAULT_SHELL,
    look_path,
    system,
)
from linux_process_utils.commands.options import (
    Hook,
    Option,
    after_func,
    before_func,
    env_file,
    setenv,
    stderr,
    stdin,
    stdout,
)

__all__ = [
    # Commande
    "Command",
    "system",
    "look_path",
    "DEFAULT_SHELL",
    # Options
    "options",
    "Option",
    "Hook",
    "stdin",
    "stdout",
    "stderr",
    "before_func",
    "after_func",
    "setenv",
    "env_file",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
]
