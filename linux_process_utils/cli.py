"""Interface en ligne de commande du lanceur de processus.

Exemples :

    linux-process-utils run -C /tmp -e LANG=C -- git status
    linux-process-utils output -- uname -r
    linux-process-utils system "date"
    linux-process-utils which python3

Une commande en échec termine le programme avec le code de retour
de l'enfant.
"""

import argparse
import sys
from typing import List, Optional

from linux_process_utils import __version__
from linux_process_utils.commands import Command, look_path, options, system
from linux_process_utils.commands.options import Option
from linux_process_utils.config import LauncherConfig, load_launcher_config
from linux_process_utils.errors import (
    ApplicationError,
    ConsoleErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
)
from linux_process_utils.logging import FileLogger, Logger


def _env_pair(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(
            f"format attendu CLE=VALEUR, reçu : {value!r}"
        )
    return key, val


def _add_launch_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-C", "--dir",
        help="Répertoire de travail du processus",
    )
    parser.add_argument(
        "-e", "--env",
        action="append",
        type=_env_pair,
        default=[],
        metavar="CLE=VALEUR",
        help="Variable d'environnement (répétable)",
    )
    parser.add_argument(
        "--env-file",
        help="Fichier .env appliqué à l'environnement",
    )
    parser.add_argument("program", help="Programme à exécuter")
    parser.add_argument("args", nargs="*", help="Arguments du programme")


def build_parser() -> argparse.ArgumentParser:
    """Construit le parseur des arguments de la ligne de commande."""
    parser = argparse.ArgumentParser(
        prog="linux-process-utils",
        description="Lance et contrôle des processus enfants.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config",
        help="Fichier de configuration TOML ou JSON",
    )
    parser.add_argument(
        "--log-file",
        help="Fichier de log (prioritaire sur la configuration)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Afficher aussi les logs sur la console",
    )
    subparsers = parser.add_subparsers(dest="action", required=True)

    run_parser = subparsers.add_parser(
        "run", help="Exécute un programme et attend sa fin"
    )
    _add_launch_arguments(run_parser)

    output_parser = subparsers.add_parser(
        "output", help="Exécute un programme et affiche sa sortie capturée"
    )
    _add_launch_arguments(output_parser)

    system_parser = subparsers.add_parser(
        "system", help="Exécute une ligne via le shell (sans guillemets)"
    )
    system_parser.add_argument("command_line", help="Ligne de commande")

    which_parser = subparsers.add_parser(
        "which", help="Cherche un exécutable dans le PATH"
    )
    which_parser.add_argument("name", help="Nom de l'exécutable")
    return parser


def _build_logger(
    args: argparse.Namespace,
    config: LauncherConfig,
) -> Optional[Logger]:
    settings = config.logging
    if args.log_file:
        settings = settings.model_copy(update={"file": args.log_file})
    if not settings.file:
        return None
    return FileLogger.from_settings(settings, console_output=args.verbose)


def _launch_options(
    args: argparse.Namespace,
    config: LauncherConfig,
) -> List[Option]:
    opts = config.options()
    if args.dir:
        opts.append(options.dir(args.dir))
    if args.env_file:
        opts.append(options.env_file(args.env_file))
    opts.extend(options.setenv(key, val) for key, val in args.env)
    return opts


def _dispatch(
    args: argparse.Namespace,
    config: LauncherConfig,
    logger: Optional[Logger],
) -> int:
    if args.action == "which":
        print(look_path(args.name))
        return 0
    if args.action == "system":
        system(
            args.command_line,
            *config.options(),
            shell=config.shell,
            logger=logger,
        )
        return 0

    command = Command(args.program, *args.args, logger=logger)
    if args.action == "output":
        out = command.output(
            options.stderr(sys.stderr),
            *_launch_options(args, config),
        )
        sys.stdout.flush()
        sys.stdout.buffer.write(out)
        sys.stdout.buffer.flush()
        return 0
    command.run(
        options.stdin(sys.stdin),
        options.stdout(sys.stdout),
        options.stderr(sys.stderr),
        *_launch_options(args, config),
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée de la ligne de commande.

    Args:
        argv: Arguments (sys.argv[1:] par défaut).

    Returns:
        Code de sortie (0 en cas de succès). En cas d'erreur, le
        programme se termine via ErrorHandlerChain.handle_and_exit.
    """
    args = build_parser().parse_args(argv)
    chain = ErrorHandlerChain()
    chain.add_handler(ConsoleErrorHandler())
    try:
        config = load_launcher_config(args.config)
        logger = _build_logger(args, config)
        if logger is not None:
            chain.add_handler(LoggerErrorHandler(logger))
        return _dispatch(args, config, logger)
    except (ApplicationError, OSError) as error:
        chain.handle_and_exit(error)
        return 1
