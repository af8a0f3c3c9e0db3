"""Commande configurable lançant un processus enfant.

Ce module fournit Command, qui encapsule un subprocess.Popen et ne
l'expose qu'à travers start(), wait(), run() et output(). Toute la
configuration passe par des options (voir options.py) appliquées au
démarrage, après les options par défaut.

Example:
    Capture de la sortie standard dans /tmp :

        from linux_process_utils.commands import Command, options

        out = Command("git", "status").output(options.dir("/tmp"))

    Hooks avant et après exécution :

        cmd = Command("sleep", "60")
        cmd.run(
            options.before_func(lambda c: print("Lancement", c.argv)),
            options.after_func(lambda c: print("Fin", c.returncode)),
        )
"""

import io
import os
import subprocess  # nosec B404
from typing import Dict, List, Optional, Tuple

from linux_process_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from linux_process_utils.commands.options import (
    Hook,
    Option,
    apply_options,
    stdout,
)
from linux_process_utils.commands.streams import (
    Stream,
    StreamRelay,
    bind_input,
    bind_output,
)
from linux_process_utils.errors.exceptions import (
    AlreadyStartedError,
    AlreadyWaitedError,
    ExitError,
    NotInitializedError,
    NotStartedError,
    StreamRelayError,
)
from linux_process_utils.logging.base import Logger


class Command:
    """Commande externe à exécuter.

    Une Command doit être créée par Command(programme, *args) et ne
    peut pas être réutilisée : elle démarre au plus une fois et
    wait() s'appelle au plus une fois. Elle n'est pas conçue pour
    un usage concurrent depuis plusieurs threads.

    Attributes:
        dir: Répertoire de travail (None ou vide : celui de l'appelant).
        env: Environnement de l'enfant (None : hérité, copié au
            démarrage).
        stdin: Source de l'entrée standard (None : périphérique nul).
        stdout: Destination de la sortie standard (None : périphérique
            nul).
        stderr: Destination de la sortie d'erreur (None : périphérique
            nul).
        before: Hook exécuté juste avant la création du processus.
        after: Hook exécuté juste après la fin du processus.
    """

    _initialized = False
    _program = ""
    _args: Tuple[str, ...] = ()
    _process: Optional[subprocess.Popen] = None
    _waited = False

    def __init__(
        self,
        program: str,
        *args: str,
        logger: Optional[Logger] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """
        Initialise la commande.

        Args:
            program: Nom ou chemin du programme à exécuter
            *args: Arguments passés au programme
            logger: Logger optionnel pour tracer le cycle de vie
            formatter: Formateur des messages (PlainCommandFormatter
                par défaut)

        Raises:
            ValueError: Si program est vide
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._program = program
        self._args: Tuple[str, ...] = tuple(args)
        self.dir: Optional[str] = None
        self.env: Optional[Dict[str, str]] = None
        self.stdin: Optional[Stream] = None
        self.stdout: Optional[Stream] = None
        self.stderr: Optional[Stream] = None
        self.before: Optional[Hook] = None
        self.after: Optional[Hook] = None
        self._logger = logger
        self._formatter = formatter or PlainCommandFormatter()
        self._is_root: bool = os.getuid() == 0
        self._relays: List[StreamRelay] = []
        self._initialized = True

    def __repr__(self) -> str:
        if not self._initialized:
            return "Command(<non initialisée>)"
        return f"Command({', '.join(repr(a) for a in self.argv)})"

    @property
    def program(self) -> str:
        """Nom ou chemin du programme."""
        return self._program

    @property
    def args(self) -> Tuple[str, ...]:
        """Arguments passés au programme."""
        return self._args

    @property
    def argv(self) -> List[str]:
        """Ligne de commande complète : programme puis arguments."""
        return [self._program, *self._args]

    @property
    def started(self) -> bool:
        """True une fois le processus créé."""
        return self._process is not None

    @property
    def waited(self) -> bool:
        """True une fois wait() appelé."""
        return self._waited

    @property
    def pid(self) -> Optional[int]:
        """PID du processus, None avant le démarrage."""
        return self._process.pid if self._process else None

    @property
    def returncode(self) -> Optional[int]:
        """Code de retour, None tant que le processus n'est pas attendu."""
        return self._process.returncode if self._process else None

    def environ(self) -> Dict[str, str]:
        """Retourne l'environnement effectif de l'enfant.

        L'environnement est copié depuis os.environ au premier appel
        puis réutilisé tel quel.
        """
        self._apply_default_options()
        return self.env

    def start(self, *opts: Option) -> None:
        """Démarre la commande sans attendre sa fin.

        Applique les options par défaut, puis opts dans l'ordre, puis
        le hook before, et crée enfin le processus. wait() doit être
        appelé ensuite pour libérer les ressources du processus.

        Args:
            *opts: Options à appliquer avant le lancement.

        Raises:
            NotInitializedError: Si la commande n'a pas été construite
                par Command(...).
            AlreadyStartedError: Si la commande a déjà été démarrée.
            OptionError: Si une option est invalide ou en conflit.
            OSError: Si le processus ne peut pas être créé (programme
                introuvable, permission refusée, ...).
        """
        self._check_initialized()
        if self.started:
            raise AlreadyStartedError("Commande déjà démarrée")
        self._apply_default_options()
        apply_options(self, opts)
        if self.before is not None:
            self.before(self)
        self._spawn()

    def wait(self) -> None:
        """Attend la fin de la commande démarrée par start().

        Le hook after est exécuté une seule fois, quel que soit le
        résultat de l'attente, interruption comprise. Son exception n'est propagée que si le
        processus s'est terminé proprement.

        Raises:
            NotInitializedError: Si la commande n'a pas été construite
                par Command(...).
            AlreadyWaitedError: Si wait() a déjà été appelé.
            NotStartedError: Si la commande n'a pas été démarrée.
            ExitError: Si le processus a retourné un statut non nul ou
                a été tué par un signal.
            StreamRelayError: Si le relais d'un flux a échoué.
        """
        self._check_initialized()
        if self._waited:
            raise AlreadyWaitedError("Wait déjà appelé")
        self._waited = True
        try:
            self._wait_process()
        except BaseException:
            self._run_after_hook(discard_error=True)
            raise
        self._run_after_hook()

    def run(self, *opts: Option) -> None:
        """Démarre la commande et attend sa fin.

        Args:
            *opts: Options à appliquer avant le lancement.

        Raises:
            Voir start() et wait(). Si start() échoue, wait() n'est
            pas appelé.
        """
        self.start(*opts)
        self.wait()

    def output(self, *opts: Option) -> bytes:
        """Exécute la commande et retourne sa sortie standard.

        La capture est une option stdout placée avant opts : fournir
        aussi options.stdout lève AlreadySetError.

        Args:
            *opts: Options à appliquer avant le lancement.

        Returns:
            Octets écrits par le processus sur sa sortie standard.

        Raises:
            Exception: Toute erreur de run(), y compris celle d'un
                hook, avec la sortie partielle dans error.output.
        """
        buffer = io.BytesIO()
        try:
            self.run(stdout(buffer), *opts)
        except Exception as error:
            error.output = buffer.getvalue()
            raise
        return buffer.getvalue()

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise NotInitializedError(
                "Commande non initialisée : utilisez "
                "Command(programme, *args)"
            )

    def _apply_default_options(self) -> None:
        if self.env is None:
            self.env = dict(os.environ)

    def _spawn(self) -> None:
        stdin_arg, stdin_source = bind_input(self.stdin)
        stdout_arg, stdout_sink = bind_output(self.stdout)
        stderr_arg, stderr_sink = bind_output(self.stderr)

        process = subprocess.Popen(  # nosec B603
            self.argv,
            cwd=self.dir or None,
            env=self.env,
            stdin=stdin_arg,
            stdout=stdout_arg,
            stderr=stderr_arg,
        )
        self._process = process

        if stdin_source is not None:
            self._relays.append(StreamRelay(
                "stdin", stdin_source, process.stdin,
                close_writer=True, ignore_broken_pipe=True,
            ))
        if stdout_sink is not None:
            self._relays.append(StreamRelay(
                "stdout", process.stdout, stdout_sink, close_reader=True,
            ))
        if stderr_sink is not None:
            self._relays.append(StreamRelay(
                "stderr", process.stderr, stderr_sink, close_reader=True,
            ))
        for relay in self._relays:
            relay.start()

        self._log_info(self._formatter.format_start(
            self.argv, process.pid, self._is_root
        ))

    def _wait_process(self) -> None:
        if self._process is None:
            raise NotStartedError("Commande non démarrée")
        returncode = self._process.wait()
        failed: Optional[StreamRelay] = None
        for relay in self._relays:
            if relay.join() is not None and failed is None:
                failed = relay

        self._log_info(self._formatter.format_exit(
            self.argv, returncode, self._is_root
        ))
        if returncode != 0:
            raise ExitError(self.argv, returncode)
        if failed is not None:
            raise StreamRelayError(
                f"Relais {failed.name} : {failed.error}"
            ) from failed.error

    def _run_after_hook(self, discard_error: bool = False) -> None:
        if self.after is None:
            return
        if not discard_error:
            self.after(self)
            return
        try:
            self.after(self)
        except Exception as hook_error:
            if self._logger:
                self._logger.log_warning(
                    self._formatter.format_discarded_hook_error(
                        self.argv, hook_error, self._is_root
                    )
                )

    def _log_info(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)
