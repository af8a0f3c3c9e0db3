"""Raccordement des flux standard d'un processus enfant.

Un flux adossé à un descripteur de fichier (fichier ouvert,
sys.stdout d'un terminal, entier) est transmis tel quel à Popen.
Les autres objets (io.BytesIO, io.StringIO, objets « file-like »)
passent par un tube et un thread de relais qui copie les octets.
"""

import codecs
import io
import subprocess  # nosec B404
import threading
from typing import IO, Any, Callable, Optional, Tuple, Union

CHUNK_SIZE = 32 * 1024

Stream = Union[int, IO[Any], Any]


def fileno_of(stream: Stream) -> Optional[int]:
    """Retourne le descripteur de fichier d'un flux, ou None.

    Args:
        stream: Entier (descripteur) ou objet fichier.

    Returns:
        Descripteur utilisable par Popen, None si le flux n'en a pas.
    """
    if isinstance(stream, int):
        return stream
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def bind_input(source: Optional[Stream]) -> Tuple[Any, Optional[Stream]]:
    """Prépare l'argument stdin de Popen.

    Args:
        source: Source configurée, None si non définie.

    Returns:
        Tuple (argument Popen, source à relayer ou None).
    """
    if source is None:
        return subprocess.DEVNULL, None
    fd = fileno_of(source)
    if fd is not None:
        return fd, None
    return subprocess.PIPE, source


def bind_output(sink: Optional[Stream]) -> Tuple[Any, Optional[Stream]]:
    """Prépare l'argument stdout ou stderr de Popen.

    Un puits adossé à un descripteur est vidé avant le lancement
    pour que ses données en tampon précèdent celles de l'enfant.

    Args:
        sink: Destination configurée, None si non définie.

    Returns:
        Tuple (argument Popen, destination à relayer ou None).
    """
    if sink is None:
        return subprocess.DEVNULL, None
    fd = fileno_of(sink)
    if fd is not None:
        flush = getattr(sink, "flush", None)
        if callable(flush):
            flush()
        return fd, None
    return subprocess.PIPE, sink


def _binary_writer(sink: Any) -> Tuple[Callable[[bytes], Any],
                                       Callable[[], None]]:
    """Adapte un puits texte ou binaire à l'écriture d'octets.

    Returns:
        Tuple (fonction d'écriture, fonction de finalisation).
    """
    if not isinstance(sink, io.TextIOBase):
        return sink.write, lambda: None
    encoding = getattr(sink, "encoding", None) or "utf-8"
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

    def write(chunk: bytes) -> None:
        sink.write(decoder.decode(chunk))

    def finish() -> None:
        sink.write(decoder.decode(b"", final=True))

    return write, finish


class StreamRelay:
    """Copie un flux vers un autre dans un thread dédié.

    L'erreur éventuelle est conservée et restituée par join() ;
    Command.wait la transforme en StreamRelayError.

    Attributes:
        name: Nom du flux relayé (stdin, stdout, stderr).
        error: Exception survenue pendant la copie, ou None.
    """

    def __init__(
        self,
        name: str,
        reader: Any,
        writer: Any,
        close_reader: bool = False,
        close_writer: bool = False,
        ignore_broken_pipe: bool = False,
    ) -> None:
        """
        Initialise le relais.

        Args:
            name: Nom du flux relayé
            reader: Objet lisible (read1 ou read)
            writer: Objet inscriptible, texte ou binaire
            close_reader: Fermer le lecteur en fin de copie
            close_writer: Fermer l'écrivain en fin de copie
            ignore_broken_pipe: Ignorer un tube fermé par l'enfant
        """
        self.name = name
        self.error: Optional[Exception] = None
        self._reader = reader
        self._writer = writer
        self._close_reader = close_reader
        self._close_writer = close_writer
        self._ignore_broken_pipe = ignore_broken_pipe
        self._thread = threading.Thread(
            target=self._copy,
            name=f"relay-{name}",
            daemon=True,
        )

    def start(self) -> None:
        """Démarre la copie en arrière-plan."""
        self._thread.start()

    def join(self) -> Optional[Exception]:
        """Attend la fin de la copie.

        Returns:
            L'exception survenue pendant la copie, ou None.
        """
        self._thread.join()
        return self.error

    def _copy(self) -> None:
        read = getattr(self._reader, "read1", self._reader.read)
        write, finish = _binary_writer(self._writer)
        try:
            while True:
                chunk = read(CHUNK_SIZE)
                if not chunk:
                    break
                if isinstance(chunk, str):
                    chunk = chunk.encode()
                write(chunk)
            finish()
            flush = getattr(self._writer, "flush", None)
            if callable(flush):
                flush()
        except BrokenPipeError as e:
            if not self._ignore_broken_pipe:
                self.error = e
        except (OSError, ValueError, TypeError) as e:
            self.error = e
        finally:
            self._close()

    def _close(self) -> None:
        for stream, enabled in ((self._reader, self._close_reader),
                                (self._writer, self._close_writer)):
            if not enabled:
                continue
            try:
                stream.close()
            except BrokenPipeError as e:
                if not self._ignore_broken_pipe and self.error is None:
                    self.error = e
            except OSError as e:
                if self.error is None:
                    self.error = e
