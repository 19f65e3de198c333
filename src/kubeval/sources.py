# src/kubeval/sources.py
"""Resolução da origem dos documentos: stdin (um buffer) ou lista de arquivos.

Os dois modos são normalizados em uma sequência de `DocumentInput(name, content)`.
"""

from __future__ import annotations

import logging
import os
import stat
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import IO, NamedTuple

from .errors import FatalError

logger = logging.getLogger(__name__)

DEFAULT_STDIN_NAME = "stdin"


class DocumentInput(NamedTuple):
    name: str
    content: bytes


def stdin_is_piped(stream: IO, platform: str | None = None) -> bool:
    """True se stdin veio de pipe/redirecionamento (i.e. não é um char device).

    Em Windows o `fstat` pode falhar quando nada é passado em stdin; nesse caso
    caímos para o modo de arquivos em vez de abortar.
    """
    platform = platform or sys.platform
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError, AttributeError) as ex:
        if platform.startswith("win"):
            logger.debug("stdin stat falhou no Windows (%s); usando argumentos", ex)
            return False
        raise FatalError(f"Could not inspect stdin: {ex}") from ex
    return not stat.S_ISCHR(mode)


def read_stdin(stream: IO) -> bytes:
    """Lê stdin inteiro; cada linha é re-terminada com '\\n' (sem '\\r' final)."""
    raw = getattr(stream, "buffer", stream).read()
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    lines = raw.split(b"\n")
    if lines and lines[-1] == b"":
        lines.pop()
    return b"".join(line.rstrip(b"\r") + b"\n" for line in lines)


def iter_file_inputs(paths: Sequence[str]) -> Iterator[DocumentInput]:
    """Lê os arquivos na ordem dada, um por vez (lazy).

    Falha de leitura aborta o run: os arquivos seguintes nunca são lidos.
    """
    if len(paths) < 1:
        raise FatalError("You must pass at least one file as an argument")
    for name in paths:
        path = Path(name).resolve()
        try:
            content = path.read_bytes()
        except OSError as ex:
            raise FatalError(f"Could not open file {name}") from ex
        yield DocumentInput(name, content)


def resolve_inputs(
    paths: Sequence[str],
    stdin: IO,
    filename: str = DEFAULT_STDIN_NAME,
    platform: str | None = None,
) -> tuple[bool, Iterable[DocumentInput]]:
    """Escolhe exatamente um modo. Retorna (stdin_mode, inputs)."""
    if stdin_is_piped(stdin, platform):
        return True, [DocumentInput(filename or DEFAULT_STDIN_NAME, read_stdin(stdin))]
    if len(paths) < 1:
        raise FatalError("You must pass at least one file as an argument")
    return False, iter_file_inputs(paths)
