"""Focus mode: a countdown timer for a single task, shown in the terminal."""

from __future__ import annotations

import argparse
import re
import signal
import sys
import time
from collections.abc import Callable
from typing import TextIO

_RULE = "=================================================="
_LINE = "--------------------------------------------------"
_TITLE = "                            MODO FOCO"
_CLEAR = "\r" + " " * 60 + "\r"
_INT_RE = re.compile(r"[+-]?\d+")


def format_remaining(seconds: float) -> str:
    """Format a remaining time in seconds as MM:SS (minutes are not capped)."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def _header(stream: TextIO) -> None:
    stream.write(f"{_RULE}\n{_TITLE}\n{_RULE}\n")


def run_focus_session(
    minutes: int,
    task: str,
    *,
    stream: TextIO | None = None,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> bool:
    """Count down ``minutes`` for ``task``, updating once a second.

    Returns True when the session runs to its end and False when it is
    interrupted with KeyboardInterrupt.
    """
    if minutes <= 0:
        raise ValueError("A duração deve ser maior que zero minutos.")
    stream = sys.stdout if stream is None else stream
    clock = time.monotonic if clock is None else clock
    sleep = time.sleep if sleep is None else sleep

    _header(stream)
    end = clock() + minutes * 60

    stream.write(f"\n                TEMPO RESTANTE: {minutes:02d}:00\n")
    stream.write(f"\n                TAREFA: {task}\n")
    stream.write(f"\n{_LINE}\n")
    stream.write("Mantenha o foco! Pressione CTRL+C para sair.\n")
    stream.flush()

    try:
        while True:
            sleep(1)
            remaining = end - clock()
            if remaining <= 0:
                stream.write(_CLEAR)
                _header(stream)
                stream.write("\n                SESSÃO CONCLUÍDA!\n")
                stream.write(f"\n                TAREFA: {task}")
                stream.write(f"\n                DURAÇÃO: {minutes} minutos\n")
                stream.write(f"\n{_LINE}\n")
                stream.write("Bom trabalho! Deseja iniciar outra sessão? (s/N) ")
                stream.write("\n")
                stream.flush()
                return True
            stream.write(f"\r                TEMPO RESTANTE: {format_remaining(remaining)}")
            stream.flush()
    except KeyboardInterrupt:
        stream.write(_CLEAR)
        stream.write("\n\nSessão de foco interrompida pelo usuário.\n")
        stream.write(f"{_LINE}\n")
        stream.flush()
        return False


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``foco`` command."""
    parser = argparse.ArgumentParser(
        prog="foco", description="Gerencia o modo de foco para trabalho concentrado."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    start = commands.add_parser("iniciar", help="Inicia uma nova sessão de foco.")
    start.add_argument("duracao", help="duração em minutos")
    start.add_argument("tarefa", help="descrição da tarefa")
    args = parser.parse_args(argv)

    if not _INT_RE.fullmatch(args.duracao):
        print("Erro: A duração deve ser um número inteiro de minutos.")
        return 1
    minutes = int(args.duracao)
    if minutes <= 0:
        print("Erro: A duração deve ser maior que zero minutos.")
        return 1

    # SIGTERM ends the session the same way CTRL+C does.
    try:
        previous = signal.signal(signal.SIGTERM, signal.default_int_handler)
    except ValueError:
        previous = None
    try:
        run_focus_session(minutes, args.tarefa)
    finally:
        if previous is not None:
            signal.signal(signal.SIGTERM, previous)
    return 0