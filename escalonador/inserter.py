"""Interactive tool that sends new process records to the simulator's pipe."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator, Sequence
from itertools import islice

DEFAULT_FIFO = "fifo_processos"
FIELD_COUNT = 6


def format_record(fields: Sequence[object]) -> str:
    """Join the six fields of a process record into one pipe message."""
    if len(fields) != FIELD_COUNT:
        raise ValueError(f"a process record has {FIELD_COUNT} fields, got {len(fields)}")
    return " ".join(str(f) for f in fields) + "\n"


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _send(path: str, data: str) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_APPEND)
    try:
        os.write(fd, data.encode("utf-8"))
    finally:
        os.close(fd)


def main(argv: list[str] | None = None) -> int:
    """Read records from standard input and write each to the pipe."""
    parser = argparse.ArgumentParser(
        prog="inserir", description="Send new processes to the running simulator."
    )
    parser.add_argument("--fifo", default=DEFAULT_FIFO, help="named pipe to write to")
    args = parser.parse_args(argv)

    tokens = _tokens()
    while True:
        print("Digite novo processo no formato:")
        print("id tempo_chegada exec1 bloqueio(0 ou 1) espera exec2")
        print("(ou digite 'sair' para encerrar)")
        pid = next(tokens, None)
        if pid is None or pid == "sair":
            break
        rest = list(islice(tokens, FIELD_COUNT - 1))
        if len(rest) < FIELD_COUNT - 1:
            break
        try:
            _send(args.fifo, format_record([pid, *rest]))
        except OSError as exc:
            print(
                f"Erro ao abrir {args.fifo} para escrita: {exc.strerror}",
                file=sys.stderr,
            )
            return 1
        print("Processo enviado!")
    return 0


if __name__ == "__main__":
    sys.exit(main())