"""Command-line entry point for the round-robin simulator."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable

from .report import format_cpu_status, format_statistics
from .scheduler import Scheduler

DEFAULT_QUANTUM = 2
DEFAULT_CPUS = 2
DEFAULT_INPUT = "entrada.txt"
DEFAULT_FIFO = "fifo_processos"
_READ_SIZE = 255


def parse_quantum(text: str) -> int:
    """Parse a quantum; raise ValueError unless it is a positive integer."""
    tokens = text.split()
    if not tokens:
        raise ValueError("no quantum given")
    value = int(tokens[0])
    if value <= 0:
        raise ValueError(f"quantum must be positive: {value}")
    return value


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="escalonador", description="Round-robin scheduling simulator."
    )
    parser.add_argument("--quantum", help="time quantum; prompted for when omitted")
    parser.add_argument("--cpus", type=_positive_int, default=DEFAULT_CPUS)
    parser.add_argument("--input", default=DEFAULT_INPUT, help="initial process file")
    parser.add_argument("--fifo", default=DEFAULT_FIFO, help="named pipe for new processes")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds per time unit")
    return parser


def _pipe_reader(fd: int) -> Callable[[], str | None]:
    def poll() -> str | None:
        try:
            data = os.read(fd, _READ_SIZE)
        except BlockingIOError:
            return None
        return data.decode("utf-8", errors="replace") or None

    return poll


def main(argv: list[str] | None = None) -> int:
    """Run the simulator; return the process exit status."""
    args = _parser().parse_args(argv)
    print(f"Iniciando simulador Round Robin com {args.cpus} CPUs (threads)...")

    quantum_text = args.quantum
    if quantum_text is None:
        try:
            quantum_text = input(f"Digite o QUANTUM (padrão {DEFAULT_QUANTUM}): ")
        except EOFError:
            quantum_text = ""
    try:
        quantum = parse_quantum(quantum_text)
    except ValueError:
        print(f" QUANTUM inválido, usando valor padrão {DEFAULT_QUANTUM}.")
        quantum = DEFAULT_QUANTUM
    else:
        print(f"QUANTUM definido como: {quantum}")

    try:
        os.mkfifo(args.fifo, 0o666)
    except OSError:
        pass

    scheduler = Scheduler(quantum=quantum, cpus=args.cpus, output=sys.stdout)
    scheduler.load_file(args.input)

    try:
        fd = os.open(args.fifo, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        print(f"Erro ao abrir {args.fifo}: {exc.strerror}", file=sys.stderr)
        return 1
    print(f"Pipe {args.fifo} aberto para leitura.")

    try:
        for _ in scheduler.run(_pipe_reader(fd), args.delay):
            print(format_cpu_status(scheduler))
        print(format_statistics(scheduler))
    finally:
        os.close(fd)
    return 0


if __name__ == "__main__":
    sys.exit(main())