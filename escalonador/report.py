"""Text reports on queues, CPU activity and per-process statistics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .process import Process
from .scheduler import Scheduler


@dataclass(frozen=True)
class ProcessStatistics:
    """Turnaround, waiting and CPU time of one process.

    ``turnaround`` and ``waiting`` are ``None`` while the process is unfinished.
    """

    turnaround: int | None
    waiting: int | None
    cpu_time: int


def process_statistics(process: Process) -> ProcessStatistics:
    """Compute the statistics of a process from its recorded times."""
    cpu_time = process.exec1 + (process.exec2 if process.has_block else 0)
    if process.end_time is None:
        return ProcessStatistics(turnaround=None, waiting=None, cpu_time=cpu_time)
    turnaround = process.end_time - process.arrival
    return ProcessStatistics(
        turnaround=turnaround, waiting=turnaround - cpu_time, cpu_time=cpu_time
    )


def _tid(thread_ids: Sequence[object] | None, cpu: int) -> object:
    return thread_ids[cpu] if thread_ids is not None else cpu


def _or_minus_one(value: int | None) -> int:
    return -1 if value is None else value


def format_ready_queue(ready: Iterable[Process]) -> str:
    """Render the ready queue as a list of process ids."""
    ids = ", ".join(str(p.id) for p in ready)
    return f"Fila pronta: [{ids}]"


def format_blocked_queue(blocked: Iterable[Process]) -> str:
    """Render the blocked queue with the time each process has left to wait."""
    items = ", ".join(f"{p.id}({p.block_left}s restantes)" for p in blocked)
    return f"Fila bloqueados: [{items}]"


def format_cpu_status(
    scheduler: Scheduler, thread_ids: Sequence[object] | None = None
) -> str:
    """Describe what each CPU is doing, followed by both queues."""
    lines = []
    for cpu, process in enumerate(scheduler.running):
        prefix = f"CPU{cpu + 1} (TID: {_tid(thread_ids, cpu)}): "
        if process is None:
            lines.append(prefix + "ociosa")
        else:
            lines.append(
                f"{prefix}executando processo[{process.id}] "
                f"(tempo restante: {process.remaining}s, "
                f"quantum restante: {process.quantum_left})"
            )
    lines.append(format_ready_queue(scheduler.ready))
    lines.append(format_blocked_queue(scheduler.blocked))
    return "\n".join(lines)


def format_timeline(
    scheduler: Scheduler, thread_ids: Sequence[object] | None = None
) -> str:
    """Render a time-by-CPU grid of the process ids that ran; idle slots show ``o``."""
    parts = ["\nTempo: ", " " * 19]
    parts.extend(f"{t:>3} " for t in range(scheduler.time))
    for cpu, slots in enumerate(scheduler.timeline):
        parts.append(f"\nCPU{cpu + 1} (TID: {_tid(thread_ids, cpu)}):  ")
        parts.extend(f"{'o' if pid is None else pid:>3} " for pid in slots)
    return "".join(parts)


def format_statistics(
    scheduler: Scheduler, thread_ids: Sequence[object] | None = None
) -> str:
    """Render per-process statistics followed by the CPU timeline."""
    lines = []
    for process in scheduler.processes:
        stats = process_statistics(process)
        turnaround = "não finalizado" if stats.turnaround is None else stats.turnaround
        waiting = "não finalizado" if stats.waiting is None else stats.waiting
        lines.append(
            f"Processo[{process.id}]: Turnaround = {turnaround}, "
            f"Chegada = {process.arrival}, "
            f"Inicio Execucao: {_or_minus_one(process.start_time)}, "
            f"Fim Execucao: {_or_minus_one(process.end_time)}, "
            f"Tempo de espera = {waiting}, "
            f"Tempo da CPU = {stats.cpu_time}, "
            f"Trocas de contexto = {process.context_switches}\n"
        )
    return (
        "\n--- Estatísticas dos Processos ---\n"
        + "".join(lines)
        + "\n--- Estatísticas do CPU ---\n"
        + format_timeline(scheduler, thread_ids)
    )