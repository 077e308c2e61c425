"""Round-robin scheduling over several simulated CPUs."""

from __future__ import annotations

import copy
import sys
import time as _time
from collections import deque
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TextIO

from .process import Process, State, parse_process


class Scheduler:
    """Discrete-time round-robin scheduler with ready and blocked queues.

    Queues and the process table hold independent copies of each process;
    the table is refreshed whenever a running process leaves its CPU.
    """

    def __init__(
        self,
        quantum: int = 2,
        cpus: int = 2,
        max_processes: int = 100,
        output: TextIO | None = None,
    ) -> None:
        if quantum <= 0:
            raise ValueError("quantum must be positive")
        if cpus <= 0:
            raise ValueError("at least one CPU is required")
        self.quantum = quantum
        self.cpus = cpus
        self.max_processes = max_processes
        self.output = output
        self.time = 0
        self.processes: list[Process] = []
        self.ready: deque[Process] = deque()
        self.blocked: list[Process] = []
        self.running: list[Process | None] = [None] * cpus
        self.timeline: list[list[int | None]] = [[] for _ in range(cpus)]

    def _emit(self, message: str) -> None:
        print(message, file=self.output if self.output is not None else sys.stdout)

    def _fresh(self, process: Process) -> Process:
        process.state = State.READY
        process.quantum_left = self.quantum
        return process

    def add_process(self, process: Process) -> bool:
        """Record a process in the table; return False when the table is full."""
        if len(self.processes) >= self.max_processes:
            self._emit("Limite máximo de processos atingido!")
            return False
        self.processes.append(process)
        return True

    def add_ready(self, process: Process) -> None:
        """Append a copy of the process to the ready queue, if there is room."""
        if len(self.ready) < self.max_processes:
            self.ready.append(copy.copy(process))
        else:
            self._emit("Fila pronta cheia!")

    def pop_ready(self) -> Process:
        """Remove and return the process at the head of the ready queue."""
        if not self.ready:
            raise IndexError("ready queue is empty")
        return self.ready.popleft()

    def load_file(self, path: str | Path) -> None:
        """Load process records, one per line, from a text file."""
        path = Path(path)
        try:
            handle = path.open(encoding="utf-8")
        except FileNotFoundError:
            self._emit(f"Arquivo {path} não encontrado.")
            return
        with handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if not line:
                    continue
                try:
                    process = parse_process(line, self.quantum)
                except ValueError:
                    self._emit(f"Linha inválida no arquivo: {line}")
                    continue
                self.add_process(self._fresh(process))

    def receive(self, text: str) -> None:
        """Insert a process sent while the simulation is running."""
        if not text:
            return
        try:
            process = self._fresh(parse_process(text, self.quantum))
        except ValueError:
            self._emit(f"Formato inválido no processo recebido: {text}")
            return
        if not self.add_process(process):
            return
        if process.arrival <= self.time:
            self.add_ready(process)
            self._emit(
                f"Evento: processo[{process.id}] inserido dinamicamente e entrou na fila pronta"
            )
            self._emit(
                f"Processo info - id: {process.id}, tempo_chegada: {process.arrival}, "
                f"exec1: {process.exec1}, bloqueio: {int(process.has_block)}, "
                f"espera: {process.block_time}, exec2: {process.exec2}"
            )
        else:
            self._emit(
                f"Evento: processo[{process.id}] inserido dinamicamente com chegada futura"
            )

    def check_arrivals(self) -> None:
        """Move processes arriving at the current time into the ready queue."""
        for process in self.processes:
            if process.state is State.READY and process.arrival == self.time:
                self.add_ready(process)
                self._emit(
                    f"Evento: processo[{process.id}] chegou no tempo {self.time} "
                    "e entrou na fila pronta"
                )

    def update_blocked(self) -> None:
        """Count down blocked processes and release those whose wait is over."""
        still_blocked: list[Process] = []
        for process in self.blocked:
            process.block_left -= 1
            self._emit(
                f"Evento: processo[{process.id}] bloqueado, resta "
                f"{process.block_left} unidades"
            )
            if process.block_left <= 0:
                self._fresh(process)
                process.phase2_started = True
                process.remaining = process.exec2
                self.add_ready(process)
                self._emit(
                    f"Evento: processo[{process.id}] desbloqueado e voltou para fila "
                    "pronta (2 tempo de execucao)"
                )
            else:
                still_blocked.append(process)
        self.blocked = still_blocked

    def assign(self, cpu: int) -> None:
        """Give an idle CPU the next ready process."""
        if self.running[cpu] is not None or not self.ready:
            return
        process = self.pop_ready()
        process.state = State.RUNNING
        process.context_switches += 1
        process.quantum_left = self.quantum
        if process.start_time is None:
            process.start_time = self.time
        self.running[cpu] = process
        self._emit(
            f"Evento: CPU{cpu + 1} iniciou processo[{process.id}] "
            f"(tempo restante {process.remaining}, quantum {process.quantum_left})"
        )

    def _sync_table(self, process: Process) -> None:
        for index, original in enumerate(self.processes):
            if original.id == process.id:
                self.processes[index] = copy.copy(process)
                break

    def cpu_step(self, cpu: int) -> None:
        """Block, finish or preempt the process on a CPU as its counters dictate."""
        process = self.running[cpu]
        if process is None:
            return
        if process.remaining == 0:
            if process.has_block and not process.phase2_started:
                process.state = State.BLOCKED
                process.block_left = process.block_time
                self._sync_table(process)
                if len(self.blocked) < self.max_processes:
                    self.blocked.append(copy.copy(process))
                    self._emit(
                        f"Evento: processo[{process.id}] bloqueado por "
                        f"{process.block_time} unidades"
                    )
                else:
                    self._emit("Fila bloqueados cheia!")
            else:
                process.state = State.FINISHED
                process.end_time = self.time
                self._emit(f"Evento: processo[{process.id}] finalizado no tempo {self.time}")
                self._sync_table(process)
            self.running[cpu] = None
        elif process.quantum_left == 0:
            self._fresh(process)
            self._emit(
                f"Evento: quantum do processo[{process.id}] esgotado, volta para fila "
                f"de pronto (faltam {process.remaining} tempos para terminar a execução)"
            )
            self._sync_table(process)
            self.add_ready(process)
            self.running[cpu] = None

    def advance(self) -> None:
        """Record the timeline, spend one unit on each running process, tick the clock."""
        for cpu, process in enumerate(self.running):
            self.timeline[cpu].append(process.id if process is not None else None)
        for process in self.running:
            if process is not None:
                process.remaining -= 1
                process.quantum_left -= 1
        self.time += 1

    def is_idle(self) -> bool:
        """True when no process is ready, blocked or running."""
        return not self.ready and not self.blocked and all(p is None for p in self.running)

    def run(
        self,
        source: Callable[[], str | None] | None = None,
        delay: float = 1.0,
    ) -> Iterator[int]:
        """Run the simulation until every queue and CPU is empty.

        ``source`` is polled once per cycle for a newly submitted process record.
        Yields the current time after each cycle's CPU steps, before the clock
        advances, so callers can report the state of that cycle.
        """
        while True:
            self._emit(f"\nTempo[{self.time}] --------------")
            if source is not None:
                text = source()
                if text:
                    self.receive(text)
            self.check_arrivals()
            self.update_blocked()
            for cpu in range(self.cpus):
                self.assign(cpu)
            for cpu in range(self.cpus):
                self.cpu_step(cpu)
            yield self.time
            self.advance()
            if delay:
                _time.sleep(delay)
            if self.is_idle():
                self._emit("Nenhum processo para executar. Finalizando simulador.")
                return