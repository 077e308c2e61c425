"""Process records for the round-robin simulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class State(Enum):
    """Lifecycle state of a simulated process."""

    READY = "pronto"
    RUNNING = "executando"
    BLOCKED = "bloqueado"
    FINISHED = "finalizado"


@dataclass
class Process:
    """A simulated process with two CPU bursts separated by an optional block.

    ``start_time`` and ``end_time`` stay ``None`` until the process first
    runs and finishes, respectively.
    """

    id: int
    arrival: int
    exec1: int
    has_block: bool
    block_time: int
    exec2: int
    quantum_left: int = 2
    remaining: int = field(init=False, default=0)
    block_left: int = 0
    state: State = State.READY
    start_time: int | None = None
    end_time: int | None = None
    waiting_time: int = 0
    context_switches: int = 0
    phase2_started: bool = False

    def __post_init__(self) -> None:
        self.remaining = self.exec1


def parse_process(text: str, quantum: int) -> Process:
    """Parse ``id arrival exec1 block(0|1) wait exec2`` into a ready process.

    Tokens past the sixth are ignored. Raises ValueError on a malformed record.
    """
    tokens = text.split()
    if len(tokens) < 6:
        raise ValueError(f"invalid process record: {text!r}")
    try:
        pid, arrival, exec1, blocking, block_time, exec2 = (int(t) for t in tokens[:6])
    except ValueError as exc:
        raise ValueError(f"invalid process record: {text!r}") from exc
    return Process(
        id=pid,
        arrival=arrival,
        exec1=exec1,
        has_block=blocking == 1,
        block_time=block_time,
        exec2=exec2,
        quantum_left=quantum,
    )