# escalonador

A Round Robin CPU scheduling simulator. Several simulated CPUs share one
ready queue. Each process runs a first burst. It may then block for a while
and afterwards run a second burst. New processes can be sent to a running
simulation through a named pipe. The console messages are in Portuguese.

## Installation

```
pip install .
```

## Running the simulator

```
escalonador
```

Options:

- `--quantum N` sets the time quantum. Without it, the simulator prompts for
  the quantum. A value that is missing, not an integer, or not positive is
  replaced by 2.
- `--cpus N` sets the number of CPUs. The default is 2.
- `--input PATH` sets the file of initial processes. The default is
  `entrada.txt`.
- `--fifo PATH` sets the named pipe used for new processes. The default is
  `fifo_processos`. The simulator creates the pipe if it does not exist.
- `--delay SECONDS` sets the pause after each time unit. The default is 1.0;
  use 0 to run with no pause.

If the input file is missing, the simulator reports it and starts with no
processes.

At each time unit the simulator does the following, in this order:

1. It reads one record from the pipe, if one is waiting.
2. It moves processes that arrive at the current time to the ready queue.
3. It counts down blocked processes.
4. It gives each idle CPU the next ready process.
5. Each CPU blocks, finishes or preempts its process, as its counters require.
6. It prints the state of each CPU and of the ready and blocked queues.

The run stops once the ready queue, the blocked queue and every CPU are
empty. It then prints statistics for each process: turnaround, start and end
time, waiting time, CPU time and context switches. After that it prints a
timeline of what each CPU ran. An idle slot is shown as `o`. An unfinished
process is reported as `não finalizado`.

### Input format

Each line of the input file holds six integers, and so does each record sent
through the pipe:

```
id arrival_time exec1 blocks(0 or 1) block_time exec2
```

For example:

```
1 0 5 1 3 2
2 1 4 0 0 0
3 2 3 0 0 0
```

Process 1 arrives at time 0 and runs for 5 units. It then blocks for 3 units
and runs for 2 more. Blank lines are skipped. Malformed lines are reported
and ignored. Tokens after the sixth are ignored. At most 100 processes are
kept.

## Adding processes while the simulator runs

Open a second terminal in the same directory and run:

```
escalonador-inserir
```

The `--fifo PATH` option selects the pipe; the default is `fifo_processos`.
Type the six fields of a record and the command writes them to the pipe.
A process whose arrival time has already passed joins the ready queue at
once. Otherwise it joins the queue when its arrival time comes. Type `sair`,
or end the input, to quit.

## Using it as a library

```python
import sys

from escalonador.process import parse_process
from escalonador.report import format_statistics
from escalonador.scheduler import Scheduler

scheduler = Scheduler(quantum=2, cpus=2, max_processes=100, output=sys.stdout)
scheduler.add_process(parse_process("1 0 3 0 0 0", 2))
scheduler.add_process(parse_process("2 0 4 1 2 1", 2))

for time in scheduler.run(delay=0):
    pass

print(format_statistics(scheduler))
```

Parts of the package:

- `escalonador.process` provides `Process`, the `State` enum, and
  `parse_process`, which raises `ValueError` on a malformed record.
- `Scheduler.run(source, delay)` is a generator that yields the current time
  once per cycle. `source` is an optional callable that returns a new record
  string or `None`. Event messages are written to `output`, or to standard
  output when `output` is `None`.
- `Scheduler` also exposes each step on its own: `receive`, `check_arrivals`,
  `update_blocked`, `assign`, `cpu_step`, `advance` and `is_idle`.
- `escalonador.report` provides `process_statistics`, `format_ready_queue`,
  `format_blocked_queue`, `format_cpu_status`, `format_timeline` and
  `format_statistics`.

## What it does not do

The CPUs are simulated one after another within a single thread; no operating
system threads run the processes. The `TID` shown for each CPU is its index,
not a real thread id. The named pipe relies on `os.mkfifo`, so the two
commands work only on POSIX systems.

## Running the tests

```
pip install .[test]
pytest
```