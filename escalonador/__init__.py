"""Round Robin CPU scheduling simulator: processes, scheduler, reports and commands."""

__version__ = "0.1.0"