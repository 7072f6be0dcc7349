"""Job scheduling by first-come-first-served or shortest-job-first."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dskit.bounded_queue import MAX_SIZE, BoundedQueue


class Policy(Enum):
    """The order in which queued jobs are run."""

    FIFO = 1
    SJF = 2


@dataclass(frozen=True)
class Process:
    """A job with an identifier, an arrival time and an execution time."""

    pid: int
    arrival_time: int
    execution_time: int

    def __post_init__(self) -> None:
        if self.arrival_time < 0:
            raise ValueError(f"arrival time must not be negative, got {self.arrival_time}")
        if self.execution_time < 0:
            raise ValueError(f"execution time must not be negative, got {self.execution_time}")


@dataclass(frozen=True)
class SchedulerResult:
    """Totals over all jobs, and the process ids in the order they ran."""

    waiting_time: int
    turnaround_time: int
    order: tuple[int, ...] = ()


class Scheduler:
    """Queue of jobs (at most ``MAX_SIZE``) scheduled by a fixed policy."""

    def __init__(self, policy: Policy) -> None:
        self.policy = Policy(policy)
        self._jobs = BoundedQueue(MAX_SIZE)

    def add(self, process: Process) -> Process:
        """Queue ``process`` and return it."""
        return self._jobs.add(process)

    def __len__(self) -> int:
        return len(self._jobs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.policy.name}, {list(self._jobs)!r})"

    def _next_job(self, remaining: list[Process], clock: int) -> Process:
        current = remaining[0]
        if self.policy is Policy.SJF:
            for process in remaining[1:]:
                if process.arrival_time <= clock and process.execution_time < current.execution_time:
                    current = process
        return current

    def result(self) -> SchedulerResult:
        """Run every queued job from time 0 and return the total waiting and turnaround times."""
        remaining = list(self._jobs)
        clock = waiting = turnaround = 0
        order: list[int] = []
        while remaining:
            process = self._next_job(remaining, clock)
            remaining.remove(process)
            start = max(clock, process.arrival_time)
            waiting += start - process.arrival_time
            clock = start + process.execution_time
            turnaround += clock - process.arrival_time
            order.append(process.pid)
        return SchedulerResult(waiting, turnaround, tuple(order))