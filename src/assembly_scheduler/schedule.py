"""Schedule state written by the scheduler and the read-only result view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from assembly_scheduler.types import Assignment, ScheduleAbortedError


class RunStatus(str, Enum):
    """Terminal state of a scheduling run."""

    COMPLETED = "completed"
    # No unscheduled job had all of its dependencies complete.
    CYCLE = "cycle"
    # Jobs were ready but a whole pass committed none of them.
    STALLED = "stalled"


@dataclass
class Schedule:
    """Write-once per job. Populated one job at a time by the scheduler."""

    _assignments: dict[int, Assignment] = field(default_factory=dict, init=False)
    makespan: int = field(default=0, init=False)

    def __contains__(self, job_id: int) -> bool:
        return job_id in self._assignments

    def __len__(self) -> int:
        return len(self._assignments)

    @property
    def end_times(self) -> dict[int, int]:
        return {job_id: a.end for job_id, a in self._assignments.items()}

    def record(self, assignment: Assignment) -> None:
        """Write a job's entry and extend the makespan.

        Raises ValueError if the job already has an entry.
        """
        if assignment.job_id in self._assignments:
            raise ValueError(f"Job {assignment.job_id} is already scheduled")
        self._assignments[assignment.job_id] = assignment
        self.makespan = max(self.makespan, assignment.end)

    def assignments(self) -> tuple[Assignment, ...]:
        """Entries in commit order."""
        return tuple(self._assignments.values())


@dataclass(frozen=True)
class ScheduleResult:
    """Read-only view over a finished (or aborted) run.

    Invariants:
        - makespan == max(a.end for a in assignments), or 0 if empty
        - status is COMPLETED iff unscheduled is empty
    """

    assignments: tuple[Assignment, ...]
    line_jobs: Mapping[int, tuple[int, ...]]
    makespan: int
    status: RunStatus = RunStatus.COMPLETED
    unscheduled: tuple[int, ...] = ()

    @classmethod
    def from_schedule(
        cls,
        schedule: Schedule,
        line_jobs: dict[int, tuple[int, ...]],
        status: RunStatus,
        unscheduled: tuple[int, ...] = (),
    ) -> ScheduleResult:
        return cls(
            assignments=schedule.assignments(),
            line_jobs=MappingProxyType(dict(line_jobs)),
            makespan=schedule.makespan,
            status=status,
            unscheduled=tuple(sorted(unscheduled)),
        )

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.COMPLETED

    @property
    def start_times(self) -> dict[int, int]:
        return {a.job_id: a.start for a in self.assignments}

    @property
    def end_times(self) -> dict[int, int]:
        return {a.job_id: a.end for a in self.assignments}

    @property
    def durations(self) -> dict[int, int]:
        return {a.job_id: a.duration for a in self.assignments}

    @property
    def job_to_line(self) -> dict[int, int]:
        return {a.job_id: a.line_id for a in self.assignments}

    @property
    def job_to_worker(self) -> dict[int, int]:
        return {a.job_id: a.worker_id for a in self.assignments}

    def assignment(self, job_id: int) -> Assignment:
        """Entry for ``job_id``. Raises KeyError if it was never scheduled."""
        for a in self.assignments:
            if a.job_id == job_id:
                return a
        raise KeyError(job_id)

    def raise_for_status(self) -> ScheduleResult:
        """Return self if the run completed, else raise ScheduleAbortedError."""
        if not self.ok:
            raise ScheduleAbortedError(self.status, self.unscheduled, self)
        return self
