"""Shared types: jobs, workers, assembly lines, Assignment and ScheduleAbortedError."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assembly_scheduler.schedule import RunStatus, ScheduleResult


@dataclass
class Job:
    """A unit of work with precedence and skill constraints.

    ``job_id`` doubles as the job's index in the job collection.
    """

    job_id: int
    processing_time: int
    dependencies: tuple[int, ...] = ()
    skill_required: int = 0
    completed: bool = False


@dataclass
class Worker:
    """A worker with a skill level and the time they are next free."""

    worker_id: int
    skill_level: int
    busy_until: int = 0

    def is_available(self, start: int) -> bool:
        return self.busy_until <= start

    def is_qualified(self, job: Job) -> bool:
        return self.skill_level >= job.skill_required


@dataclass(frozen=True)
class MaintenanceWindow:
    """Blocked interval on a line: [start, start + duration).

    Carried as data and reported; the greedy pass does not consult it.
    """

    start: int
    duration: int

    @property
    def end(self) -> int:
        return self.start + self.duration

    def overlaps(self, begin: int, end: int) -> bool:
        """Whether [begin, end) intersects this window."""
        return begin < self.end and self.start < end


@dataclass
class AssemblyLine:
    """Mutable clock state for one assembly line.

    speed_factor > 1 processes faster than nominal, < 1 slower.
    """

    line_id: int
    speed_factor: float
    current_time: int = 0
    scheduled_jobs: list[int] = field(default_factory=list)
    maintenance_windows: list[MaintenanceWindow] = field(default_factory=list)

    def fresh(self) -> AssemblyLine:
        """Same line with an idle clock and no jobs, for a new scheduling run."""
        return AssemblyLine(
            line_id=self.line_id,
            speed_factor=self.speed_factor,
            maintenance_windows=list(self.maintenance_windows),
        )


@dataclass(frozen=True)
class Assignment:
    """Immutable record of one committed job.

    Invariants:
        - end > start (actual durations are at least 1)
        - start >= end of every dependency
    """

    job_id: int
    line_id: int
    worker_id: int
    start: int
    end: int
    processing_time: int

    @property
    def duration(self) -> int:
        """Actual (skill- and speed-adjusted) time spent on the line."""
        return self.end - self.start

    def overlaps(self, other: Assignment) -> bool:
        return self.start < other.end and other.start < self.end


class ScheduleAbortedError(Exception):
    """Raised by ScheduleResult.raise_for_status() for an aborted run."""

    def __init__(
        self,
        status: RunStatus,
        unscheduled: tuple[int, ...],
        result: ScheduleResult | None = None,
    ) -> None:
        self.status = status
        self.unscheduled = unscheduled
        self.result = result
        super().__init__(
            f"Scheduling aborted ({status.value}): "
            f"{len(unscheduled)} job(s) left unscheduled {list(unscheduled)}"
        )
