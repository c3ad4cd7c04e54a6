"""Read-only metrics over a ScheduleResult."""

from __future__ import annotations

from collections.abc import Iterable

from assembly_scheduler.schedule import ScheduleResult
from assembly_scheduler.types import AssemblyLine, Job, Worker


def _percent(part: int, whole: int) -> float:
    return part / whole * 100.0 if whole > 0 else 0.0


def worker_work_time(result: ScheduleResult, workers: Iterable[Worker]) -> dict[int, int]:
    """Total actual time each worker spent on jobs. Idle workers map to 0."""
    totals = {w.worker_id: 0 for w in workers}
    for a in result.assignments:
        totals[a.worker_id] = totals.get(a.worker_id, 0) + a.duration
    return totals


def worker_utilization(
    result: ScheduleResult, workers: Iterable[Worker]
) -> dict[int, float]:
    """Work time as a percentage of makespan (0.0 for an empty schedule)."""
    return {
        worker_id: _percent(total, result.makespan)
        for worker_id, total in worker_work_time(result, workers).items()
    }


def line_utilization(
    result: ScheduleResult, lines: Iterable[AssemblyLine]
) -> dict[int, float]:
    """Busy time on each line as a percentage of makespan."""
    busy = {line.line_id: 0 for line in lines}
    for a in result.assignments:
        busy[a.line_id] = busy.get(a.line_id, 0) + a.duration
    return {line_id: _percent(total, result.makespan) for line_id, total in busy.items()}


def average_waiting_time(result: ScheduleResult, jobs: Iterable[Job]) -> float:
    """Mean delay between a job's dependencies finishing and its start.

    Only scheduled jobs count. Returns 0.0 when nothing was scheduled.
    """
    end_times = result.end_times
    start_times = result.start_times
    waits: list[int] = []
    for job in jobs:
        if job.job_id not in start_times:
            continue
        ready_at = max((end_times[d] for d in job.dependencies), default=0)
        waits.append(start_times[job.job_id] - ready_at)
    return sum(waits) / len(waits) if waits else 0.0


def maintenance_summary(lines: Iterable[AssemblyLine]) -> dict[int, list[tuple[int, int]]]:
    """Maintenance windows per line as (start, end) pairs."""
    return {
        line.line_id: [(w.start, w.end) for w in line.maintenance_windows]
        for line in lines
    }


def maintenance_conflicts(
    result: ScheduleResult, lines: Iterable[AssemblyLine]
) -> list[tuple[int, int]]:
    """(job_id, line_id) pairs whose interval overlaps a maintenance window.

    The scheduler does not avoid maintenance windows; this reports where
    a stricter policy would have had to move work.
    """
    windows = {line.line_id: line.maintenance_windows for line in lines}
    conflicts = []
    for a in result.assignments:
        if any(w.overlaps(a.start, a.end) for w in windows.get(a.line_id, ())):
            conflicts.append((a.job_id, a.line_id))
    return conflicts
