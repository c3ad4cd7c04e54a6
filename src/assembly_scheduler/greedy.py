"""Greedy list scheduler for precedence-constrained jobs on assembly lines.

Each pass collects the ready jobs (all dependencies complete), orders them
longest-processing-time first, and gives each one the (line, worker) pair
that finishes it earliest. It is a heuristic: no backtracking, no search.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from assembly_scheduler.config import SchedulerConfig
from assembly_scheduler.graph import JobGraph
from assembly_scheduler.pool import ResourcePool
from assembly_scheduler.schedule import RunStatus, Schedule, ScheduleResult
from assembly_scheduler.timing import actual_duration
from assembly_scheduler.types import AssemblyLine, Assignment, Job, Worker

logger = logging.getLogger(__name__)


class GreedyScheduler:
    """One scheduling run over private copies of the jobs, lines and workers.

    The caller's objects are never mutated, so the same inputs can be
    scheduled again (e.g. with another config) by building a new scheduler.
    """

    def __init__(
        self,
        jobs: Iterable[Job],
        lines: Iterable[AssemblyLine],
        workers: Iterable[Worker],
        config: SchedulerConfig | None = None,
    ) -> None:
        self.graph = JobGraph(jobs)
        self.pool = ResourcePool(lines, workers)
        self.config = config or SchedulerConfig()
        self.schedule = Schedule()
        self._unscheduled: set[int] = {job.job_id for job in self.graph.jobs}
        self._result: ScheduleResult | None = None

    def priority_order(self, ready: list[int]) -> list[int]:
        """Longest nominal processing time first; ties keep ready-set order."""
        return sorted(ready, key=lambda job_id: -self.graph[job_id].processing_time)

    def best_assignment(self, job: Job) -> Assignment | None:
        """Earliest-finishing (line, worker) for ``job``, or None if none is free.

        Lines are tried in ascending id order and only a strictly smaller
        end time replaces the current best, so the lowest line id wins ties.
        """
        earliest = self.graph.earliest_start(job, self.schedule.end_times)
        strategy = self.config.reference_worker
        best: Assignment | None = None

        for line in self.pool.line_candidates():
            start = max(earliest, line.current_time)
            worker_id = self.pool.select_worker(job, start)
            if worker_id is None:
                continue

            reference = self.pool.reference_worker(job, strategy, worker_id)
            if reference is None:
                continue
            end = start + actual_duration(job, reference, line)

            if best is None or end < best.end:
                best = Assignment(
                    job_id=job.job_id,
                    line_id=line.line_id,
                    worker_id=worker_id,
                    start=start,
                    end=end,
                    processing_time=job.processing_time,
                )

        return best

    def commit(self, assignment: Assignment) -> None:
        """Record the assignment and advance job, line and worker state."""
        self.schedule.record(assignment)
        self.graph.mark_completed(assignment.job_id)
        self.pool.commit(
            assignment.line_id,
            assignment.worker_id,
            assignment.job_id,
            assignment.end,
        )
        self._unscheduled.discard(assignment.job_id)
        logger.debug(
            "job %d -> line %d, worker %d, [%d, %d)",
            assignment.job_id,
            assignment.line_id,
            assignment.worker_id,
            assignment.start,
            assignment.end,
        )

    def run(self) -> ScheduleResult:
        """Schedule until every job is placed or no progress is possible.

        Aborts (without raising) with RunStatus.CYCLE when no unscheduled
        job is ready, and RunStatus.STALLED when a pass over a non-empty
        ready set commits nothing. The partial schedule is kept either way.
        """
        if self._result is not None:
            return self._result

        status = RunStatus.COMPLETED
        while self._unscheduled:
            ready = self.graph.ready(self._unscheduled)
            if not ready:
                status = RunStatus.CYCLE
                break

            committed = 0
            for job_id in self.priority_order(ready):
                job = self.graph[job_id]
                assignment = self.best_assignment(job)
                if assignment is None:
                    logger.debug("job %d deferred: no free line/worker", job_id)
                    continue
                self.commit(assignment)
                committed += 1

            if committed == 0:
                status = RunStatus.STALLED
                break

        self._result = ScheduleResult.from_schedule(
            self.schedule,
            {line.line_id: tuple(line.scheduled_jobs) for line in self.pool.lines},
            status,
            tuple(self._unscheduled),
        )
        if self._result.ok:
            logger.info(
                "scheduled %d job(s), makespan %d",
                len(self.schedule),
                self._result.makespan,
            )
        else:
            logger.warning(
                "scheduling aborted (%s) with %d job(s) unscheduled: %s",
                status.value,
                len(self._result.unscheduled),
                list(self._result.unscheduled),
            )
        return self._result


def greedy_schedule(
    jobs: Iterable[Job],
    lines: Iterable[AssemblyLine],
    workers: Iterable[Worker],
    config: SchedulerConfig | None = None,
) -> ScheduleResult:
    """Schedule jobs greedily onto lines and workers.

    Args:
        jobs: Jobs whose ids equal their positions in the collection.
        lines: Assembly lines; iterated in ascending id order.
        workers: Workers; scanned first-fit in ascending id order.
        config: Scheduler policy (defaults to SchedulerConfig()).

    Returns:
        ScheduleResult. Check ``result.ok`` or call ``raise_for_status()``.

    Raises:
        ValueError: If the jobs, lines or workers fail validation.
    """
    return GreedyScheduler(jobs, lines, workers, config).run()
