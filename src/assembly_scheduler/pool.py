"""Resource Pool Model: assembly lines and workers for one scheduling run."""

from __future__ import annotations

from collections.abc import Iterable

from assembly_scheduler.config import ReferenceWorker
from assembly_scheduler.schema import validate_lines, validate_workers
from assembly_scheduler.types import AssemblyLine, Job, Worker


class ResourcePool:
    """Mutable line clocks and worker availability for one run.

    Clocks, busy-until times and per-line job lists start at zero and
    empty regardless of the state of the given lines and workers.

    Lines and workers are kept in ascending id order. That order is the
    tie-break for line selection and the scan order for first-fit workers.
    """

    def __init__(
        self,
        lines: Iterable[AssemblyLine],
        workers: Iterable[Worker],
    ) -> None:
        self._lines = sorted(
            (line.fresh() for line in lines),
            key=lambda line: line.line_id,
        )
        self._workers = sorted(
            (Worker(w.worker_id, w.skill_level) for w in workers),
            key=lambda w: w.worker_id,
        )
        errors = validate_lines(self._lines)
        errors.extend(validate_workers(self._workers))
        if errors:
            raise ValueError(
                "Invalid resource pool:\n" + "\n".join(f"  - {e}" for e in errors)
            )
        self._line_index = {line.line_id: line for line in self._lines}
        self._worker_index = {w.worker_id: w for w in self._workers}

    @property
    def lines(self) -> tuple[AssemblyLine, ...]:
        return tuple(self._lines)

    @property
    def workers(self) -> tuple[Worker, ...]:
        return tuple(self._workers)

    def line(self, line_id: int) -> AssemblyLine:
        return self._line_index[line_id]

    def worker(self, worker_id: int) -> Worker:
        return self._worker_index[worker_id]

    def copy(self) -> ResourcePool:
        """Clean pool over the same lines and workers for an independent run."""
        return ResourcePool(self._lines, self._workers)

    def line_candidates(self) -> tuple[AssemblyLine, ...]:
        """All lines, ascending by id."""
        return tuple(self._lines)

    def select_worker(self, job: Job, not_before: int) -> int | None:
        """First-fit: lowest-id worker qualified for ``job`` and free at ``not_before``.

        Does not look for the closest skill match or the earliest free
        worker; returns None if nobody qualifies at that instant.
        """
        for worker in self._workers:
            if worker.is_qualified(job) and worker.is_available(not_before):
                return worker.worker_id
        return None

    def reference_worker(
        self,
        job: Job,
        strategy: ReferenceWorker,
        assigned: int | None = None,
    ) -> Worker | None:
        """Worker whose skill is used to estimate a job's duration when ranking lines.

        MIN_SKILL and MAX_SKILL pick among workers qualified for the job;
        ASSIGNED returns the worker chosen by select_worker().
        """
        if strategy is ReferenceWorker.FIRST:
            return self._workers[0] if self._workers else None
        if strategy is ReferenceWorker.ASSIGNED:
            return None if assigned is None else self._worker_index[assigned]

        qualified = [w for w in self._workers if w.is_qualified(job)]
        if not qualified:
            return None
        # min/max return the first of equal keys, so ties go to the lower id
        if strategy is ReferenceWorker.MIN_SKILL:
            return min(qualified, key=lambda w: w.skill_level)
        return max(qualified, key=lambda w: w.skill_level)

    def commit(self, line_id: int, worker_id: int, job_id: int, end: int) -> None:
        """Advance the line clock and worker availability to ``end``."""
        line = self._line_index[line_id]
        worker = self._worker_index[worker_id]
        line.scheduled_jobs.append(job_id)
        line.current_time = max(line.current_time, end)
        worker.busy_until = max(worker.busy_until, end)
