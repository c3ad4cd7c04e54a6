"""Job Graph Model: precedence and readiness queries over a job collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from assembly_scheduler.schema import validate_jobs
from assembly_scheduler.types import Job


class JobGraph:
    """Owns one run's copy of the jobs and their completion flags.

    Jobs are indexed by id and every run starts with all of them
    incomplete, whatever flags the given jobs carry. Construction fails
    fast on invalid input (dangling or self dependencies, non-dense ids);
    cycles spanning several jobs surface later as an empty ready set.
    """

    def __init__(self, jobs: Iterable[Job]) -> None:
        self._jobs: list[Job] = [
            Job(
                job_id=j.job_id,
                processing_time=j.processing_time,
                dependencies=tuple(j.dependencies),
                skill_required=j.skill_required,
            )
            for j in jobs
        ]
        errors = validate_jobs(self._jobs)
        if errors:
            raise ValueError(
                "Invalid job graph:\n" + "\n".join(f"  - {e}" for e in errors)
            )

    def __len__(self) -> int:
        return len(self._jobs)

    def __getitem__(self, job_id: int) -> Job:
        return self._jobs[job_id]

    @property
    def jobs(self) -> tuple[Job, ...]:
        return tuple(self._jobs)

    def dependencies_satisfied(self, job: Job) -> bool:
        """True iff every dependency of ``job`` is completed."""
        return all(self._jobs[dep].completed for dep in job.dependencies)

    def earliest_start(self, job: Job, end_times: Mapping[int, int]) -> int:
        """Lower bound on start: latest end among already scheduled dependencies."""
        earliest = 0
        for dep in job.dependencies:
            if dep in end_times:
                earliest = max(earliest, end_times[dep])
        return earliest

    def ready(self, unscheduled: Iterable[int]) -> list[int]:
        """Unscheduled job ids whose dependencies are all complete, ascending."""
        return [
            job_id
            for job_id in sorted(unscheduled)
            if self.dependencies_satisfied(self._jobs[job_id])
        ]

    def mark_completed(self, job_id: int) -> None:
        self._jobs[job_id].completed = True
