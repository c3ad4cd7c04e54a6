"""Input validation for jobs, assembly lines and workers."""

from __future__ import annotations

from assembly_scheduler.types import AssemblyLine, Job, Worker


def validate_jobs(jobs: list[Job]) -> list[str]:
    """Validate a job collection. Returns list of error messages (empty = valid).

    Checks:
    - Job ids are dense: jobs[i].job_id == i
    - Processing times are positive integers
    - Required skill levels are non-negative
    - Dependency ids reference jobs in the collection
    - No job depends on itself or lists a dependency twice

    Multi-job cycles are not reported here; the scheduler detects them
    when no job becomes ready.
    """
    errors: list[str] = []
    count = len(jobs)

    for index, job in enumerate(jobs):
        if job.job_id != index:
            errors.append(
                f"Job at position {index}: id {job.job_id} "
                f"(ids must match their position)"
            )
            continue

        if not isinstance(job.processing_time, int) or job.processing_time <= 0:
            errors.append(
                f"Job {job.job_id}: processing_time must be a positive "
                f"integer, got {job.processing_time!r}"
            )

        if not isinstance(job.skill_required, int) or job.skill_required < 0:
            errors.append(
                f"Job {job.job_id}: skill_required must be a non-negative "
                f"integer, got {job.skill_required!r}"
            )

        seen: set[int] = set()
        for dep in job.dependencies:
            if not isinstance(dep, int) or dep < 0 or dep >= count:
                errors.append(f"Job {job.job_id}: unknown dependency {dep!r}")
            elif dep == job.job_id:
                errors.append(f"Job {job.job_id}: depends on itself")
            elif dep in seen:
                errors.append(f"Job {job.job_id}: duplicate dependency {dep}")
            else:
                seen.add(dep)

    return errors


def validate_lines(lines: list[AssemblyLine]) -> list[str]:
    """Validate assembly lines. Returns list of error messages.

    Checks:
    - Line ids are unique
    - Speed factors are positive
    - Maintenance windows have non-negative start and positive duration
    """
    errors: list[str] = []
    seen: set[int] = set()

    for line in lines:
        if line.line_id in seen:
            errors.append(f"Duplicate line id: {line.line_id}")
        seen.add(line.line_id)

        if not isinstance(line.speed_factor, (int, float)) or line.speed_factor <= 0:
            errors.append(
                f"Line {line.line_id}: speed_factor must be positive, "
                f"got {line.speed_factor!r}"
            )

        for i, window in enumerate(line.maintenance_windows):
            if (
                not isinstance(window.start, int)
                or not isinstance(window.duration, int)
                or window.start < 0
                or window.duration <= 0
            ):
                errors.append(
                    f"Line {line.line_id}, maintenance window {i}: "
                    f"expected start >= 0 and duration > 0, "
                    f"got ({window.start!r}, {window.duration!r})"
                )

    return errors


def validate_workers(workers: list[Worker]) -> list[str]:
    """Validate workers. Returns list of error messages.

    Checks:
    - Worker ids are unique
    - Skill levels are non-negative integers
    """
    errors: list[str] = []
    seen: set[int] = set()

    for worker in workers:
        if worker.worker_id in seen:
            errors.append(f"Duplicate worker id: {worker.worker_id}")
        seen.add(worker.worker_id)

        if not isinstance(worker.skill_level, int) or worker.skill_level < 0:
            errors.append(
                f"Worker {worker.worker_id}: skill_level must be a non-negative "
                f"integer, got {worker.skill_level!r}"
            )

    return errors
