"""Data loading utilities for problem definitions and fixtures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from assembly_scheduler.config import SchedulerConfig
from assembly_scheduler.schema import validate_jobs, validate_lines, validate_workers
from assembly_scheduler.types import AssemblyLine, Job, MaintenanceWindow, Worker


@dataclass
class Problem:
    """Everything needed for one scheduling run."""

    jobs: list[Job]
    lines: list[AssemblyLine]
    workers: list[Worker]
    config: SchedulerConfig = field(default_factory=SchedulerConfig)


def _job(entry: dict) -> Job:
    return Job(
        job_id=entry["id"],
        processing_time=entry["processing_time"],
        dependencies=tuple(entry.get("dependencies", ())),
        skill_required=entry.get("skill_required", 0),
    )


def _line(entry: dict) -> AssemblyLine:
    windows = [
        MaintenanceWindow(start=w[0], duration=w[1])
        for w in entry.get("maintenance_windows", ())
    ]
    return AssemblyLine(
        line_id=entry["id"],
        speed_factor=entry["speed_factor"],
        maintenance_windows=windows,
    )


def _worker(entry: dict) -> Worker:
    return Worker(worker_id=entry["id"], skill_level=entry["skill_level"])


def problem_from_dict(data: dict, source: str = "<dict>") -> Problem:
    """Build and validate a Problem from the JSON contract format:

    {
        "jobs":    [{"id": 0, "processing_time": 65,
                     "dependencies": [], "skill_required": 2}, ...],
        "lines":   [{"id": 0, "speed_factor": 1.0,
                     "maintenance_windows": [[20, 5]]}, ...],
        "workers": [{"id": 0, "skill_level": 3}, ...],
        "scheduler": {"reference_worker": "first"}
    }

    Raises ValueError listing every validation error.
    """
    errors: list[str] = []
    jobs: list[Job] = []
    lines: list[AssemblyLine] = []
    workers: list[Worker] = []

    for section, build, out in (
        ("jobs", _job, jobs),
        ("lines", _line, lines),
        ("workers", _worker, workers),
    ):
        for i, entry in enumerate(data.get(section, [])):
            try:
                out.append(build(entry))
            except (KeyError, TypeError, IndexError) as e:
                errors.append(f"{section}[{i}]: malformed entry ({e!r})")

    if not errors:
        errors.extend(validate_jobs(jobs))
        errors.extend(validate_lines(lines))
        errors.extend(validate_workers(workers))

    config = SchedulerConfig()
    try:
        config = SchedulerConfig.from_dict(data.get("scheduler"))
    except ValueError as e:
        errors.append(str(e))

    if errors:
        raise ValueError(
            f"Validation errors in {source}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return Problem(jobs=jobs, lines=lines, workers=workers, config=config)


def load_problem_json(path: str | Path) -> Problem:
    """Load a Problem from a JSON file.

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    return problem_from_dict(data, source=path.name)
