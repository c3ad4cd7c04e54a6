"""Timing Calculator: nominal processing time to actual line time."""

from __future__ import annotations

from assembly_scheduler.types import AssemblyLine, Job, Worker

# Each skill level above (or below) the requirement shortens (or
# lengthens) the job by this fraction of its nominal time.
SKILL_STEP = 0.1

MIN_DURATION = 1


def skill_factor(job: Job, worker: Worker) -> float:
    """Multiplier on nominal time; may be zero or negative for very skilled workers."""
    return 1.0 - (worker.skill_level - job.skill_required) * SKILL_STEP


def actual_duration(job: Job, worker: Worker, line: AssemblyLine) -> int:
    """Skill- and speed-adjusted duration, always >= 1.

    adjusted = processing_time * skill_factor / speed_factor, truncated,
    plus one. Overqualified workers on fast lines can push ``adjusted``
    to zero or below; the result is then clamped to MIN_DURATION.
    """
    adjusted = job.processing_time * skill_factor(job, worker) / line.speed_factor
    return max(int(adjusted) + 1, MIN_DURATION)
