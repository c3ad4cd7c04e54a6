"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from assembly_scheduler.schedule import ScheduleResult


def show_schedule(result: ScheduleResult) -> str:
    """Print a per-line listing of jobs with start, end and duration.

    Returns the string and also prints to stdout.
    """
    lines: list[str] = [f"Makespan: {result.makespan} ({result.status.value})"]
    by_job = {a.job_id: a for a in result.assignments}

    for line_id, job_ids in sorted(result.line_jobs.items()):
        lines.append(f"Line {line_id}:")
        for job_id in job_ids:
            a = by_job[job_id]
            lines.append(
                f"  J{job_id:<3d} worker={a.worker_id:<3d} "
                f"start={a.start:<6d} end={a.end:<6d} duration={a.duration}"
            )

    if result.unscheduled:
        lines.append(f"Unscheduled: {list(result.unscheduled)}")

    text = "\n".join(lines)
    print(text)
    return text


def show_gantt(result: ScheduleResult, width: int = 60) -> str:
    """Print an ASCII Gantt chart, one row per line.

    Legend: '.' = idle, job ids cycle through 0-9A-Z.
    Each char covers ceil(makespan / width) time units.
    Returns the string and also prints to stdout.
    """
    label_chars = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    makespan = result.makespan
    units_per_char = max(1, -(-makespan // width))
    chars = -(-makespan // units_per_char) if makespan else 0

    by_job = {a.job_id: a for a in result.assignments}
    rows: list[str] = []
    for line_id, job_ids in sorted(result.line_jobs.items()):
        row = ["."] * chars
        for job_id in job_ids:
            a = by_job[job_id]
            label = label_chars[job_id % len(label_chars)]
            for i in range(a.start // units_per_char, -(-a.end // units_per_char)):
                row[i] = label
        rows.append(f"Line {line_id:>3d} |{''.join(row)}|")

    axis = " " * max(chars - 1, 0)
    rows.append(f"{'':>8s}  0{axis}{makespan}")
    text = "\n".join(rows)
    print(text)
    return text
