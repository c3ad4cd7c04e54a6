#!/usr/bin/env python
"""Visual verification report for assembly-scheduler.

Run:  uv run python scripts/verify.py [problem.json] [--reference-worker NAME]

Produces a formatted report showing:
  1. Input data (jobs with dependencies, lines, workers)
  2. The schedule per line, with an ASCII Gantt chart
  3. Worker and line utilisation, waiting time, maintenance windows
  4. The same problem under every reference-worker strategy
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"

sys.path.insert(0, str(ROOT / "src"))

from assembly_scheduler.config import ReferenceWorker, SchedulerConfig
from assembly_scheduler.debug import show_gantt
from assembly_scheduler.greedy import greedy_schedule
from assembly_scheduler.loaders import Problem, load_problem_json
from assembly_scheduler.report import (
    average_waiting_time,
    line_utilization,
    maintenance_conflicts,
    maintenance_summary,
    worker_utilization,
    worker_work_time,
)

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


# ---------------------------------------------------------------------------
# Section 1: Input data
# ---------------------------------------------------------------------------
def section_inputs(problem: Problem):
    banner("INPUT DATA")

    heading("Jobs")
    rows = []
    for job in problem.jobs:
        deps = ", ".join(str(d) for d in job.dependencies) or "None"
        rows.append([str(job.job_id), str(job.processing_time),
                     str(job.skill_required), deps])
    table(["Job", "Nominal time", "Skill", "Depends on"], rows)

    heading("Assembly lines")
    rows = [[str(line.line_id), f"{line.speed_factor:g}"] for line in problem.lines]
    table(["Line", "Speed factor"], rows)

    heading("Workers")
    rows = [[str(w.worker_id), str(w.skill_level)] for w in problem.workers]
    table(["Worker", "Skill level"], rows)


# ---------------------------------------------------------------------------
# Section 2: Schedule
# ---------------------------------------------------------------------------
def section_schedule(problem: Problem, result):
    banner(f"SCHEDULE (reference worker: {problem.config.reference_worker.value})")
    print(f"\n    Status:   {result.status.value}")
    print(f"    Makespan: {result.makespan} time units")

    by_job = {a.job_id: a for a in result.assignments}
    for line in problem.lines:
        heading(f"Line {line.line_id} (speed factor {line.speed_factor:g})")
        rows = []
        for job_id in result.line_jobs.get(line.line_id, ()):
            a = by_job[job_id]
            rows.append([f"J{job_id}", str(a.worker_id), str(a.start),
                         str(a.end), str(a.duration)])
        if rows:
            table(["Job", "Worker", "Start", "End", "Duration"], rows)
        else:
            print("    (idle)")

    if result.unscheduled:
        heading("Unscheduled")
        print(f"    {list(result.unscheduled)}")

    heading("Gantt")
    print()
    show_gantt(result)


# ---------------------------------------------------------------------------
# Section 3: Evaluation
# ---------------------------------------------------------------------------
def section_evaluation(problem: Problem, result):
    banner("EVALUATION")

    heading("Worker utilisation")
    work = worker_work_time(result, problem.workers)
    util = worker_utilization(result, problem.workers)
    rows = [
        [str(w.worker_id), str(w.skill_level), str(work[w.worker_id]),
         f"{util[w.worker_id]:.2f}%"]
        for w in problem.workers
    ]
    table(["Worker", "Skill", "Work time", "Utilisation"], rows)

    heading("Line utilisation")
    line_util = line_utilization(result, problem.lines)
    rows = [[str(lid), f"{pct:.2f}%"] for lid, pct in line_util.items()]
    table(["Line", "Utilisation"], rows)

    heading("Maintenance windows (not enforced)")
    conflicts = maintenance_conflicts(result, problem.lines)
    rows = []
    for lid, windows in maintenance_summary(problem.lines).items():
        clashing = [f"J{j}" for j, line_id in conflicts if line_id == lid]
        rows.append([
            str(lid),
            " ".join(f"[{s}, {e})" for s, e in windows) or "(none)",
            ", ".join(clashing) or "-",
        ])
    table(["Line", "Windows", "Overlapping jobs"], rows)

    wait = average_waiting_time(result, problem.jobs)
    print(f"\n    Average job waiting time: {wait:.2f} time units")


# ---------------------------------------------------------------------------
# Section 4: Strategy comparison
# ---------------------------------------------------------------------------
def section_strategies(problem: Problem):
    banner("REFERENCE-WORKER STRATEGIES")
    rows = []
    for strategy in ReferenceWorker:
        config = SchedulerConfig(reference_worker=strategy)
        result = greedy_schedule(problem.jobs, problem.lines, problem.workers, config)
        rows.append([strategy.value, result.status.value, str(result.makespan)])
    print()
    table(["Strategy", "Status", "Makespan"], rows)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "problem", nargs="?", default=str(FIXTURES / "example_plant.json"),
        help="Problem JSON file (default: the example plant)",
    )
    parser.add_argument(
        "--reference-worker", choices=[r.value for r in ReferenceWorker],
        help="Override the scheduler section of the problem file",
    )
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    problem = load_problem_json(args.problem)
    if args.reference_worker:
        problem = replace(
            problem,
            config=SchedulerConfig(ReferenceWorker(args.reference_worker)),
        )

    result = greedy_schedule(problem.jobs, problem.lines, problem.workers, problem.config)

    section_inputs(problem)
    section_schedule(problem, result)
    section_evaluation(problem, result)
    section_strategies(problem)
    print()
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
