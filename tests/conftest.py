"""Shared test fixtures and data loading for assembly-scheduler.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference plant: data/fixtures/example_plant.json (four jobs, two lines
with speed 1.0 and 0.9, two workers with skill 3 and 4).
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def load_fixture(name: str) -> dict:
    """Load a top-level problem fixture from data/fixtures/{name}.json."""
    return _load_json(FIXTURES_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Problem factories
# ---------------------------------------------------------------------------
def make_problem(spec: dict):
    """Build a Problem from a scenario spec.

    A spec either names a fixture ("problem": "example_plant") or inlines
    "jobs", "lines" and "workers". An optional "reference_worker" overrides
    the scheduler section.
    """
    from assembly_scheduler.loaders import problem_from_dict

    if "problem" in spec:
        data = dict(load_fixture(spec["problem"]))
    else:
        data = {k: spec.get(k, []) for k in ("jobs", "lines", "workers")}
    if "reference_worker" in spec:
        data["scheduler"] = {"reference_worker": spec["reference_worker"]}
    return problem_from_dict(data, source=spec.get("id", "<scenario>"))


def run_problem(problem):
    """Run the greedy scheduler over a Problem."""
    from assembly_scheduler.greedy import greedy_schedule

    return greedy_schedule(problem.jobs, problem.lines, problem.workers, problem.config)


def check_invariants(result, jobs) -> None:
    """Assert precedence, per-line and per-worker non-overlap, and makespan."""
    by_job = {a.job_id: a for a in result.assignments}

    for job in jobs:
        if job.job_id not in by_job:
            continue
        for dep in job.dependencies:
            assert by_job[dep].end <= by_job[job.job_id].start, (
                f"job {job.job_id} starts before dependency {dep} ends"
            )

    for line_id, job_ids in result.line_jobs.items():
        chain = [by_job[j] for j in job_ids]
        for prev, nxt in zip(chain, chain[1:]):
            assert prev.end <= nxt.start, f"overlap on line {line_id}"

    by_worker: dict[int, list] = {}
    for a in result.assignments:
        by_worker.setdefault(a.worker_id, []).append(a)
    for worker_id, assigned in by_worker.items():
        for i, a in enumerate(assigned):
            for b in assigned[i + 1:]:
                assert not a.overlaps(b), (
                    f"worker {worker_id} double-booked: jobs {a.job_id}, {b.job_id}"
                )

    expected = max((a.end for a in result.assignments), default=0)
    assert result.makespan == expected


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def example_plant():
    """The four-job reference plant as a validated Problem."""
    return make_problem({"problem": "example_plant"})


@pytest.fixture
def example_result(example_plant):
    return run_problem(example_plant)
