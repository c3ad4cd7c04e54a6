"""Tests for actual_duration().

Test data loaded from: data/fixtures/scenarios/timing.json
"""

from __future__ import annotations

import pytest

from conftest import load_scenarios

_data = load_scenarios("timing")


def _inputs(spec: dict):
    from assembly_scheduler.types import AssemblyLine, Job, Worker

    job = Job(0, spec["processing_time"], skill_required=spec["skill_required"])
    worker = Worker(0, spec["skill_level"])
    line = AssemblyLine(0, spec["speed_factor"])
    return job, worker, line


class TestActualDuration:

    @pytest.mark.parametrize("spec", _data["actual_duration"], ids=lambda s: s["id"])
    def test_expected_duration(self, spec):
        from assembly_scheduler.timing import actual_duration

        assert actual_duration(*_inputs(spec)) == spec["expected"], spec["notes"]

    def test_skill_factor_sign(self):
        """Skill factor drops by 0.1 per level above requirement, below zero eventually."""
        from assembly_scheduler.timing import skill_factor
        from assembly_scheduler.types import Job, Worker

        job = Job(0, 10, skill_required=2)
        assert skill_factor(job, Worker(0, 2)) == 1.0
        assert skill_factor(job, Worker(0, 1)) > 1.0
        assert skill_factor(job, Worker(0, 20)) < 0.0

    def test_faster_line_is_not_slower(self):
        from assembly_scheduler.timing import actual_duration
        from assembly_scheduler.types import AssemblyLine, Job, Worker

        job, worker = Job(0, 200), Worker(0, 0)
        slow = actual_duration(job, worker, AssemblyLine(0, 0.5))
        nominal = actual_duration(job, worker, AssemblyLine(1, 1.0))
        fast = actual_duration(job, worker, AssemblyLine(2, 2.0))
        assert slow > nominal > fast
