"""Tests for problem loading, validation and scheduler configuration.

Test data loaded from: data/fixtures/example_plant.json,
data/fixtures/scenarios/validation.json
"""

from __future__ import annotations

import json

import pytest

from conftest import FIXTURES_DIR, load_scenarios

_data = load_scenarios("validation")


class TestLoadProblemJson:

    def test_example_plant(self):
        from assembly_scheduler.config import ReferenceWorker
        from assembly_scheduler.loaders import load_problem_json

        problem = load_problem_json(FIXTURES_DIR / "example_plant.json")
        assert [j.processing_time for j in problem.jobs] == [65, 160, 150, 120]
        assert problem.jobs[3].dependencies == (1, 2)
        assert [line.speed_factor for line in problem.lines] == [1.0, 0.9]
        assert [w.skill_level for w in problem.workers] == [3, 4]
        assert problem.lines[0].maintenance_windows[0].end == 25
        assert problem.config.reference_worker is ReferenceWorker.FIRST

    def test_defaults(self):
        from assembly_scheduler.loaders import problem_from_dict

        problem = problem_from_dict({
            "jobs": [{"id": 0, "processing_time": 3}],
            "lines": [{"id": 0, "speed_factor": 1.5}],
            "workers": [{"id": 0, "skill_level": 0}],
        })
        assert problem.jobs[0].dependencies == ()
        assert problem.jobs[0].skill_required == 0
        assert problem.lines[0].maintenance_windows == []

    def test_error_names_file(self, tmp_path):
        from assembly_scheduler.loaders import load_problem_json

        path = tmp_path / "broken.json"
        path.write_text(json.dumps({
            "jobs": [{"id": 0, "processing_time": -4}],
            "lines": [],
            "workers": [],
        }))
        with pytest.raises(ValueError, match="broken.json"):
            load_problem_json(path)


class TestValidation:

    @pytest.mark.parametrize(
        "spec", _data["invalid_problems"], ids=lambda s: s["id"]
    )
    def test_invalid_problem(self, spec):
        from assembly_scheduler.loaders import problem_from_dict

        with pytest.raises(ValueError) as exc_info:
            problem_from_dict(spec["problem"])
        assert spec["expected_fragment"] in str(exc_info.value)

    def test_reports_every_error(self):
        from assembly_scheduler.loaders import problem_from_dict

        with pytest.raises(ValueError) as exc_info:
            problem_from_dict({
                "jobs": [{"id": 0, "processing_time": 0, "dependencies": [9]}],
                "lines": [{"id": 0, "speed_factor": 0}],
                "workers": [{"id": 0, "skill_level": -1}],
            })
        message = str(exc_info.value)
        assert message.count("\n  - ") == 4

    def test_schema_valid_inputs(self):
        from assembly_scheduler.schema import (
            validate_jobs,
            validate_lines,
            validate_workers,
        )
        from assembly_scheduler.types import AssemblyLine, Job, Worker

        assert validate_jobs([Job(0, 5), Job(1, 5, (0,), 2)]) == []
        assert validate_lines([AssemblyLine(0, 1.0), AssemblyLine(1, 0.9)]) == []
        assert validate_workers([Worker(0, 3), Worker(1, 0)]) == []


class TestSchedulerConfig:

    def test_default(self):
        from assembly_scheduler.config import ReferenceWorker, SchedulerConfig

        assert SchedulerConfig.from_dict(None).reference_worker is ReferenceWorker.FIRST
        assert SchedulerConfig.from_dict({}) == SchedulerConfig()

    @pytest.mark.parametrize("name", ["first", "min_skill", "max_skill", "assigned"])
    def test_strategy_names(self, name):
        from assembly_scheduler.config import SchedulerConfig

        config = SchedulerConfig.from_dict({"reference_worker": name})
        assert config.reference_worker.value == name

    def test_frozen(self):
        from assembly_scheduler.config import SchedulerConfig

        with pytest.raises(AttributeError):
            SchedulerConfig().reference_worker = "max_skill"  # type: ignore[misc]
