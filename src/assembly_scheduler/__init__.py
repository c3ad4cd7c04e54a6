"""assembly-scheduler: Greedy skill-aware scheduling of jobs onto assembly lines."""

from assembly_scheduler.config import ReferenceWorker, SchedulerConfig
from assembly_scheduler.graph import JobGraph
from assembly_scheduler.greedy import GreedyScheduler, greedy_schedule
from assembly_scheduler.loaders import Problem, load_problem_json, problem_from_dict
from assembly_scheduler.pool import ResourcePool
from assembly_scheduler.schedule import RunStatus, Schedule, ScheduleResult
from assembly_scheduler.timing import actual_duration
from assembly_scheduler.types import (
    AssemblyLine,
    Assignment,
    Job,
    MaintenanceWindow,
    ScheduleAbortedError,
    Worker,
)

__all__ = [
    "AssemblyLine",
    "Assignment",
    "GreedyScheduler",
    "Job",
    "JobGraph",
    "MaintenanceWindow",
    "Problem",
    "ReferenceWorker",
    "ResourcePool",
    "RunStatus",
    "Schedule",
    "ScheduleAbortedError",
    "ScheduleResult",
    "SchedulerConfig",
    "Worker",
    "actual_duration",
    "greedy_schedule",
    "load_problem_json",
    "problem_from_dict",
]
