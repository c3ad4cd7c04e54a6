"""Scheduler configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReferenceWorker(str, Enum):
    """Which worker's skill is used to estimate durations when ranking lines.

    FIRST reproduces the classic behaviour: the lowest-id worker is used
    for every estimate, whatever worker is eventually assigned.
    """

    FIRST = "first"
    MIN_SKILL = "min_skill"
    MAX_SKILL = "max_skill"
    ASSIGNED = "assigned"


@dataclass(frozen=True)
class SchedulerConfig:
    """Tunable policy for one greedy scheduling run. Immutable."""

    reference_worker: ReferenceWorker = ReferenceWorker.FIRST

    @classmethod
    def from_dict(cls, data: dict | None) -> SchedulerConfig:
        """Build from the ``scheduler`` section of a problem file.

        Raises ValueError on unknown keys or strategy names.
        """
        if not data:
            return cls()

        unknown = set(data) - {"reference_worker"}
        if unknown:
            raise ValueError(f"Unknown scheduler option(s): {sorted(unknown)}")

        raw = data.get("reference_worker", ReferenceWorker.FIRST.value)
        try:
            strategy = ReferenceWorker(raw)
        except ValueError:
            choices = ", ".join(r.value for r in ReferenceWorker)
            raise ValueError(
                f"Invalid reference_worker {raw!r} (expected one of: {choices})"
            ) from None
        return cls(reference_worker=strategy)
