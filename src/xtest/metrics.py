from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from xtest.runner import RunResult


@dataclass
class DurationStatistics:
    """Statistics for procedure durations within one run."""

    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


def compute_stats(values: list[float | int | None]) -> DurationStatistics:
    """Compute avg, min, max, stddev for a list of numeric values."""
    nums = [v for v in values if v is not None]
    if not nums:
        return DurationStatistics(avg=None, min=None, max=None, stddev=None)

    arr = np.array(nums, dtype=float)
    return DurationStatistics(
        avg=round(float(np.mean(arr)), 6),
        min=round(float(np.min(arr)), 6),
        max=round(float(np.max(arr)), 6),
        stddev=round(float(np.std(arr)), 6),
    )


def duration_stats(result: RunResult) -> DurationStatistics:
    return compute_stats([o.duration_seconds for o in result.outcomes])


def pass_rate(result: RunResult) -> float:
    """Percentage of executed procedures that passed (0.0 for an empty run)."""
    if result.total == 0:
        return 0.0
    return round(result.passed / result.total * 100, 2)
