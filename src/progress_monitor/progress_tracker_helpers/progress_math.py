"""
Progress Math Module

Plan-weighted progress and linear remaining-time estimation.
"""

from typing import Hashable, Mapping, Optional, Union

from .models import StageState

Number = Union[int, float]

_FULL_PROGRESS = 100.0
_DEFAULT_METRIC = 1


def plan_for(plan: Mapping[Hashable, Number], stage: Hashable) -> Number:
    """Planned steps for a stage, 0 when the stage has no plan entry."""
    return plan.get(stage, 0)


def metric_for(metrics: Mapping[Hashable, Number], stage: Hashable) -> Number:
    """Relative weight of one step of a stage, 1 when the stage has no metric."""
    return metrics.get(stage, _DEFAULT_METRIC)


def compute_progress(
    stages: Mapping[Hashable, StageState],
    plan: Mapping[Hashable, Number],
    metrics: Mapping[Hashable, Number],
) -> float:
    """Overall progress in percent over all registered stages.

    Steps done beyond a stage's plan are capped at the plan, so a stage never
    contributes more than its planned share. An empty or all-zero plan gives 0.
    """
    total_planned = 0
    total_done = 0
    for stage, state in stages.items():
        planned = plan_for(plan, stage)
        weight = metric_for(metrics, stage)
        total_planned += planned * weight
        total_done += min(state.steps_done, planned) * weight

    if total_planned > 0:
        return total_done * _FULL_PROGRESS / total_planned
    return 0


def estimate_remaining(progress: float, elapsed: Optional[float]) -> Optional[float]:
    """Extrapolate remaining seconds from the average rate observed so far.

    Returns None when there is no rate basis yet (no progress or no elapsed time).
    """
    if progress <= 0 or elapsed is None:
        return None
    remaining_progress = _FULL_PROGRESS - progress
    if remaining_progress <= 0:
        return 0.0
    return remaining_progress * elapsed / progress


def effective_metric(state: StageState) -> float:
    """Observed average seconds per step, 0 when either side is not positive."""
    if state.steps_done > 0 and state.time_elapsed > 0:
        return state.time_elapsed / state.steps_done
    return 0


__all__ = ["compute_progress", "effective_metric", "estimate_remaining", "metric_for", "plan_for"]
