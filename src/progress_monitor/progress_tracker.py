"""
Progress Tracker Module

Tracks overall progress and estimated remaining time for a long task that
consists of several named stages.

Each stage has a plan (how many steps it will take) and, optionally, a metric
(how long one of its steps takes relative to a step of any other stage). Only
the proportions between metrics matter; a stage without a metric weighs 1.

Typical use::

    tracker = ProgressTracker({"plan": {"oranges": 10, "nuts": 32},
                               "metrics": {"oranges": 10, "nuts": 1}})
    tracker.start(ALL)
    tracker.start("oranges")
    for orange in oranges:
        orange.peel()
        tracker.step()
    tracker.finish("oranges")
    ...
    tracker.finish(ALL)

Progress, elapsed time, remaining time and ETA can be read at any moment,
including after completion. ``stats()`` then reports how each stage performed,
so configured metrics can be compared with the observed seconds per step.
"""

import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Hashable, Iterator, Mapping, Optional, Union

from progress_monitor.config import TrackerConfig
from progress_monitor.exceptions import IllegalStateError
from progress_monitor.progress_tracker_helpers.models import ALL, StageState, StageStats, TaskScope, TrackerState
from progress_monitor.progress_tracker_helpers.progress_math import (
    compute_progress,
    effective_metric,
    estimate_remaining,
    plan_for,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]
Target = Union[TaskScope, Hashable]


def _coerce_config(config: Union[TrackerConfig, Mapping[str, Any], None]) -> TrackerConfig:
    if isinstance(config, TrackerConfig):
        return config
    return TrackerConfig.from_mapping(config)


class ProgressTracker:
    """Tracks weighted progress and timing through the stages of one task.

    Call ordering mistakes raise IllegalStateError:
    - starting a stage while another stage is open,
    - finishing a stage that is not the open one,
    - finishing the task (``ALL``) before it was ever started.

    Assigning an invalid ``plan`` or ``metrics`` raises ConfigurationError.
    """

    def __init__(self, config: Union[TrackerConfig, Mapping[str, Any], None] = None):
        resolved = _coerce_config(config)
        self._plan: Dict[Hashable, Number] = dict(resolved.plan)
        self._metrics: Dict[Hashable, Number] = dict(resolved.metrics)
        self._reset_run_state()
        self._state = TrackerState.IDLE

    @classmethod
    def from_config_file(cls, path: Union[str, Path]) -> "ProgressTracker":
        """Create a tracker from a JSON file holding ``plan`` and ``metrics``."""
        return cls(TrackerConfig.from_json_file(path))

    def _reset_run_state(self) -> None:
        self._current_stage: Optional[Hashable] = None
        self._stages: Dict[Hashable, StageState] = {}
        self._progress: float = 0
        self._time_started: Optional[float] = None
        self._time_finished: Optional[float] = None
        self._time_elapsed: Optional[float] = None

    @property
    def plan(self) -> Dict[Hashable, Number]:
        """Copy of the planned steps per stage; assign to replace it."""
        return dict(self._plan)

    @plan.setter
    def plan(self, plan: Mapping[Hashable, Number]) -> None:
        self._plan = dict(TrackerConfig.from_mapping({"plan": plan}).plan)
        self._recalc_progress()

    @property
    def metrics(self) -> Dict[Hashable, Number]:
        """Copy of the per-step weight per stage; assign to replace it."""
        return dict(self._metrics)

    @metrics.setter
    def metrics(self, metrics: Mapping[Hashable, Number]) -> None:
        self._metrics = dict(TrackerConfig.from_mapping({"metrics": metrics}).metrics)
        self._recalc_progress()

    @property
    def state(self) -> TrackerState:
        return self._state

    def start(self, target: Target) -> None:
        """Start the whole task (``ALL``) or a single stage.

        Starting the task discards every stage state from a previous run and
        registers an empty state for each planned stage. Only one stage may be
        open at a time.

        Raises:
            IllegalStateError: If another stage is still open.
        """
        if target is ALL:
            self._reset_run_state()
            self._state = TrackerState.WORKING
            self._time_started = time.time()
            for stage in self._plan:
                self._register_stage(stage)
            logger.debug("Task started with %d planned stages", len(self._stages))
        else:
            if self._current_stage is not None:
                raise IllegalStateError.stage_in_progress(target, self._current_stage)

            self._register_stage(target)
            self._current_stage = target
            stage_state = self._stages[target]
            stage_state.time_started = time.time()
            stage_state.time_finished = None
            logger.debug("Stage %r started", target)
        self._recalc_progress()

    def step(self, n: Number = 1) -> None:
        """Record ``n`` more steps in the current stage; no-op without one."""
        if self._current_stage is not None:
            self._stages[self._current_stage].steps_done += n
        self._recalc_progress()

    @property
    def done(self) -> Optional[Number]:
        """Steps done in the current stage, or None when no stage is open."""
        if self._current_stage is None:
            return None
        return self._stages[self._current_stage].steps_done

    @done.setter
    def done(self, n: Number) -> None:
        if self._current_stage is not None:
            self._stages[self._current_stage].steps_done = n
        self._recalc_progress()

    @property
    def current_stage(self) -> Optional[Hashable]:
        return self._current_stage

    def finish(self, target: Target) -> None:
        """Finish the whole task (``ALL``) or the currently open stage.

        Finishing the task while a stage is open closes the task without
        finishing that stage: its finish time and elapsed time stay as they were.

        Raises:
            IllegalStateError: If ``target`` is not the open stage, or if the
                task is finished without having been started.
        """
        if target is ALL:
            if self._time_started is None:
                raise IllegalStateError.task_not_started()
            if self._current_stage is not None:
                logger.warning("Task finished while stage %r is still open; stage timing left incomplete", self._current_stage)
            self._state = TrackerState.FINISHED
            self._time_finished = time.time()
            self._time_elapsed = self._time_finished - self._time_started
            self._current_stage = None
            logger.debug("Task finished after %.3fs", self._time_elapsed)
        else:
            if self._current_stage is None or self._current_stage != target:
                raise IllegalStateError.stage_not_started(target, self._current_stage)

            stage_state = self._stages[target]
            stage_state.time_finished = time.time()
            stage_state.time_elapsed += stage_state.time_finished - stage_state.time_started
            self._current_stage = None
            logger.debug("Stage %r finished, %.3fs elapsed in total", target, stage_state.time_elapsed)
        self._recalc_progress()

    def reset(self) -> None:
        """Return to the idle state, keeping plan and metrics."""
        self._reset_run_state()
        self._state = TrackerState.IDLE

    @contextmanager
    def track_task(self) -> Iterator["ProgressTracker"]:
        """Start the whole task on entry and finish it on exit."""
        self.start(ALL)
        try:
            yield self
        finally:
            self.finish(ALL)

    @contextmanager
    def track_stage(self, stage: Hashable) -> Iterator["ProgressTracker"]:
        """Start ``stage`` on entry and finish it on exit unless the body already did."""
        self.start(stage)
        try:
            yield self
        finally:
            if self._current_stage is not None and self._current_stage == stage:
                self.finish(stage)

    @property
    def progress(self) -> float:
        """Overall progress in percent, 0..100."""
        return self._progress

    @property
    def time_started(self) -> Optional[float]:
        return self._time_started

    @property
    def time_finished(self) -> Optional[float]:
        return self._time_finished

    @property
    def time_elapsed(self) -> Optional[float]:
        """Seconds since the task started, frozen once it is finished."""
        if self._time_started is None:
            return None
        if self._time_finished is None:
            return time.time() - self._time_started
        return self._time_elapsed

    @property
    def time_remaining(self) -> Optional[float]:
        """Estimated seconds until completion, None while there is no progress."""
        if self._time_finished is not None:
            return 0
        return estimate_remaining(self._progress, self.time_elapsed)

    @property
    def time_eta(self) -> Optional[float]:
        """Estimated completion timestamp, the actual one once finished."""
        remaining = self.time_remaining
        if remaining is None:
            return None
        if self._time_finished is None:
            return time.time() + remaining
        return self._time_finished

    def stats(self) -> Dict[Hashable, StageStats]:
        """Report planned/done steps, timing and effective metric for each stage."""
        return {
            stage: StageStats(
                steps_planned=plan_for(self._plan, stage),
                steps_done=stage_state.steps_done,
                time_started=stage_state.time_started,
                time_finished=stage_state.time_finished,
                time_elapsed=stage_state.time_elapsed,
                effective_metric=effective_metric(stage_state),
            )
            for stage, stage_state in self._stages.items()
        }

    def _register_stage(self, stage: Hashable) -> None:
        if stage not in self._stages:
            self._stages[stage] = StageState()

    def _recalc_progress(self) -> None:
        self._progress = compute_progress(self._stages, self._plan, self._metrics)


__all__ = ["ALL", "ProgressTracker"]
