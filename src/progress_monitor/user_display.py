"""
User-Friendly Display Module

Provides clean, emoji-enhanced progress messages for a tracked task.
Separates user display from technical logging.
"""

from progress_monitor.progress_tracker import ProgressTracker
from progress_monitor.progress_tracker_helpers.models import TrackerState
from progress_monitor.user_display_helpers.message_formatter import (
    format_progress_line,
    format_task_complete,
)
from progress_monitor.user_display_helpers.metric_display import format_stage_stats


class UserDisplay:
    """
    Prints the state of a ProgressTracker to stdout.
    """

    def __init__(self, tracker: ProgressTracker):
        self._tracker = tracker

    @property
    def tracker(self) -> ProgressTracker:
        return self._tracker

    def show_progress(self):
        """Show the current progress line, or the completion message once finished."""
        tracker = self._tracker
        if tracker.state is TrackerState.FINISHED:
            print(format_task_complete(tracker.time_elapsed))
            return
        print(
            format_progress_line(
                tracker.progress,
                tracker.current_stage,
                tracker.time_elapsed,
                tracker.time_remaining,
            )
        )

    def show_stats(self):
        """Show per-stage statistics"""
        output = format_stage_stats(self._tracker.stats())
        if output:
            print(output)
