"""
Metric Display Module

Handles display of per-stage timing and effective metric statistics.
"""

from typing import Hashable, Mapping

from progress_monitor.progress_tracker_helpers.models import StageStats

_STAGE_HEADER = "Stage"
_RULE_WIDTH = 70


def format_stage_stats(stats: Mapping[Hashable, StageStats]) -> str:
    """Render a per-stage statistics table; empty when no stage is registered."""
    if not stats:
        return ""

    header_line = "=" * _RULE_WIDTH
    divider_line = "-" * _RULE_WIDTH

    name_width = max(max(len(str(stage)) for stage in stats), len(_STAGE_HEADER)) + 2

    lines = [header_line, "📊 STAGE STATISTICS", header_line]
    lines.append(f"   {_STAGE_HEADER:<{name_width}} {'done/planned':>14} {'elapsed':>10} {'s/step':>10}")
    lines.append(divider_line)

    for stage, stage_stats in stats.items():
        steps = f"{stage_stats.steps_done:g}/{stage_stats.steps_planned:g}"
        lines.append(
            f"⏱️  {str(stage):<{name_width}} {steps:>14} "
            f"{stage_stats.time_elapsed:>9.2f}s {stage_stats.effective_metric:>10.4f}"
        )

    total_elapsed = sum(stage_stats.time_elapsed for stage_stats in stats.values())
    lines.append(divider_line)
    lines.append(f"📈 Sum of all stages: {total_elapsed:.2f}s")
    lines.append(header_line)

    return "\n".join(lines)
