import logging
from typing import List
import pandas as pd
from schemas.optimize.result import (
    ChangeSummary,
    OptimizationResult,
    OptimizationSavings,
    ScheduleChange,
    ScheduleMetrics,
)
from schemas.schedule.records import Stage
from utils.constants import (
    HOURS_SAVED_PER_CHANGE,
    UTILIZATION_CAP,
    UTILIZATION_STEP_PER_CHANGE,
)
from utils.time_utils import hours_between, round_half_up

logger = logging.getLogger(__name__)


def total_scheduled_hours(stages: List[Stage]) -> float:
    """Summed planned duration of stages still in `scheduled` status."""
    return sum(
        hours_between(s.scheduledStart, s.scheduledEnd)
        for s in stages
        if s.status == "scheduled"
    )


def crew_idle_hours(stages: List[Stage]) -> int:
    """
    Total idle time between consecutive non-complete stages of each crew.

    Each crew's stages are ordered by start and only positive gaps (next start
    after previous end) count. The total is rounded to whole hours.
    """
    rows = [
        {"crewId": s.crewId, "start": s.scheduledStart, "end": s.scheduledEnd}
        for s in stages
        if s.status != "complete"
    ]
    if not rows:
        return 0

    df = pd.DataFrame(rows)
    df["start"] = pd.to_datetime(df["start"], utc=True)
    df["end"] = pd.to_datetime(df["end"], utc=True)
    df = df.sort_values(["crewId", "start"], kind="stable")
    df["prev_end"] = df.groupby("crewId", sort=False)["end"].shift()

    gaps = (df["start"] - df["prev_end"]).dt.total_seconds() / 3600
    idle = gaps[gaps > 0].sum()
    return round_half_up(float(idle))


def summarize_change(change: ScheduleChange) -> ChangeSummary:
    stage_no = change.stageId.split("-")[-1]
    verb = "rescheduled" if change.changeType == "reschedule" else "crew reassigned"
    return ChangeSummary(description=change.reason, impact=f"Stage {stage_no} {verb}")


def build_metrics(
    original_stages: List[Stage],
    optimized_stages: List[Stage],
    changes: List[ScheduleChange],
    initial_conflicts: int,
    final_conflicts: int,
    hourly_rate: float,
    utilization_baseline: float,
) -> OptimizationResult:
    """
    Compute the before/after aggregates and the savings summary.

    Equipment utilization is a proxy: the baseline for the original schedule
    and baseline + a fixed step per change (capped) for the optimized one.
    """
    original_duration = total_scheduled_hours(original_stages)
    optimized_duration = total_scheduled_hours(optimized_stages)

    original_idle = crew_idle_hours(original_stages)
    optimized_idle = crew_idle_hours(optimized_stages)

    hours_saved = round_half_up(
        original_idle - optimized_idle + len(changes) * HOURS_SAVED_PER_CHANGE
    )
    cost_saved = round_half_up(hours_saved * hourly_rate)
    efficiency = round_half_up((1 - optimized_idle / max(original_idle, 1)) * 100)

    logger.info(
        f"Idle time {original_idle}h -> {optimized_idle}h; {hours_saved}h saved over {len(changes)} change(s)"
    )

    return OptimizationResult(
        originalMetrics=ScheduleMetrics(
            totalDuration=round_half_up(original_duration),
            crewIdleTime=original_idle,
            equipmentUtilization=utilization_baseline,
            estimatedCost=round_half_up(original_duration * hourly_rate),
            conflicts=initial_conflicts,
        ),
        optimizedMetrics=ScheduleMetrics(
            totalDuration=round_half_up(optimized_duration),
            crewIdleTime=optimized_idle,
            equipmentUtilization=min(
                UTILIZATION_CAP,
                utilization_baseline + len(changes) * UTILIZATION_STEP_PER_CHANGE,
            ),
            estimatedCost=round_half_up(optimized_duration * hourly_rate) - cost_saved,
            conflicts=final_conflicts,
        ),
        changes=[summarize_change(c) for c in changes],
        savings=OptimizationSavings(
            hours=hours_saved, cost=cost_saved, efficiency=efficiency
        ),
    )
