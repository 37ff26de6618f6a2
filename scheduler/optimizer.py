import logging
from datetime import datetime, timedelta
from typing import List, Optional, Tuple
from core.catalog import ResourceCatalog
from scheduler.detector import detect_violations
from scheduler.metrics import build_metrics
from schemas.optimize.result import OptimizationResult, ScheduleChange
from schemas.schedule.records import Stage
from schemas.violations.detect import ConstraintViolation
from utils.constants import (
    CREW_RESCHEDULE_OFFSET_HOURS,
    EQUIPMENT_STAGGER_BUFFER_MINUTES,
    HOURLY_RATE,
    UTILIZATION_BASELINE,
)
from utils.helpers.crew_candidates import find_available_crew
from utils.time_utils import ensure_utc, shift_window, utc_now

logger = logging.getLogger(__name__)


def clone_schedule(stages: List[Stage]) -> List[Stage]:
    """Deep copy every stage so repairs never touch the caller's records."""
    return [s.model_copy(deep=True) for s in stages]


def _affected_pair(
    working: List[Stage], violation: ConstraintViolation
) -> Optional[Tuple[Stage, Stage]]:
    """
    The first two working stages named by a violation, in schedule order.

    Returns None when fewer than two can be found; such a violation cannot be
    repaired by moving one stage away from another.
    """
    ids = set(violation.affectedStageIds)
    affected = [s for s in working if s.id in ids]
    if len(affected) < 2:
        return None
    return affected[0], affected[1]


def _reschedule(stage: Stage, new_start: datetime, reason: str) -> ScheduleChange:
    change = ScheduleChange(
        stageId=stage.id,
        changeType="reschedule",
        originalValue=stage.scheduledStart,
        newValue=new_start,
        reason=reason,
    )
    stage.scheduledStart, stage.scheduledEnd = shift_window(
        stage.scheduledStart, stage.scheduledEnd, new_start
    )
    return change


def resolve_crew_conflicts(
    working: List[Stage],
    violations: List[ConstraintViolation],
    catalog: ResourceCatalog,
) -> List[ScheduleChange]:
    """
    Move the second stage of every crew conflict off the shared crew.

    A replacement crew that is free for the stage's exact window is preferred;
    when none exists the stage is pushed back by a fixed offset instead.
    """
    changes = []
    for violation in violations:
        if violation.type != "crew-availability":
            continue
        pair = _affected_pair(working, violation)
        if pair is None:
            logger.debug("Skipping crew violation %s", violation.affectedStageIds)
            continue

        stage = pair[1]
        original_crew_id = stage.crewId
        replacement = find_available_crew(
            catalog.crews,
            working,
            stage.scheduledStart,
            stage.scheduledEnd,
            exclude_crew_ids=[original_crew_id],
        )

        if replacement:
            stage.crewId = replacement.id
            changes.append(
                ScheduleChange(
                    stageId=stage.id,
                    changeType="reassign-crew",
                    originalValue=original_crew_id,
                    newValue=replacement.id,
                    reason=f"Resolved crew overlap - reassigned to {replacement.name}",
                )
            )
        else:
            new_start = stage.scheduledStart + timedelta(
                hours=CREW_RESCHEDULE_OFFSET_HOURS
            )
            changes.append(
                _reschedule(stage, new_start, "Rescheduled to resolve crew conflict")
            )
        logger.debug("Crew conflict on %s: %s", stage.id, changes[-1].changeType)
    return changes


def resolve_equipment_conflicts(
    working: List[Stage], violations: List[ConstraintViolation]
) -> List[ScheduleChange]:
    """Stagger the second stage of every equipment conflict to start after the first, plus a buffer."""
    changes = []
    buffer = timedelta(minutes=EQUIPMENT_STAGGER_BUFFER_MINUTES)
    for violation in violations:
        if violation.type != "equipment-availability":
            continue
        pair = _affected_pair(working, violation)
        if pair is None:
            logger.debug("Skipping equipment violation %s", violation.affectedStageIds)
            continue

        first, stage = pair
        changes.append(
            _reschedule(
                stage,
                first.scheduledEnd + buffer,
                "Staggered to resolve equipment conflict",
            )
        )
    return changes


# == Optimize Schedule ==
def optimize_schedule(
    stages: List[Stage],
    catalog: Optional[ResourceCatalog] = None,
    hourly_rate: float = HOURLY_RATE,
    utilization_baseline: float = UTILIZATION_BASELINE,
    now: Optional[datetime] = None,
) -> tuple[List[Stage], List[ScheduleChange], OptimizationResult]:
    """
    Run one greedy repair pass over a schedule.

    Violations are detected once against the input; crew conflicts are
    resolved first, then equipment conflicts, always by moving the second
    stage of each pair. Fixes are not re-validated within the pass, so the
    optimized schedule is checked again only for the metrics and may still
    (or newly) contain conflicts.

    Returns the repaired copy of the schedule, the ordered changes, and the
    before/after metrics. The input stages are never modified.
    """
    catalog = catalog or ResourceCatalog()
    now = ensure_utc(now) if now is not None else utc_now()
    working = clone_schedule(stages)

    initial_violations = detect_violations(stages, catalog, now=now)

    changes = resolve_crew_conflicts(working, initial_violations, catalog)
    changes += resolve_equipment_conflicts(working, initial_violations)

    final_violations = detect_violations(working, catalog, now=now)

    metrics = build_metrics(
        stages,
        working,
        changes,
        initial_conflicts=len(initial_violations),
        final_conflicts=len(final_violations),
        hourly_rate=hourly_rate,
        utilization_baseline=utilization_baseline,
    )
    logger.info(
        f"Optimization applied {len(changes)} change(s); conflicts {len(initial_violations)} -> {len(final_violations)}"
    )
    return working, changes, metrics
