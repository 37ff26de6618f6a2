import logging
from datetime import datetime
from typing import List, Optional
from core.catalog import ResourceCatalog
from exceptions.custom_errors import (
    ImmutableStageError,
    InvalidStageError,
    StageNotFoundError,
)
from schemas.moves.validate import MoveConflict
from schemas.schedule.records import Stage
from utils.constants import LOCKED_STAGE_STATUSES, MOVE_SNAP_MINUTES
from utils.time_utils import ensure_utc, intervals_overlap, snap_to_grid

logger = logging.getLogger(__name__)


def find_stage(stages: List[Stage], stage_id: str) -> Stage:
    stage = next((s for s in stages if s.id == stage_id), None)
    if stage is None:
        raise StageNotFoundError(f"Stage '{stage_id}' is not part of the schedule.")
    return stage


def apply_move(
    stage: Stage,
    new_start: datetime,
    new_end: Optional[datetime] = None,
    snap_minutes: int = MOVE_SNAP_MINUTES,
) -> Stage:
    """
    Prepare a dragged stage for validation.

    Complete and in-progress stages are rejected. The new start is snapped to
    the move grid; without an explicit end the stage keeps its duration. The
    original stage is left untouched and a moved copy is returned.
    """
    if stage.status in LOCKED_STAGE_STATUSES:
        raise ImmutableStageError(
            f"Stage {stage.id} is {stage.status} and cannot be rescheduled."
        )

    start = snap_to_grid(ensure_utc(new_start), snap_minutes)
    if new_end is None:
        end = start + (stage.scheduledEnd - stage.scheduledStart)
    else:
        end = snap_to_grid(ensure_utc(new_end), snap_minutes)
    if end <= start:
        raise InvalidStageError(
            f"Stage {stage.id} must end after it starts ({start} >= {end})."
        )

    return stage.model_copy(
        update={"scheduledStart": start, "scheduledEnd": end}, deep=True
    )


def validate_move(
    moved_stage: Stage,
    all_stages: List[Stage],
    catalog: Optional[ResourceCatalog] = None,
) -> List[MoveConflict]:
    """
    Check one relocated stage against every other stage in the schedule.

    Unlike batch detection this compares against the full stage set and does
    not exempt same-well crew overlaps. Conflicts come back as: one `crew`
    record (moved stage plus every overlapping stage on its crew), one
    `equipment` record per overlapping stage sharing equipment, then one
    `overlap` record (moved stage plus every overlapping stage on its well).
    """
    catalog = catalog or ResourceCatalog()
    overlapping = [
        s
        for s in all_stages
        if s.id != moved_stage.id
        and intervals_overlap(
            moved_stage.scheduledStart,
            moved_stage.scheduledEnd,
            s.scheduledStart,
            s.scheduledEnd,
        )
    ]

    conflicts = []

    same_crew = [s for s in overlapping if s.crewId == moved_stage.crewId]
    if same_crew:
        conflicts.append(
            MoveConflict(
                type="crew",
                message=f"{catalog.crew_name(moved_stage.crewId)} is already assigned to {len(same_crew)} overlapping stage(s).",
                stageIds=[moved_stage.id] + [s.id for s in same_crew],
            )
        )

    for other in overlapping:
        shared = [eq for eq in moved_stage.equipmentIds if eq in other.equipmentIds]
        if shared:
            conflicts.append(
                MoveConflict(
                    type="equipment",
                    message=f"Equipment {', '.join(shared)} already in use by stage {other.id}.",
                    stageIds=[moved_stage.id, other.id],
                )
            )

    same_well = [s for s in overlapping if s.wellId == moved_stage.wellId]
    if same_well:
        conflicts.append(
            MoveConflict(
                type="overlap",
                message=f"Stage {moved_stage.stageNumber} overlaps {len(same_well)} other stage(s) on {moved_stage.wellId}.",
                stageIds=[moved_stage.id] + [s.id for s in same_well],
            )
        )

    logger.info(
        "Move of %s checked against %d overlapping stage(s): %d conflict(s)",
        moved_stage.id,
        len(overlapping),
        len(conflicts),
    )
    return conflicts
