import logging
from datetime import datetime
from typing import List, Optional
from core.catalog import ResourceCatalog
from core.constraint_manager import ConstraintManager
from core.hard_rules import define_hard_rules
from core.state import DetectionState
from scheduler.rules import *
from schemas.schedule.records import Stage
from schemas.violations.detect import ConstraintViolation
from utils.constants import MAINTENANCE_LOOKAHEAD_HOURS, MAINTENANCE_WINDOW_HOURS
from utils.time_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)


# == Detect Constraint Violations ==
def detect_violations(
    stages: List[Stage],
    catalog: Optional[ResourceCatalog] = None,
    now: Optional[datetime] = None,
    include_maintenance: bool = True,
    maintenance_lookahead_hours: float = MAINTENANCE_LOOKAHEAD_HOURS,
    maintenance_window_hours: float = MAINTENANCE_WINDOW_HOURS,
) -> List[ConstraintViolation]:
    """
    Scan a stage set and report every constraint violation found.

    Violations are returned crew overlaps first, then equipment overlaps, then
    maintenance windows, with no de-duplication across categories. The input
    stages are only read. ``now`` defaults to the current UTC time and is only
    used by the maintenance check.
    """
    state = DetectionState(
        stages=list(stages),
        catalog=catalog or ResourceCatalog(),
        now=ensure_utc(now) if now is not None else utc_now(),
        maintenance_lookahead_hours=maintenance_lookahead_hours,
        maintenance_window_hours=maintenance_window_hours,
        hard_rules=define_hard_rules(),
    )

    cm = ConstraintManager(state)
    cm.add_rule(crew_overlap_rule)  # Crew double-booked across wells
    cm.add_rule(equipment_overlap_rule)  # Equipment double-booked across wells
    cm.add_rule(maintenance_window_rule, include_maintenance)  # Imminent maintenance

    violations = cm.apply_all()
    logger.info(
        "Detected %d violation(s) across %d stage(s)", len(violations), len(stages)
    )
    return violations
