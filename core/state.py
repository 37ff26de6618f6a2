from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List
from core.catalog import ResourceCatalog
from core.hard_rules import HardRule
from schemas.schedule.records import Stage
from schemas.violations.detect import ConstraintViolation


@dataclass
class DetectionState:
    """
    A dataclass to hold all the state relevant to one violation detection run.
    """

    # inputs
    stages: List[Stage]
    """The stages being checked, in the caller's order. Never mutated."""
    catalog: ResourceCatalog
    """Crew and equipment lookups used for names and maintenance dates."""
    now: datetime
    """The reference clock (UTC) for the maintenance window check."""

    # params
    maintenance_lookahead_hours: float
    """How far ahead a due maintenance counts as imminent."""
    maintenance_window_hours: float
    """How long equipment is considered out of service after maintenance starts."""

    # collections to fill
    hard_rules: Dict[str, HardRule]
    """The violation categories and their message templates."""
    violations: List[ConstraintViolation] = field(default_factory=list)
    """Violations in the order the rules emitted them."""
