from datetime import timedelta
from core.state import DetectionState
from schemas.violations.detect import ConstraintViolation


def maintenance_window_rule(state: DetectionState):
    """
    Flag upcoming stages that need equipment with maintenance due soon.

    Equipment qualifies when its next maintenance is before
    ``now + maintenance_lookahead_hours`` (overdue maintenance included). Every
    stage using it that starts after ``now`` and before the end of the
    maintenance window is listed in a single violation for that equipment.
    """
    rule = state.hard_rules["Maintenance window"]
    horizon = state.now + timedelta(hours=state.maintenance_lookahead_hours)

    for eq in state.catalog.equipment:
        if eq.nextMaintenance >= horizon:
            continue
        window_end = eq.nextMaintenance + timedelta(
            hours=state.maintenance_window_hours
        )
        affected = [
            s
            for s in state.stages
            if eq.id in s.equipmentIds
            and state.now < s.scheduledStart < window_end
        ]
        if affected:
            state.violations.append(
                ConstraintViolation(
                    type=rule.type,
                    description=rule.message.format(resource=eq.name),
                    affectedStageIds=[s.id for s in affected],
                )
            )
