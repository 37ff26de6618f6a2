from collections import defaultdict
from core.state import DetectionState
from schemas.violations.detect import ConstraintViolation


def equipment_overlap_rule(state: DetectionState):
    """Flag equipment claimed by overlapping stages on different wells (adjacent pairs only)."""
    rule = state.hard_rules["Equipment overlap"]

    usage = defaultdict(list)
    for stage in state.stages:
        for eq_id in stage.equipmentIds:
            usage[eq_id].append((stage, stage.scheduledStart, stage.scheduledEnd))

    for eq_id, entries in usage.items():
        ordered = sorted(entries, key=lambda entry: entry[1])
        for (current, _, current_end), (nxt, nxt_start, _) in zip(ordered, ordered[1:]):
            if current_end > nxt_start and current.wellId != nxt.wellId:
                state.violations.append(
                    ConstraintViolation(
                        type=rule.type,
                        description=rule.message.format(
                            resource=state.catalog.equipment_name(eq_id)
                        ),
                        affectedStageIds=[current.id, nxt.id],
                    )
                )
