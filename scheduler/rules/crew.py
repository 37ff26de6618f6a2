from collections import defaultdict
from core.state import DetectionState
from schemas.violations.detect import ConstraintViolation


def crew_overlap_rule(state: DetectionState):
    """
    Flag crews booked on overlapping stages of different wells.

    Stages are grouped by crew and sorted by scheduled start; only neighbours
    in that order are compared, so a conflict spanning three stages whose
    direct neighbours do not overlap is not reported. Overlaps on the same
    well are the crew's own consecutive work and are not flagged.
    """
    rule = state.hard_rules["Crew overlap"]

    by_crew = defaultdict(list)
    for stage in state.stages:
        by_crew[stage.crewId].append(stage)

    for crew_id, crew_stages in by_crew.items():
        ordered = sorted(crew_stages, key=lambda s: s.scheduledStart)
        for current, nxt in zip(ordered, ordered[1:]):
            if current.scheduledEnd <= nxt.scheduledStart:
                continue
            if current.wellId == nxt.wellId:
                continue
            state.violations.append(
                ConstraintViolation(
                    type=rule.type,
                    description=rule.message.format(
                        resource=state.catalog.crew_name(crew_id)
                    ),
                    affectedStageIds=[current.id, nxt.id],
                )
            )
