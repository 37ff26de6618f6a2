import logging
from typing import List
from schemas.schedule.records import Stage
from schemas.whatif.scenario import ScenarioChange, WhatIfResult, WhatIfScenario
from utils.constants import (
    DEFAULT_WELL_DELAY_HOURS,
    EQUIPMENT_REPLACEMENT_DELAY_HOURS,
    HOURLY_RATE,
    MAJOR_DELAY_THRESHOLD_HOURS,
    MODERATE_DELAY_THRESHOLD_HOURS,
    WEATHER_DELAY_HOURS_PER_PAD,
)
from utils.time_utils import round_half_up

logger = logging.getLogger(__name__)


def project_change(
    stages: List[Stage], change: ScenarioChange
) -> tuple[List[Stage], float]:
    """
    Project a single scenario change onto the schedule.

    Returns the stages it impacts and the delay hours it adds. Delays are
    counted per impacted stage for well and equipment disruptions, and per pad
    for weather events (pad membership of stages is not tracked, so weather
    impacts no specific stage).
    """
    params = change.params
    match change.type:
        case "delay-well":
            well_id = params.get("wellId")
            hours = params.get("hours") or DEFAULT_WELL_DELAY_HOURS
            impacted = [
                s for s in stages if s.wellId == well_id and s.status == "scheduled"
            ]
            return impacted, hours * len(impacted)
        case "remove-equipment":
            eq_id = params.get("equipmentId")
            impacted = [
                s
                for s in stages
                if eq_id in s.equipmentIds and s.status == "scheduled"
            ]
            return impacted, EQUIPMENT_REPLACEMENT_DELAY_HOURS * len(impacted)
        case "weather-event":
            pads = params.get("pads") or []
            hours = params.get("hours") or WEATHER_DELAY_HOURS_PER_PAD
            return [], hours * len(pads)
        case _:
            # add-crew and other capacity changes carry no delay model
            logger.info("Scenario change '%s' adds no delay", change.type)
            return [], 0


def recommend(delay_hours: float) -> str:
    """Pick the advisory message for a projected delay."""
    if delay_hours > MAJOR_DELAY_THRESHOLD_HOURS:
        return f"Consider activating backup resources. {delay_hours}h delay will cascade to downstream operations."
    if delay_hours > MODERATE_DELAY_THRESHOLD_HOURS:
        return "Manageable delay. Recommend parallel task acceleration to recover schedule."
    if delay_hours > 0:
        return "Minor impact. Current buffer should absorb delay."
    return "No significant impact."


def run_what_if(
    stages: List[Stage],
    scenario: WhatIfScenario,
    hourly_rate: float = HOURLY_RATE,
) -> WhatIfResult:
    """
    Estimate the delay and cost of a hypothetical scenario without applying it.

    Changes are additive: each contributes its own delay, and a stage hit by
    several changes is listed once in `impactedStages` (in schedule order).
    """
    delay_hours = 0
    impacted_ids = set()

    for change in scenario.changes:
        impacted, added = project_change(stages, change)
        impacted_ids.update(s.id for s in impacted)
        delay_hours += added

    delay_hours = round_half_up(delay_hours)
    impacted_stages = [s for s in stages if s.id in impacted_ids]
    logger.info(
        f"Scenario '{scenario.name}': {len(impacted_stages)} stage(s) impacted, {delay_hours}h delay"
    )

    return WhatIfResult(
        impactedStages=impacted_stages,
        delayHours=delay_hours,
        costImpact=round_half_up(delay_hours * hourly_rate),
        recommendation=recommend(delay_hours),
    )
