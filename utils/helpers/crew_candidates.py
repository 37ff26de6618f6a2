from datetime import datetime
from typing import Iterable, List, Optional
from schemas.schedule.records import Crew, Stage
from utils.time_utils import intervals_overlap


# crews with any stage intersecting the window
def busy_crew_ids(stages: Iterable[Stage], start: datetime, end: datetime) -> set[str]:
    return {
        s.crewId
        for s in stages
        if intervals_overlap(s.scheduledStart, s.scheduledEnd, start, end)
    }


def is_crew_eligible(crew: Crew) -> bool:
    """A crew can take new work only while it is not off duty and has shifts left."""
    return crew.status != "off-duty" and crew.shiftsRemaining > 0


def find_available_crew(
    crews: Iterable[Crew],
    stages: Iterable[Stage],
    start: datetime,
    end: datetime,
    exclude_crew_ids: Optional[List[str]] = None,
) -> Optional[Crew]:
    """
    Return the first crew, in the given order, that can cover [start, end).

    A crew qualifies when it is eligible, is not excluded, and none of the
    given stages assigned to it intersects the window.
    """
    busy = busy_crew_ids(stages, start, end)
    excluded = set(exclude_crew_ids or [])
    return next(
        (
            c
            for c in crews
            if c.id not in busy and c.id not in excluded and is_crew_eligible(c)
        ),
        None,
    )
