"""
Demo field schedule: five wells (three mid-completion, two not yet started),
five crews and ten equipment units, laid out relative to a reference time so
the schedule always looks "live" (some stages complete, one in progress per
active well, the rest ahead).
"""
from datetime import datetime, timedelta
from typing import List, Optional
from schemas.schedule.records import Crew, Equipment, ScheduleSnapshot, Stage
from utils.time_utils import ensure_utc, utc_now

# (id, name, lead, members, status, currentWellId, hoursWorked, shiftsRemaining)
CREWS = [
    ("crew-1", "Alpha Team", "Mike Rodriguez", 12, "on-site", "well-1", 847, 3),
    ("crew-2", "Bravo Team", "Sarah Chen", 11, "on-site", "well-2", 623, 5),
    ("crew-3", "Charlie Team", "James Walker", 10, "in-transit", None, 412, 7),
    ("crew-4", "Delta Team", "Maria Santos", 12, "on-site", "well-5", 756, 4),
    ("crew-5", "Echo Team", "Tom Bradley", 11, "off-duty", None, 892, 1),
]

# (id, type, name, status, currentWellId, last maintenance day, next maintenance day, utilization)
EQUIPMENT = [
    ("eq-1", "pump", "Quintuplex Pump Unit #1", "in-use", "well-1", -5, 10, 87),
    ("eq-2", "pump", "Quintuplex Pump Unit #2", "in-use", "well-2", -8, 7, 92),
    ("eq-3", "pump", "Quintuplex Pump Unit #3", "operational", None, -3, 12, 45),
    ("eq-4", "blender", "Blender Unit #1", "in-use", "well-1", -12, 3, 78),
    ("eq-5", "blender", "Blender Unit #2", "in-use", "well-5", -6, 9, 81),
    ("eq-6", "hydration", "Hydration Unit #1", "in-use", "well-2", -15, 0, 95),
    ("eq-7", "data-van", "Data Acquisition Van #1", "in-use", "well-1", -20, 10, 88),
    ("eq-8", "sand-king", "Sand King Unit #1", "in-use", "well-1", -7, 8, 84),
    ("eq-9", "sand-king", "Sand King Unit #2", "maintenance", None, -1, 14, 0),
    ("eq-10", "chemical", "Chemical Add Unit #1", "in-use", "well-5", -4, 11, 72),
]


def _day(now: datetime, days: int, hour: float = 0) -> datetime:
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight + timedelta(days=days, hours=hour)


def _active_well(
    now: datetime,
    well_num: int,
    total: int,
    current: int,
    spacing: float,
    duration: float,
    crew_id: str,
    equipment_ids: List[str],
    delayed: tuple = (),
) -> List[Stage]:
    """Stages of a well mid-completion: before `current` complete, `current` in progress."""
    top_of_hour = now.replace(minute=0, second=0, microsecond=0)
    stages = []
    for i in range(1, total + 1):
        if i < current:
            status = "complete"
        elif i == current:
            status = "in-progress"
        elif i in delayed:
            status = "delayed"
        else:
            status = "scheduled"
        offset = (i - current) * spacing + (4 if status == "delayed" else 0)
        start = top_of_hour + timedelta(hours=offset)
        end = start + timedelta(hours=duration)
        done = status == "complete"
        stages.append(
            Stage(
                id=f"stage-{well_num}-{i}",
                wellId=f"well-{well_num}",
                stageNumber=i,
                status=status,
                scheduledStart=start,
                scheduledEnd=end,
                actualStart=start if status in ("complete", "in-progress") else None,
                actualEnd=end if done else None,
                crewId=crew_id,
                equipmentIds=list(equipment_ids),
                pumpRate=90.0 if done else None,
                pressure=8600.0 if done else None,
                proppant=460000.0 if done else None,
            )
        )
    return stages


def _future_well(
    now: datetime,
    well_num: int,
    total: int,
    start_day: int,
    crew_id: str,
    equipment_ids: List[str],
) -> List[Stage]:
    return [
        Stage(
            id=f"stage-{well_num}-{i}",
            wellId=f"well-{well_num}",
            stageNumber=i,
            status="scheduled",
            scheduledStart=_day(now, start_day, 6 + i * 2),
            scheduledEnd=_day(now, start_day, 8 + i * 2),
            crewId=crew_id,
            equipmentIds=list(equipment_ids),
        )
        for i in range(1, total + 1)
    ]


def build_sample_crews() -> List[Crew]:
    return [
        Crew(
            id=cid,
            name=name,
            lead=lead,
            members=members,
            status=status,
            currentWellId=well,
            certifications=["H2S", "Well Control", "Pressure Pumping"],
            hoursWorked=hours,
            shiftsRemaining=shifts,
        )
        for cid, name, lead, members, status, well, hours, shifts in CREWS
    ]


def build_sample_equipment(now: datetime) -> List[Equipment]:
    return [
        Equipment(
            id=eid,
            type=etype,
            name=name,
            status=status,
            currentWellId=well,
            lastMaintenance=_day(now, last),
            nextMaintenance=_day(now, nxt),
            utilization=util,
        )
        for eid, etype, name, status, well, last, nxt, util in EQUIPMENT
    ]


def build_sample_stages(now: datetime) -> List[Stage]:
    return (
        _active_well(now, 1, 42, 29, 2, 1.5, "crew-1", ["eq-1", "eq-4", "eq-7", "eq-8"])
        + _active_well(now, 2, 38, 13, 2.5, 2, "crew-2", ["eq-2", "eq-6"])
        + _active_well(now, 5, 36, 9, 2, 1.75, "crew-4", ["eq-5", "eq-10"], delayed=(15, 16))
        + _future_well(now, 4, 40, 3, "crew-3", ["eq-3"])
        + _future_well(now, 6, 44, 7, "crew-5", ["eq-9"])
    )


def build_sample_snapshot(now: Optional[datetime] = None) -> ScheduleSnapshot:
    """The full demo schedule anchored at `now` (defaults to the current UTC time)."""
    now = ensure_utc(now) if now is not None else utc_now()
    return ScheduleSnapshot(
        stages=build_sample_stages(now),
        crews=build_sample_crews(),
        equipment=build_sample_equipment(now),
    )
