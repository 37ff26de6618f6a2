from pydantic import BaseModel, Field
from typing import List, Literal, Optional
import datetime as dt
from schemas.schedule.records import ScheduleSnapshot

ViolationType = Literal[
    "crew-availability", "equipment-availability", "maintenance-window"
]


class ConstraintViolation(BaseModel):
    type: ViolationType
    description: str
    affectedStageIds: List[str]
    # only positive detections are ever emitted
    violation: bool = True


class DetectRequest(ScheduleSnapshot):
    asOf: Optional[dt.datetime] = None
    includeMaintenance: bool = True


class DetectResponse(BaseModel):
    violations: List[ConstraintViolation]
    warnings: List[str] = Field(default_factory=list)
