from pydantic import BaseModel, Field
from typing import List, Literal, Optional
import datetime as dt
from schemas.schedule.records import ScheduleSnapshot, Stage

ConflictType = Literal["crew", "equipment", "overlap"]


class MoveConflict(BaseModel):
    type: ConflictType
    message: str
    stageIds: List[str]


class MoveRequest(ScheduleSnapshot):
    stageId: str
    newStart: dt.datetime
    # when omitted the stage keeps its current duration
    newEnd: Optional[dt.datetime] = None


class MoveValidationResult(BaseModel):
    movedStage: Stage
    conflicts: List[MoveConflict] = Field(default_factory=list)
