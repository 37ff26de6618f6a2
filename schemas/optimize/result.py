from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Union
import datetime as dt
from schemas.schedule.records import EngineSettings, ScheduleSnapshot, Stage

ChangeType = Literal["reschedule", "reassign-crew"]


class ScheduleChange(BaseModel):
    stageId: str
    changeType: ChangeType
    # crew id for reassignments, new start time for reschedules
    originalValue: Union[dt.datetime, str]
    newValue: Union[dt.datetime, str]
    reason: str


class ScheduleMetrics(BaseModel):
    totalDuration: int  # hours
    crewIdleTime: int  # hours
    equipmentUtilization: float  # percentage
    estimatedCost: int  # dollars
    conflicts: int


class ChangeSummary(BaseModel):
    description: str
    impact: str


class OptimizationSavings(BaseModel):
    hours: int
    cost: int
    efficiency: int  # percentage improvement


class OptimizationResult(BaseModel):
    originalMetrics: ScheduleMetrics
    optimizedMetrics: ScheduleMetrics
    changes: List[ChangeSummary] = Field(default_factory=list)
    savings: OptimizationSavings


class OptimizeRequest(ScheduleSnapshot):
    settings: EngineSettings = Field(default_factory=EngineSettings)
    asOf: Optional[dt.datetime] = None


class OptimizeResponse(BaseModel):
    optimizedStages: List[Stage]
    changes: List[ScheduleChange]
    metrics: OptimizationResult
