from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Literal, Optional
import datetime as dt
from utils.constants import HOURLY_RATE, UTILIZATION_BASELINE, LOCKED_STAGE_STATUSES
from utils.time_utils import ensure_utc

StageStatus = Literal["complete", "in-progress", "scheduled", "delayed"]
CrewStatus = Literal["on-site", "in-transit", "off-duty", "maintenance"]


class Stage(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    wellId: str
    stageNumber: int
    status: StageStatus
    scheduledStart: dt.datetime
    scheduledEnd: dt.datetime
    actualStart: Optional[dt.datetime] = None
    actualEnd: Optional[dt.datetime] = None
    crewId: str
    equipmentIds: List[str] = Field(default_factory=list)
    # telemetry, only reported for complete / in-progress stages
    pumpRate: Optional[float] = None
    pressure: Optional[float] = None
    proppant: Optional[float] = None

    @field_validator(
        "scheduledStart", "scheduledEnd", "actualStart", "actualEnd", mode="before"
    )
    @classmethod
    def normalise_timestamps(cls, value):
        return ensure_utc(value)

    @model_validator(mode="after")
    def check_stage_window(self) -> "Stage":
        if self.scheduledEnd <= self.scheduledStart:
            raise ValueError(
                f"Stage {self.id} must end after it starts ({self.scheduledStart} >= {self.scheduledEnd})."
            )
        has_telemetry = any(
            v is not None for v in (self.pumpRate, self.pressure, self.proppant)
        )
        if has_telemetry and self.status not in LOCKED_STAGE_STATUSES:
            raise ValueError(
                f"Stage {self.id} reports telemetry but is '{self.status}'; telemetry is only kept for complete or in-progress stages."
            )
        return self


class Crew(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    status: CrewStatus
    shiftsRemaining: int = Field(ge=0)
    lead: Optional[str] = None
    members: Optional[int] = None
    currentWellId: Optional[str] = None
    certifications: List[str] = Field(default_factory=list)
    hoursWorked: Optional[float] = None


class Equipment(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    nextMaintenance: dt.datetime
    type: Optional[str] = None
    status: Optional[str] = None
    currentWellId: Optional[str] = None
    lastMaintenance: Optional[dt.datetime] = None
    utilization: Optional[float] = None

    @field_validator("nextMaintenance", "lastMaintenance", mode="before")
    @classmethod
    def normalise_timestamps(cls, value):
        return ensure_utc(value)


class EngineSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    hourlyRate: float = Field(default=HOURLY_RATE, gt=0)
    utilizationBaseline: float = Field(default=UTILIZATION_BASELINE, ge=0, le=100)


class ScheduleSnapshot(BaseModel):
    stages: List[Stage]
    crews: List[Crew] = Field(default_factory=list)
    equipment: List[Equipment] = Field(default_factory=list)
