from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Literal, Optional
from schemas.schedule.records import EngineSettings, Stage

ScenarioChangeType = Literal["delay-well", "add-crew", "remove-equipment", "weather-event"]


class DelayWellParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    wellId: str
    # falls back to DEFAULT_WELL_DELAY_HOURS when missing or 0
    hours: Optional[float] = Field(default=None, ge=0, strict=True)


class RemoveEquipmentParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    equipmentId: str


class WeatherEventParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    pads: List[str] = Field(default_factory=list)
    # per pad; falls back to WEATHER_DELAY_HOURS_PER_PAD
    hours: Optional[float] = Field(default=None, ge=0, strict=True)


class AddCrewParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    crewId: Optional[str] = None


SCENARIO_PARAMS = {
    "delay-well": DelayWellParams,
    "remove-equipment": RemoveEquipmentParams,
    "weather-event": WeatherEventParams,
    "add-crew": AddCrewParams,
}


class ScenarioChange(BaseModel):
    type: ScenarioChangeType
    params: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_params(self) -> "ScenarioChange":
        """Validate params against the model for this change type and keep the cleaned values."""
        params_model = SCENARIO_PARAMS[self.type]
        self.params = params_model.model_validate(self.params).model_dump()
        return self


class WhatIfScenario(BaseModel):
    id: str
    name: str
    description: str = ""
    changes: List[ScenarioChange] = Field(default_factory=list)


class WhatIfResult(BaseModel):
    impactedStages: List[Stage]
    delayHours: int
    costImpact: int
    recommendation: str


class WhatIfRequest(BaseModel):
    stages: List[Stage]
    scenario: WhatIfScenario
    settings: EngineSettings = Field(default_factory=EngineSettings)
