import logging
import traceback
from fastapi import APIRouter, Body, HTTPException
from docs.whatif.simulate import simulate_scenario_description
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.simulator import run_what_if
from schemas.whatif.scenario import WhatIfRequest, WhatIfResult
from utils.validate import validate_stages

router = APIRouter(prefix="/scenarios", tags=["What-If"])
logger = logging.getLogger("scheduler.api")


@router.post(
    "/simulate",
    response_model=WhatIfResult,
    description=simulate_scenario_description,
    summary="Simulate What-If Scenario",
)
def simulate(request: WhatIfRequest = Body(...)):
    try:
        validate_stages(request.stages)
        return run_what_if(
            request.stages, request.scenario, hourly_rate=request.settings.hourlyRate
        )

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        logger.error(tb)
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
