import logging
import traceback
from fastapi import APIRouter, Body, HTTPException
from core.catalog import ResourceCatalog
from docs.optimize.schedule import optimize_schedule_description
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.optimizer import optimize_schedule
from schemas.optimize.result import OptimizeRequest, OptimizeResponse
from utils.validate import validate_stages

router = APIRouter(prefix="/schedule", tags=["Optimizer"])
logger = logging.getLogger("scheduler.api")


@router.post(
    "/optimize",
    response_model=OptimizeResponse,
    description=optimize_schedule_description,
    summary="Optimize Schedule",
)
def optimize(request: OptimizeRequest = Body(...)):
    try:
        validate_stages(request.stages)
        optimized, changes, metrics = optimize_schedule(
            request.stages,
            ResourceCatalog.from_snapshot(request),
            hourly_rate=request.settings.hourlyRate,
            utilization_baseline=request.settings.utilizationBaseline,
            now=request.asOf,
        )
        return OptimizeResponse(
            optimizedStages=optimized, changes=changes, metrics=metrics
        )

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        logger.error(tb)
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
