import logging
import traceback
from fastapi import APIRouter, Body, HTTPException
from core.catalog import ResourceCatalog
from docs.violations.detect import detect_violations_description
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.detector import detect_violations
from schemas.violations.detect import DetectRequest, DetectResponse
from utils.validate import validate_catalog_references, validate_stages

router = APIRouter(prefix="/violations", tags=["Violations"])
logger = logging.getLogger("scheduler.api")


@router.post(
    "/detect",
    response_model=DetectResponse,
    description=detect_violations_description,
    summary="Detect Constraint Violations",
)
def detect(request: DetectRequest = Body(...)):
    try:
        validate_stages(request.stages)
        catalog = ResourceCatalog.from_snapshot(request)

        warnings = []
        note = validate_catalog_references(request.stages, catalog)
        if note:
            warnings.append(note)

        violations = detect_violations(
            request.stages,
            catalog,
            now=request.asOf,
            include_maintenance=request.includeMaintenance,
        )
        return DetectResponse(violations=violations, warnings=warnings)

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        logger.error(tb)
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
