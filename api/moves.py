import logging
import traceback
from fastapi import APIRouter, Body, HTTPException
from core.catalog import ResourceCatalog
from docs.moves.validate import validate_move_description
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.moves import apply_move, find_stage, validate_move
from schemas.moves.validate import MoveRequest, MoveValidationResult
from utils.validate import validate_stages

router = APIRouter(prefix="/moves", tags=["Moves"])
logger = logging.getLogger("scheduler.api")


@router.post(
    "/validate",
    response_model=MoveValidationResult,
    description=validate_move_description,
    summary="Validate Stage Move",
)
def validate(request: MoveRequest = Body(...)):
    try:
        validate_stages(request.stages)
        stage = find_stage(request.stages, request.stageId)
        moved = apply_move(stage, request.newStart, request.newEnd)

        # validate against the schedule as it would look after the drop
        proposed = [moved if s.id == moved.id else s for s in request.stages]
        conflicts = validate_move(
            moved, proposed, ResourceCatalog.from_snapshot(request)
        )
        return MoveValidationResult(movedStage=moved, conflicts=conflicts)

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        logger.error(tb)
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
