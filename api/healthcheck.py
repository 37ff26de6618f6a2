from fastapi import APIRouter
from utils.time_utils import utc_now

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck():
    return {
        "status": "ok",
        "service": "field-schedule-engine",
        "time": utc_now().isoformat(),
    }
