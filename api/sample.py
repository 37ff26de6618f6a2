from fastapi import APIRouter
from docs.sample.schedule import sample_schedule_description
from schemas.schedule.records import ScheduleSnapshot
from utils.sample_data import build_sample_snapshot

router = APIRouter(prefix="/sample", tags=["Sample Data"])


@router.get(
    "/schedule",
    response_model=ScheduleSnapshot,
    description=sample_schedule_description,
    summary="Demo Schedule",
)
def sample_schedule():
    return build_sample_snapshot()
