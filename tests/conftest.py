import itertools
from datetime import datetime, timedelta, timezone
import pytest
from fastapi.testclient import TestClient
from core.catalog import ResourceCatalog
from schemas.schedule.records import Crew, Equipment, Stage

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


def at(hours: float) -> datetime:
    return NOW + timedelta(hours=hours)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_stage():
    """Build a Stage starting `start` hours after NOW and lasting `hours`."""
    numbers = itertools.count(1)

    def _make(
        stage_id,
        well="well-1",
        start=1,
        hours=2,
        crew="crew-1",
        equipment=(),
        status="scheduled",
        number=None,
        **extra,
    ):
        return Stage(
            id=stage_id,
            wellId=well,
            stageNumber=number if number is not None else next(numbers),
            status=status,
            scheduledStart=at(start),
            scheduledEnd=at(start + hours),
            crewId=crew,
            equipmentIds=list(equipment),
            **extra,
        )

    return _make


@pytest.fixture
def crews():
    return [
        Crew(id="crew-1", name="Alpha Team", status="on-site", shiftsRemaining=3),
        Crew(id="crew-2", name="Bravo Team", status="on-site", shiftsRemaining=5),
        Crew(id="crew-3", name="Charlie Team", status="in-transit", shiftsRemaining=7),
        Crew(id="crew-5", name="Echo Team", status="off-duty", shiftsRemaining=1),
    ]


@pytest.fixture
def equipment():
    return [
        Equipment(id="eq-1", name="Quintuplex Pump Unit #1", nextMaintenance=at(240)),
        Equipment(id="eq-2", name="Quintuplex Pump Unit #2", nextMaintenance=at(168)),
    ]


@pytest.fixture
def catalog(crews, equipment):
    return ResourceCatalog(crews, equipment)


@pytest.fixture
def client(monkeypatch):
    import main

    monkeypatch.setattr(main, "API_KEY", None)
    return TestClient(main.app)
