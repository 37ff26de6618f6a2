from datetime import timezone
import pytest
from pydantic import ValidationError
from core.catalog import ResourceCatalog
from exceptions.custom_errors import DuplicateStageError
from schemas.schedule.records import Crew, Stage
from utils.validate import validate_catalog_references, validate_stages
from tests.conftest import at


def test_unique_stages_pass(make_stage):
    validate_stages([make_stage("a"), make_stage("b")])


def test_duplicate_ids_are_rejected(make_stage):
    with pytest.raises(DuplicateStageError, match="Duplicate stage ids: a"):
        validate_stages([make_stage("a"), make_stage("a")])


def test_duplicate_stage_number_on_a_well_is_rejected(make_stage):
    stages = [
        make_stage("a", well="well-1", number=3),
        make_stage("b", well="well-1", number=3),
        make_stage("c", well="well-2", number=3),
    ]
    with pytest.raises(DuplicateStageError, match="well-1 #3"):
        validate_stages(stages)


def test_unknown_resources_produce_a_note(make_stage, catalog):
    stages = [make_stage("a", crew="crew-9", equipment=["eq-1", "eq-77"])]
    note = validate_catalog_references(stages, catalog)
    assert "crew-9" in note
    assert "eq-77" in note
    assert "eq-1," not in note


def test_known_resources_produce_no_note(make_stage, catalog):
    stages = [make_stage("a", crew="crew-1", equipment=["eq-1"])]
    assert validate_catalog_references(stages, catalog) is None


def _stage(**overrides):
    data = dict(
        id="a",
        wellId="well-1",
        stageNumber=1,
        status="scheduled",
        scheduledStart=at(1),
        scheduledEnd=at(2),
        crewId="crew-1",
    )
    data.update(overrides)
    return Stage(**data)


def test_stage_must_end_after_start():
    with pytest.raises(ValidationError):
        _stage(scheduledEnd=at(1))


def test_telemetry_only_on_locked_stages():
    with pytest.raises(ValidationError):
        _stage(pumpRate=90.0)
    assert _stage(status="complete", pumpRate=90.0, pressure=8600.0).pumpRate == 90.0


def test_timestamps_are_normalised_to_utc():
    stage = _stage(
        scheduledStart="2025-03-10T13:00:00", scheduledEnd="2025-03-10T10:00:00-05:00"
    )
    assert stage.scheduledStart == at(1)
    assert stage.scheduledEnd == at(3)
    assert stage.scheduledStart.tzinfo == timezone.utc


def test_crew_shifts_cannot_be_negative():
    with pytest.raises(ValidationError):
        Crew(id="c", name="C", status="on-site", shiftsRemaining=-1)


def test_catalog_lookups():
    catalog = ResourceCatalog([Crew(id="crew-1", name="Alpha Team", status="on-site", shiftsRemaining=1)])
    assert catalog.crew_name("crew-1") == "Alpha Team"
    assert catalog.crew_name("crew-2") == "crew-2"
    assert catalog.find_equipment("eq-1") is None
    assert catalog.equipment_name("eq-1") == "eq-1"
