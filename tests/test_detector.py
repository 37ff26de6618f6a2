from datetime import timedelta
from core.catalog import ResourceCatalog
from schemas.schedule.records import Equipment
from scheduler.detector import detect_violations
from tests.conftest import at


def test_empty_schedule_has_no_violations(now):
    assert detect_violations([], now=now) == []


def test_same_well_crew_overlap_is_not_flagged(make_stage, now):
    stages = [
        make_stage("stage-2-1", well="well-2", start=0, hours=3, crew="crew-2"),
        make_stage("stage-2-2", well="well-2", start=2, hours=2, crew="crew-2"),
    ]
    violations = detect_violations(stages, now=now)
    assert [v for v in violations if v.type == "crew-availability"] == []


def test_cross_well_crew_overlap_is_flagged(make_stage, catalog, now):
    stages = [
        make_stage("stage-2-1", well="well-2", start=0, hours=3, crew="crew-2"),
        make_stage("stage-4-1", well="well-4", start=2, hours=2, crew="crew-2"),
    ]
    violations = detect_violations(stages, catalog, now=now)

    assert len(violations) == 1
    v = violations[0]
    assert v.type == "crew-availability"
    assert v.affectedStageIds == ["stage-2-1", "stage-4-1"]
    assert v.description == "Bravo Team assigned to overlapping stages on different wells"
    assert v.violation is True


def test_unknown_crew_falls_back_to_id(make_stage, now):
    stages = [
        make_stage("a", well="well-1", start=0, hours=3, crew="crew-9"),
        make_stage("b", well="well-2", start=1, hours=3, crew="crew-9"),
    ]
    violations = detect_violations(stages, now=now)
    assert violations[0].description.startswith("crew-9 ")


def test_touching_stages_do_not_overlap(make_stage, now):
    stages = [
        make_stage("a", well="well-1", start=0, hours=2, crew="crew-1", equipment=["eq-1"]),
        make_stage("b", well="well-2", start=2, hours=2, crew="crew-1", equipment=["eq-1"]),
    ]
    assert detect_violations(stages, now=now) == []


def test_equipment_overlap_across_wells(make_stage, catalog, now):
    stages = [
        make_stage("stage-2-1", well="well-2", start=1, hours=3, crew="crew-2", equipment=["eq-2"]),
        make_stage("stage-4-1", well="well-4", start=2, hours=2, crew="crew-3", equipment=["eq-2"]),
    ]
    violations = detect_violations(stages, catalog, now=now)

    assert len(violations) == 1
    assert violations[0].type == "equipment-availability"
    assert violations[0].affectedStageIds == ["stage-2-1", "stage-4-1"]
    assert violations[0].description == "Quintuplex Pump Unit #2 scheduled for overlapping operations"


def test_equipment_overlap_on_same_well_is_not_flagged(make_stage, now):
    stages = [
        make_stage("a", well="well-1", start=1, hours=3, crew="crew-1", equipment=["eq-1"]),
        make_stage("b", well="well-1", start=2, hours=2, crew="crew-2", equipment=["eq-1"]),
    ]
    assert detect_violations(stages, now=now) == []


def test_only_adjacent_pairs_are_compared(make_stage, now):
    # a overlaps c, but b sits between them in start order and overlaps neither
    stages = [
        make_stage("a", well="well-1", start=0, hours=10, crew="crew-1"),
        make_stage("b", well="well-1", start=1, hours=1, crew="crew-1"),
        make_stage("c", well="well-2", start=3, hours=1, crew="crew-1"),
    ]
    assert detect_violations(stages, now=now) == []


def test_maintenance_window_collects_upcoming_stages(make_stage, now):
    catalog = ResourceCatalog(
        equipment=[Equipment(id="eq-6", name="Hydration Unit #1", nextMaintenance=at(10))]
    )
    stages = [
        make_stage("past", well="well-1", start=-3, hours=2, crew="crew-1", equipment=["eq-6"]),
        make_stage("soon", well="well-2", start=2, hours=2, crew="crew-2", equipment=["eq-6"]),
        make_stage("edge", well="well-3", start=17, hours=2, crew="crew-3", equipment=["eq-6"]),
        make_stage("later", well="well-4", start=20, hours=2, crew="crew-4", equipment=["eq-6"]),
    ]
    violations = detect_violations(stages, catalog, now=now)

    assert len(violations) == 1
    assert violations[0].type == "maintenance-window"
    assert violations[0].affectedStageIds == ["soon", "edge"]
    assert "Hydration Unit #1" in violations[0].description


def test_overdue_maintenance_is_included(make_stage, now):
    catalog = ResourceCatalog(
        equipment=[Equipment(id="eq-1", name="Pump", nextMaintenance=now - timedelta(hours=2))]
    )
    stages = [make_stage("a", start=1, hours=1, equipment=["eq-1"])]
    violations = detect_violations(stages, catalog, now=now)
    assert [v.affectedStageIds for v in violations] == [["a"]]


def test_distant_maintenance_is_ignored(make_stage, catalog, now):
    stages = [make_stage("a", start=1, hours=1, equipment=["eq-1", "eq-2"])]
    assert detect_violations(stages, catalog, now=now) == []


def test_maintenance_check_can_be_disabled(make_stage, now):
    catalog = ResourceCatalog(
        equipment=[Equipment(id="eq-1", name="Pump", nextMaintenance=at(1))]
    )
    stages = [make_stage("a", start=2, hours=1, equipment=["eq-1"])]
    assert detect_violations(stages, catalog, now=now, include_maintenance=False) == []


def test_violation_order_is_crew_then_equipment_then_maintenance(make_stage, now):
    catalog = ResourceCatalog(
        equipment=[Equipment(id="eq-1", name="Pump", nextMaintenance=at(1))]
    )
    stages = [
        make_stage("a", well="well-1", start=1, hours=3, crew="crew-1", equipment=["eq-1"]),
        make_stage("b", well="well-2", start=2, hours=3, crew="crew-1", equipment=["eq-1"]),
    ]
    violations = detect_violations(stages, catalog, now=now)
    assert [v.type for v in violations] == [
        "crew-availability",
        "equipment-availability",
        "maintenance-window",
    ]


def test_detection_is_repeatable_and_read_only(make_stage, catalog, now):
    stages = [
        make_stage("a", well="well-1", start=0, hours=3, crew="crew-1", equipment=["eq-1"]),
        make_stage("b", well="well-2", start=1, hours=3, crew="crew-1", equipment=["eq-1"]),
    ]
    before = [s.model_dump() for s in stages]

    first = detect_violations(stages, catalog, now=now)
    second = detect_violations(stages, catalog, now=now)

    assert first == second
    assert [s.model_dump() for s in stages] == before
