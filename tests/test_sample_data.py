from core.catalog import ResourceCatalog
from scheduler.detector import detect_violations
from scheduler.optimizer import optimize_schedule
from utils.sample_data import build_sample_snapshot
from utils.validate import validate_catalog_references, validate_stages


def test_sample_snapshot_is_consistent(now):
    snapshot = build_sample_snapshot(now)

    assert len(snapshot.stages) == 200
    assert len(snapshot.crews) == 5
    assert len(snapshot.equipment) == 10
    validate_stages(snapshot.stages)
    assert validate_catalog_references(snapshot.stages, ResourceCatalog.from_snapshot(snapshot)) is None


def test_sample_snapshot_is_deterministic(now):
    assert build_sample_snapshot(now) == build_sample_snapshot(now)


def test_each_active_well_has_one_stage_in_progress(now):
    snapshot = build_sample_snapshot(now)
    in_progress = sorted(s.wellId for s in snapshot.stages if s.status == "in-progress")
    assert in_progress == ["well-1", "well-2", "well-5"]


def test_engine_runs_on_sample(now):
    snapshot = build_sample_snapshot(now)
    catalog = ResourceCatalog.from_snapshot(snapshot)

    detect_violations(snapshot.stages, catalog, now=now)
    optimized, _, _ = optimize_schedule(snapshot.stages, catalog, now=now)
    assert [s.id for s in optimized] == [s.id for s in snapshot.stages]


def test_sample_wells(now):
    snapshot = build_sample_snapshot(now)
    wells = sorted({s.wellId for s in snapshot.stages})
    assert wells == ["well-1", "well-2", "well-4", "well-5", "well-6"]
