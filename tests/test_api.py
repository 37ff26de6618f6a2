import pandas as pd
from tests.conftest import at


def _payload(*stages, **extra):
    return {"stages": [s.model_dump(mode="json") for s in stages], **extra}


def test_healthcheck(client):
    res = client.get("/api/health/check")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_detect_endpoint(client, make_stage, now):
    body = _payload(
        make_stage("stage-2-1", well="well-2", start=0, hours=3, crew="crew-2"),
        make_stage("stage-4-1", well="well-4", start=2, hours=2, crew="crew-2"),
        asOf=now.isoformat(),
    )
    res = client.post("/api/violations/detect", json=body)

    assert res.status_code == 200
    data = res.json()
    assert [v["type"] for v in data["violations"]] == ["crew-availability"]
    assert data["violations"][0]["affectedStageIds"] == ["stage-2-1", "stage-4-1"]
    # no crew catalog was sent
    assert len(data["warnings"]) == 1


def test_detect_rejects_duplicate_stage_ids(client, make_stage):
    res = client.post("/api/violations/detect", json=_payload(make_stage("a"), make_stage("a")))
    assert res.status_code == 400


def test_detect_rejects_inverted_window(client, make_stage):
    body = _payload(make_stage("a"))
    body["stages"][0]["scheduledEnd"] = body["stages"][0]["scheduledStart"]
    res = client.post("/api/violations/detect", json=body)
    assert res.status_code == 422


def test_optimize_endpoint(client, make_stage, now):
    body = _payload(
        make_stage("stage-2-1", well="well-2", start=1, hours=3, crew="crew-2", equipment=["eq-2"]),
        make_stage("stage-4-1", well="well-4", start=2, hours=2, crew="crew-3", equipment=["eq-2"]),
        asOf=now.isoformat(),
    )
    res = client.post("/api/schedule/optimize", json=body)

    assert res.status_code == 200
    data = res.json()
    assert [c["changeType"] for c in data["changes"]] == ["reschedule"]
    assert pd.Timestamp(data["optimizedStages"][1]["scheduledStart"]) == pd.Timestamp(at(4.5))
    assert data["metrics"]["savings"]["cost"] == 30000


def test_simulate_endpoint(client, make_stage):
    body = {
        "stages": [
            make_stage(f"stage-3-{i}", well="well-3", start=i * 3, hours=2).model_dump(mode="json")
            for i in range(1, 4)
        ],
        "scenario": {
            "id": "scn-1",
            "name": "Well 3 frac fleet down",
            "changes": [{"type": "delay-well", "params": {"wellId": "well-3", "hours": 24}}],
        },
    }
    res = client.post("/api/scenarios/simulate", json=body)

    assert res.status_code == 200
    data = res.json()
    assert data["delayHours"] == 72
    assert data["costImpact"] == 1080000
    assert len(data["impactedStages"]) == 3


def test_move_endpoint_reports_overlap(client, make_stage):
    body = _payload(
        make_stage("stage-1-1", well="well-1", start=1, hours=2, crew="crew-1"),
        make_stage("stage-1-2", well="well-1", start=5, hours=2, crew="crew-2"),
        stageId="stage-1-2",
        newStart=at(2).isoformat(),
    )
    res = client.post("/api/moves/validate", json=body)

    assert res.status_code == 200
    data = res.json()
    assert [c["type"] for c in data["conflicts"]] == ["overlap"]
    assert data["conflicts"][0]["stageIds"] == ["stage-1-2", "stage-1-1"]


def test_move_endpoint_rejects_locked_stage(client, make_stage):
    body = _payload(
        make_stage("stage-1-1", status="complete"),
        stageId="stage-1-1",
        newStart=at(8).isoformat(),
    )
    assert client.post("/api/moves/validate", json=body).status_code == 409


def test_move_endpoint_unknown_stage(client, make_stage):
    body = _payload(make_stage("stage-1-1"), stageId="nope", newStart=at(8).isoformat())
    assert client.post("/api/moves/validate", json=body).status_code == 404


def test_sample_endpoint(client):
    res = client.get("/api/sample/schedule")
    assert res.status_code == 200
    assert len(res.json()["stages"]) == 200


def test_api_key_is_enforced_when_set(client, monkeypatch):
    import main

    monkeypatch.setattr(main, "API_KEY", "secret")

    assert client.get("/api/sample/schedule").status_code == 401
    assert client.get("/api/sample/schedule", headers={"x-api-key": "secret"}).status_code == 200
    assert client.get("/api/health/check").status_code == 200


def test_simulate_rejects_malformed_params(client, make_stage):
    stages = [make_stage("stage-3-1", well="well-3").model_dump(mode="json")]
    for change in (
        {"type": "delay-well", "params": {"wellId": "well-3", "hours": "12"}},
        {"type": "weather-event", "params": {"pads": "Mesa Verde C"}},
    ):
        body = {
            "stages": stages,
            "scenario": {"id": "scn-2", "name": "Bad input", "changes": [change]},
        }
        assert client.post("/api/scenarios/simulate", json=body).status_code == 422
