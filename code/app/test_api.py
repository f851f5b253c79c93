from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.core import pipeline
from app.core.pipeline import project_to_chart
from app.main import app
from wealth.schemas import Milestone, Shock, SimulationParameters

client = TestClient(app)
THIS_YEAR = date.today().year


@pytest.fixture(autouse=True)
def small_runs(monkeypatch):
    monkeypatch.setattr(pipeline, "WEALTH_TRIALS", 64)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_project_returns_full_horizon():
    resp = client.post("/project", json={"profile": {"net_worth": 500000, "savings_habit_delta": 2}, "seed": 1})
    assert resp.status_code == 200
    body = resp.json()
    assert [p["year"] for p in body["chart"]] == list(range(THIS_YEAR, THIS_YEAR + 11))
    assert all(p["label"] == str(p["year"]) for p in body["chart"])
    assert body["chart"][0] == {"year": THIS_YEAR, "status_quo": 5, "optimized": 5, "label": str(THIS_YEAR)}
    assert body["medians"][0]["status_quo_median"] == 500000
    assert body["trials"] == 64
    assert body["monthly_savings_k"] == 27
    assert body["shock"] is None
    assert 0.0 <= body["probability_of_ruin"] <= 1.0


def test_project_is_reproducible_with_seed():
    payload = {"profile": {"net_worth": 800000, "savings_habit_delta": 3}, "seed": 99}
    assert client.post("/project", json=payload).json() == client.post("/project", json=payload).json()


def test_project_with_preset_shock_and_goals():
    payload = {
        "profile": {"net_worth": 2000000, "city_tier": "tier2"},
        "goals": {"wedding_year": THIS_YEAR + 3, "wedding_cost": 600000, "house_year": 1800, "house_cost": 900000},
        "milestones": [{"year": THIS_YEAR + 5, "amount": 100000, "label": "Car"}],
        "shock_preset": "medical",
        "seed": 5,
    }
    body = client.post("/project", json=payload).json()
    assert body["shock"] == {"amount": 500000.0, "year": THIS_YEAR + 2, "type": "medical"}
    assert [m["label"] for m in body["milestones"]] == ["Wedding", "Car"]
    # 60 + 25 - 8*0.4 - 5 - 15 = 61.8
    assert body["score"]["health_score"] == 62
    assert body["score"]["health_band"] == "Good"
    assert body["score"]["discretionary_spend_k"] == 8


def test_project_rejects_two_shocks():
    payload = {
        "shock": {"amount": 100000, "year": THIS_YEAR + 1, "type": "custom"},
        "shock_preset": "market",
    }
    assert client.post("/project", json=payload).status_code == 422


def test_project_rejects_negative_wealth():
    assert client.post("/project", json={"profile": {"net_worth": -1}}).status_code == 422


def test_engine_errors_map_to_422(monkeypatch):
    monkeypatch.setattr(pipeline, "WEALTH_TRIALS", 0)
    resp = client.post("/project", json={})
    assert resp.status_code == 422
    assert "trials" in resp.json()["detail"]


def test_score_golden():
    payload = {"profile": {"net_worth": 500000, "city_tier": "tier1", "discretionary_spend_k": 12}}
    body = client.post("/score", json=payload).json()
    assert body["health_score"] == 50
    assert body["health_band"] == "Needs Work"
    assert body["shock_capacity"] == 300000
    assert body["shock_capacity_display"] == "₹3.0L"


def test_shock_presets():
    presets = client.get("/shocks/presets").json()
    assert {p["type"] for p in presets} == {"medical", "market", "education", "vehicle"}
    assert all(p["year"] == THIS_YEAR + 2 for p in presets)


def test_project_to_chart_scales_to_lakhs():
    params = SimulationParameters(current_year=2025, trials=15)
    chart = project_to_chart(
        1_000_000,
        Shock(amount=200_000, year=2025, type="custom"),
        1,
        [Milestone(2025, 50_000, "Trip")],
        seed=3,
        params=params,
    )
    assert len(chart) == 11
    assert chart[0] == {"year": 2025, "status_quo": 8, "optimized": 8, "label": "2025"}
    assert all(p["status_quo"] >= 0 and p["optimized"] >= 0 for p in chart)


def test_sample_request_round_trips():
    from app.core.sample_payloads import SAMPLE_REQUEST

    body = client.post("/project", json=SAMPLE_REQUEST).json()
    assert len(body["chart"]) == 11
    assert [m["label"] for m in body["milestones"]] == ["Wedding", "House Downpayment", "Car"]
    assert body["shock"]["type"] == "medical"
    assert body["monthly_savings_k"] == 28
    # 60 + 7.5 + 9 - 7.2 - 10 - 15 = 44.3
    assert body["score"]["health_score"] == 44
