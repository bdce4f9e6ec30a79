import pytest

from renobudget.app import CALCULATION_FAILED, create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_project_types(client):
    data = client.get("/estimate/project-types").get_json()
    assert "Kitchen" in data["project_types"]
    assert data["tiers"] == ["low", "middle", "high"]


def test_calculate_returns_three_tiers(client):
    resp = client.post(
        "/estimate/calculate",
        json={"home_value": "$300,000", "yearly_income": 90000, "project_type": "Kitchen"},
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert set(data["tiers"]) == {"low", "middle", "high"}
    low = data["tiers"]["low"]
    assert low["total_budget"] == pytest.approx(16500)
    assert low["updated_home_value"] == pytest.approx(314850)
    assert data["inputs"]["home_value"] == 300000.0


def test_calculate_bad_inputs(client):
    resp = client.post(
        "/estimate/calculate",
        json={"home_value": 1000, "yearly_income": 90000, "project_type": "select"},
    )
    assert resp.status_code == 400
    assert "Please check your inputs" in resp.get_json()["error"]


def test_calculate_empty_body(client):
    resp = client.post("/estimate/calculate", data="not json")
    assert resp.status_code == 400


def test_missing_table_entry_aborts_all_tiers(client, monkeypatch):
    from renobudget.domain import project_types
    from renobudget.domain.tiers import Tier

    patched = {t: dict(rows) for t, rows in project_types.BUDGET_COEFFICIENTS.items()}
    del patched[Tier.MIDDLE]["Landscaping"]
    monkeypatch.setattr(project_types, "BUDGET_COEFFICIENTS", patched)

    resp = client.post(
        "/estimate/calculate",
        json={"home_value": 400000, "yearly_income": 100000, "project_type": "Landscaping"},
    )
    assert resp.status_code == 422
    data = resp.get_json()
    assert data == {"error": CALCULATION_FAILED}


def test_summary_endpoint(client):
    calc = client.post(
        "/estimate/calculate",
        json={"home_value": 300000, "yearly_income": 90000, "project_type": "Kitchen"},
    ).get_json()
    resp = client.post("/estimate/summary", json={"calculation": calc})
    assert resp.status_code == 200
    assert "## Tier comparison" in resp.get_json()["markdown"]


def test_summary_endpoint_requires_tiers(client):
    resp = client.post("/estimate/summary", json={"foo": 1})
    assert resp.status_code == 400


def test_calculate_rejects_non_object_body(client):
    resp = client.post("/estimate/calculate", json=[1, 2])
    assert resp.status_code == 400
    assert "JSON object" in resp.get_json()["error"]


def test_summary_rejects_non_object_body(client):
    resp = client.post("/estimate/summary", json=[1])
    assert resp.status_code == 400


def test_summary_rejects_non_dict_tier(client):
    resp = client.post("/estimate/summary", json={"tiers": {"low": "x"}})
    assert resp.status_code == 400


def test_summary_tolerates_odd_inputs_block(client):
    resp = client.post("/estimate/summary", json={"inputs": "x", "tiers": {"low": {"time_to_save": "soon"}}})
    assert resp.status_code == 200
    assert "**Project type**: —" in resp.get_json()["markdown"]
