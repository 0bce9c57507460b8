"""Tests for the reference-data routes and the health checks."""


def test_planting_guide(client):
    resp = client.get("/api/planting/tas/july")
    assert resp.status_code == 200
    body = resp.json()
    assert body["region"] == "TAS"
    assert body["month"] == "July"
    assert body["season"] == "Winter"
    assert body["guide"]["sow"] == ["Peas", "Broad Beans", "Spring Onions"]
    assert body["summary"].startswith("Peak winter season")
    assert body["tasks"] == ["Protect from frost", "Winter pruning", "Soil preparation"]


def test_planting_guide_not_populated(client):
    resp = client.get("/api/planting/NSW/July")
    assert resp.status_code == 404
    assert resp.json() == {"error": "No planting data available for NSW in July"}


def test_season(client):
    resp = client.get("/api/season", params={"region": "Queensland", "month": "january"})
    assert resp.json() == {"region": "QLD", "month": "January", "season": "Summer"}

    resp = client.get("/api/season", params={"region": "XX", "month": "January"})
    assert resp.json()["season"] == "Unknown"


def test_season_requires_params(client):
    resp = client.get("/api/season", params={"region": "VIC"})
    assert resp.status_code == 400


def test_calendar(client):
    resp = client.get("/api/calendar/march", params={"region": "TAS"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["month"] == "March"
    assert body["summary"].startswith("Autumn planting season begins")
    assert body["tasks"] == ["Prepare for autumn planting", "Clean up garden beds", "Add compost to soil"]

    general = client.get("/api/calendar/March").json()
    assert general["region"] is None
    assert general["summary"] == "Transition to autumn. Good planting conditions."


def test_calendar_unknown_month(client):
    assert client.get("/api/calendar/smarch").status_code == 404


def test_climate(client):
    body = client.get("/api/climate", params={"region": "VIC", "city": "Melbourne"}).json()
    assert body["climate_zone"] == "cool"
    assert "Okra" in [w["name"] for w in body["warnings"]]
    assert body["invasive_plants"] == []


def test_climate_without_location_defaults_to_warm(client):
    body = client.get("/api/climate").json()
    assert body["climate_zone"] == "warm"
    assert body["region"] is None
    assert "Spinach" in [w["name"] for w in body["warnings"]]


def test_climate_lists_invasive_plants(client):
    body = client.get("/api/climate", params={"region": "NSW", "city": "Sydney"}).json()
    assert body["invasive_plants"][0]["scientific_name"] == "Hedera helix"


def test_companions(client):
    assert client.get("/api/companions", params={"search": "to"}).json() == {"plants": ["Potatoes", "Tomatoes"]}

    detail = client.get("/api/companions/carrots").json()
    assert detail["plant_name"] == "Carrots"
    assert detail["bad_companions"] == ["Dill", "Parsnips", "Queen Anne's Lace"]

    assert client.get("/api/companions/Kale").status_code == 404


def test_regions(client):
    regions = client.get("/api/regions").json()["regions"]
    assert len(regions) == 8
    assert regions[0] == {
        "code": "NSW",
        "name": "New South Wales",
        "cities": ["Sydney", "Newcastle", "Wollongong", "Central Coast"],
    }


def test_ready_and_security_headers(client):
    resp = client.get("/ready")
    assert resp.json()["status"] == "ok"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_health_reports_missing_credentials(client):
    body = client.get("/health").json()
    assert body["status"] == "degraded"
    assert body["weather"] == "configured"
    assert body["supabase"] == "missing_credentials"
