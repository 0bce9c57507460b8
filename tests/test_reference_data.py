"""Tests for location no-nos, month details and plant growth timelines."""

from datetime import date

import pytest

from services.no_nos import DEFAULT_NO_NOS, REGION_NO_NOS, resolve_no_nos
from services.planting import month_detail
from services.regions import Region
from services.timelines import DEFAULT_PLANT_TIMELINE, get_timeline, plant_schedule


def test_no_nos_city_and_month():
    sydney_june = resolve_no_nos("NSW", "Sydney", "june")
    assert sydney_june.mistakes[0].startswith("Compacting wet soils")

    launceston = resolve_no_nos("TAS", "launceston", "January")
    assert launceston.mistakes[0].startswith("Underestimating heat intensity")


def test_no_nos_month_defaults_to_january():
    assert resolve_no_nos("TAS", "Hobart") == resolve_no_nos("TAS", "Hobart", "January")
    assert resolve_no_nos("TAS", "Hobart", "Smarch") == resolve_no_nos("TAS", "Hobart", "January")


def test_no_nos_unknown_city_uses_first_city_of_state():
    assert resolve_no_nos("NSW", "Dubbo", "June") == resolve_no_nos("NSW", "Sydney", "June")


def test_no_nos_city_without_monthly_entries_uses_state():
    assert resolve_no_nos("NSW", "Central Coast", "June") == REGION_NO_NOS[Region.NSW]
    vic = resolve_no_nos("VIC", "Melbourne", "July")
    assert vic == REGION_NO_NOS[Region.VIC]
    assert "Late frosts" in vic.warnings


@pytest.mark.parametrize("region", ["XX", "", None])
def test_no_nos_unknown_region_uses_hobart(region):
    assert resolve_no_nos(region, "Anywhere", "June") == DEFAULT_NO_NOS
    assert DEFAULT_NO_NOS.mistakes[0].startswith("Overwatering during windy periods")


def test_every_state_has_no_nos():
    for region in Region:
        entry = resolve_no_nos(region.value)
        assert entry.mistakes and entry.warnings and entry.common_errors


def test_month_detail():
    july = month_detail("july")
    assert july.name == "July"
    assert july.weather.frost_risk == "Very High"
    assert july.weekly_guide[0].sow == ("Peas", "Broad Beans", "Spring Onions")
    assert july.weekly_guide[0].tasks[0] == "Check frost protection"
    assert july.key_tasks == ("Protect from frost", "Winter pruning", "Soil preparation")
    assert month_detail("Smarch") is None


def test_timeline_lookup():
    assert get_timeline("tomatoes").sow_to_seedling == 21
    assert get_timeline("Kale") is None


def test_schedule_from_seed_in_cool_climate():
    harvest, tasks = plant_schedule("Tomatoes", date(2024, 9, 1), start="seed", climate="cool")

    assert harvest == date(2024, 12, 7)
    assert tasks[0].activity == "Monitor for seedling emergence"
    assert tasks[0].due == date(2024, 9, 9)
    assert tasks[0].week == 2

    care = [t for t in tasks if t.category == "climate"]
    assert [t.activity for t in care] == ["Use frost protection", "Monitor night temperatures"]
    assert care[0].due == date(2024, 9, 30)
    assert care[0].week == 5
    assert care[0].details == "Climate-specific care for cool conditions"


def test_schedule_from_seedling_skips_sowing_stage():
    harvest, tasks = plant_schedule("Tomatoes", date(2024, 9, 1), start="seedling")

    assert harvest == date(2024, 10, 31)
    assert len(tasks) == 6
    assert tasks[0].activity == "First true leaves - start fertilizing"
    assert tasks[0].due == date(2024, 9, 22)


def test_schedule_drops_watering_care():
    _, tasks = plant_schedule("Carrots", date(2024, 9, 1), climate="warm")
    assert [t.activity for t in tasks if t.category == "climate"] == ["Mulch soil"]


def test_schedule_for_plant_without_timeline():
    harvest, tasks = plant_schedule("Kale", date(2024, 9, 1))
    assert harvest == date(2024, 11, 14)
    assert [t.activity for t in tasks] == [a.activity for a in DEFAULT_PLANT_TIMELINE.key_activities]


@pytest.mark.parametrize("kwargs", [{"start": "cutting"}, {"climate": "arctic"}])
def test_schedule_rejects_unknown_options(kwargs):
    with pytest.raises(ValueError):
        plant_schedule("Beans", date(2024, 9, 1), **kwargs)


def test_no_nos_route(client):
    resp = client.get("/api/no-nos", params={"region": "nsw", "city": "Sydney", "month": "june"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["region"] == "NSW"
    assert body["month"] == "June"
    assert body["mistakes"][0].startswith("Compacting wet soils")
    assert set(body) >= {"warnings", "common_errors"}


def test_calendar_includes_month_detail(client):
    body = client.get("/api/calendar/march").json()
    assert body["weather"]["avg_temp"] == "20°C"
    assert body["weekly_guide"][0]["sow"][0] == "Broad Beans"
    assert body["weekly_guide"][0]["tasks"][0] == "Begin autumn preparations"


def test_timeline_routes(client):
    assert client.get("/api/timelines").json()["plants"] == [
        "Beans", "Carrots", "Cucumbers", "Lettuce", "Peppers", "Tomatoes",
    ]
    assert client.get("/api/timelines/lettuce").json()["harvest_window"] == 14
    assert client.get("/api/timelines/kale").status_code == 404


def test_schedule_route_uses_location_climate(client):
    resp = client.get("/api/timelines/tomatoes/schedule", params={"planted": "2024-09-01", "region": "TAS"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["climate"] == "cool"
    assert body["estimated_harvest"] == "2024-12-07"
    assert body["schedule"][0]["due"] == "2024-09-09"


def test_schedule_route_validation(client):
    resp = client.get("/api/timelines/beans/schedule", params={"planted": "2024-09-01", "start": "cutting"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "start must be one of seed, seedling"}

    assert client.get("/api/timelines/beans/schedule").status_code == 400
