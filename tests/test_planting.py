"""Tests for planting guide, season and calendar resolution."""

import logging

import pytest

from services.planting import (
    SEASON_TABLES,
    Season,
    month_summary,
    month_tasks,
    months_in_range,
    resolve_guide,
    resolve_season,
)
from services.regions import MONTHS, Region


def test_resolve_guide_returns_populated_pair():
    guide = resolve_guide("SA", "January")
    assert guide is not None
    assert guide.sow == ("Beans", "Carrots", "Beetroot", "Sweet Corn")
    assert "Tomatoes" in guide.plant


def test_resolve_guide_accepts_names_and_case():
    assert resolve_guide("tasmania", "july") == resolve_guide("TAS", "July")


def test_unpopulated_month_is_not_found_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="services.planting"):
        assert resolve_guide("NSW", "July") is None
    assert "No planting data available for NSW in July" in caplog.text


@pytest.mark.parametrize("region, month", [("XX", "January"), ("VIC", "Smarch"), ("", "")])
def test_unknown_region_or_month_is_not_found(region, month):
    assert resolve_guide(region, month) is None


def test_months_in_range_wraps_over_year_end():
    assert months_in_range("December-February") == ["December", "January", "February"]
    assert months_in_range("March-May") == ["March", "April", "May"]
    assert months_in_range("Nonsense") == []


def test_every_month_maps_to_exactly_one_season():
    for region, table in SEASON_TABLES.items():
        for month in MONTHS:
            matches = [label for label in table if month in months_in_range(label)]
            assert len(matches) == 1, (region, month)
            assert resolve_season(region.value, month) == table[matches[0]]


def test_january_is_summer_via_wraparound():
    assert resolve_season("SA", "January") == Season.SUMMER
    assert resolve_season("TAS", "july") == Season.WINTER
    assert resolve_season("QLD", "October") == Season.SPRING


def test_unknown_region_season_is_unknown():
    assert resolve_season("XX", "January") == Season.UNKNOWN
    assert resolve_season("VIC", "Smarch") == Season.UNKNOWN


def test_malformed_season_table_yields_unknown(monkeypatch):
    monkeypatch.setitem(SEASON_TABLES, Region.NT, {"Wet-Dry": Season.SUMMER, "Build-up": Season.SPRING})
    assert resolve_season("NT", "March") == Season.UNKNOWN


def test_month_summary_falls_back_to_default():
    assert month_summary("TAS", "march").startswith("Autumn planting season begins")
    assert month_summary("VIC", "March") == "Transition to autumn. Good planting conditions."
    assert month_summary(None, "March") == "Transition to autumn. Good planting conditions."
    assert month_summary("VIC", "Smarch") is None


def test_month_tasks():
    assert month_tasks("october") == ["Main planting month", "Establish supports", "Monitor pests"]
    assert month_tasks("Smarch") == []
