"""Tests for climate zone resolution, regions and companion data."""

import pytest

from services.climate import ClimateZone, climate_warnings, invasive_plants, resolve_climate
from services.companions import get_companions, search_companions
from services.regions import Region, is_valid_city, normalize_region


@pytest.mark.parametrize(
    "region, city, expected",
    [
        ("VIC", "Melbourne", ClimateZone.COOL),
        ("VIC", "Unknown City", ClimateZone.COOL),
        ("XX", "Nowhere", ClimateZone.WARM),
        ("NSW", "Sydney", ClimateZone.WARM),
        ("TAS", "", ClimateZone.COOL),
        ("", "", ClimateZone.WARM),
        (None, None, ClimateZone.WARM),
    ],
)
def test_resolve_climate(region, city, expected):
    assert resolve_climate(region, city) == expected


def test_city_override_ignores_region():
    assert resolve_climate("QLD", "Hobart") == ClimateZone.COOL
    assert resolve_climate("TAS", "Darwin") == ClimateZone.WARM


def test_city_match_is_exact():
    # lower-case city misses the override and falls back to the region
    assert resolve_climate("NSW", "canberra") == ClimateZone.WARM


@pytest.mark.parametrize("region", ["vic", "Victoria", " VIC"])
def test_region_match_is_exact(region):
    assert resolve_climate(region, "") == ClimateZone.WARM
    assert resolve_climate("VIC", "") == ClimateZone.COOL


def test_climate_warnings_per_zone():
    warm = [w.name for w in climate_warnings(ClimateZone.WARM)]
    cool = [w.name for w in climate_warnings(ClimateZone.COOL)]
    assert "Brussels Sprouts" in warm
    assert "Okra" in cool
    assert not set(warm) & set(cool)


def test_invasive_plants_by_region():
    assert [p.name for p in invasive_plants("nsw")][:2] == ["English Ivy", "Morning Glory"]
    assert invasive_plants("WA") == []
    assert invasive_plants(None) == []


def test_normalize_region():
    assert normalize_region("vic") == Region.VIC
    assert normalize_region(" Western Australia ") == Region.WA
    assert normalize_region("Narnia") is None
    assert normalize_region("") is None


def test_is_valid_city():
    assert is_valid_city("TAS", "Burnie")
    assert not is_valid_city("TAS", "Sydney")
    assert not is_valid_city("XX", "Sydney")


def test_companion_lookup_is_case_insensitive():
    entry = get_companions("tomatoes")
    assert entry is not None
    assert "Basil" in entry.good_companions
    assert "Fennel" in entry.bad_companions
    assert entry.reasons[0] == "Basil improves flavor and repels pests"
    assert get_companions("Kale") is None


def test_search_companions():
    assert search_companions("to") == ["Potatoes", "Tomatoes"]
    assert len(search_companions()) == 8
