"""Reference data routes — planting guides, seasons, climate warnings, companions.

Everything here reads static tables; no outbound calls. Missing data comes
back as a 404 with an error body, never a 500.
"""

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Query

from errors import MissingParameterError, NotFoundError
from services.climate import climate_warnings, invasive_plants, resolve_climate
from services.companions import get_companions, search_companions
from services.no_nos import resolve_no_nos
from services.planting import month_detail, month_summary, month_tasks, resolve_guide, resolve_season
from services.regions import CITIES, REGION_NAMES, normalize_month, normalize_region
from services.timelines import PLANT_TIMELINES, TEMPERATE, get_timeline, plant_schedule

router = APIRouter(prefix="/api")


def _region_label(region: str) -> str:
    code = normalize_region(region)
    return code.value if code is not None else region


@router.get("/regions")
async def regions() -> dict:
    return {
        "regions": [
            {"code": code.value, "name": name, "cities": CITIES[code]}
            for code, name in REGION_NAMES.items()
        ]
    }


@router.get("/planting/{region}/{month}")
async def planting_guide(region: str, month: str) -> dict:
    """Sow/plant guide for a region and month, with its season and tasks."""
    guide = resolve_guide(region, month)
    if guide is None:
        raise NotFoundError(f"No planting data available for {region} in {month}")

    month_name = normalize_month(month)
    return {
        "region": _region_label(region),
        "month": month_name,
        "season": resolve_season(region, month).value,
        "guide": {
            "overview": guide.overview,
            "sow": list(guide.sow),
            "plant": list(guide.plant),
        },
        "summary": month_summary(region, month),
        "tasks": month_tasks(month),
    }


@router.get("/season")
async def season(region: str = Query(""), month: str = Query("")) -> dict:
    if not region.strip() or not month.strip():
        raise MissingParameterError("region and month are required")
    return {
        "region": _region_label(region),
        "month": normalize_month(month) or month,
        "season": resolve_season(region, month).value,
    }


@router.get("/calendar/{month}")
async def calendar(month: str, region: str | None = Query(None)) -> dict:
    """Monthly task calendar, with a region-specific summary when available."""
    month_name = normalize_month(month)
    if month_name is None:
        raise NotFoundError(f"Unknown month: {month}")
    detail = month_detail(month_name)
    return {
        "month": month_name,
        "region": _region_label(region) if region else None,
        "summary": month_summary(region, month_name),
        "tasks": month_tasks(month_name),
        "weekly_guide": [asdict(week) for week in detail.weekly_guide],
        "weather": asdict(detail.weather),
    }


@router.get("/no-nos")
async def no_nos(region: str = Query(""), city: str = Query(""), month: str = Query("")) -> dict:
    """Mistakes, warnings and common errors to avoid for a location and month."""
    entry = resolve_no_nos(region.strip() or None, city.strip() or None, month.strip() or None)
    return {
        "region": _region_label(region.strip()) if region.strip() else None,
        "city": city.strip() or None,
        "month": normalize_month(month),
        **asdict(entry),
    }


@router.get("/climate")
async def climate(region: str = Query(""), city: str = Query("")) -> dict:
    """Climate zone for a location and the plants unsuited to it.

    With no location at all the zone falls back to warm.
    """
    zone = resolve_climate(region.strip(), city.strip())
    return {
        "region": _region_label(region.strip()) if region.strip() else None,
        "city": city.strip() or None,
        "climate_zone": zone.value,
        "warnings": [asdict(w) for w in climate_warnings(zone)],
        "invasive_plants": [asdict(p) for p in invasive_plants(region)],
    }


@router.get("/companions")
async def companions(search: str = Query("")) -> dict:
    return {"plants": search_companions(search)}


@router.get("/companions/{plant}")
async def companion_detail(plant: str) -> dict:
    entry = get_companions(plant)
    if entry is None:
        raise NotFoundError(f"No companion planting data for {plant}")
    return entry.to_dict()


@router.get("/timelines")
async def timelines() -> dict:
    return {"plants": sorted(PLANT_TIMELINES)}


@router.get("/timelines/{plant}")
async def timeline_detail(plant: str) -> dict:
    timeline = get_timeline(plant)
    if timeline is None:
        raise NotFoundError(f"No growth timeline for {plant}")
    return asdict(timeline)


@router.get("/timelines/{plant}/schedule")
async def timeline_schedule(
    plant: str,
    planted: date,
    start: str = Query("seed"),
    climate: str | None = Query(None),
    region: str = Query(""),
    city: str = Query(""),
) -> dict:
    """Care schedule and estimated harvest for a planting.

    The climate comes from ``climate`` when given, otherwise from the
    location, otherwise temperate. Plants without a timeline of their own
    get the default one.
    """
    if climate is None:
        if region.strip() or city.strip():
            climate = resolve_climate(region.strip(), city.strip()).value
        else:
            climate = TEMPERATE
    harvest, tasks = plant_schedule(plant, planted, start=start, climate=climate)
    return {
        "plant": plant,
        "planted": planted,
        "start": start,
        "climate": climate,
        "estimated_harvest": harvest,
        "schedule": [asdict(task) for task in tasks],
    }
