"""Growth timelines and care schedules for plants in a garden.

A timeline gives days from sowing to seedling and from seedling to harvest,
plus dated key activities. Climate adjustments stretch or shrink every
interval (warm, cool or temperate). Plants without a timeline of their own
are scheduled from DEFAULT_PLANT_TIMELINE.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta

logger = logging.getLogger(__name__)

TEMPERATE = "temperate"
CLIMATES = ("warm", "cool", TEMPERATE)
START_TYPES = ("seed", "seedling")

# Activities mentioning any of these are never scheduled.
_SKIPPED_PHRASES = (
    "sow seed", "plant seed", "seed packet", "plant according",
    "water", "moisture", "irrigation",
)
_WATERING_PHRASES = ("water", "moisture", "irrigation")


@dataclass(frozen=True)
class ClimateAdjustment:
    growth_multiplier: float
    watering_frequency: int  # days between waterings
    extra_care: tuple[str, ...] = ()


@dataclass(frozen=True)
class Activity:
    timing: int  # days after planting
    activity: str
    category: str


@dataclass(frozen=True)
class PlantTimeline:
    sow_to_seedling: int
    seedling_to_harvest: int
    harvest_window: int
    climate_adjustments: dict[str, ClimateAdjustment]
    key_activities: tuple[Activity, ...]


@dataclass(frozen=True)
class ScheduledTask:
    week: int
    activity: str
    due: date
    category: str
    details: str | None = None


def _adjustments(warm: tuple, cool: tuple, temperate: tuple) -> dict[str, ClimateAdjustment]:
    return {
        "warm": ClimateAdjustment(warm[0], warm[1], tuple(warm[2])),
        "cool": ClimateAdjustment(cool[0], cool[1], tuple(cool[2])),
        TEMPERATE: ClimateAdjustment(temperate[0], temperate[1], tuple(temperate[2])),
    }


def _activities(*rows: tuple[int, str, str]) -> tuple[Activity, ...]:
    return tuple(Activity(timing, activity, category) for timing, activity, category in rows)


PLANT_TIMELINES = {
    "Tomatoes": PlantTimeline(
        sow_to_seedling=21,
        seedling_to_harvest=60,
        harvest_window=45,
        climate_adjustments=_adjustments(
            (0.9, 2, ["Provide afternoon shade", "Monitor for blossom end rot"]),
            (1.2, 4, ["Use frost protection", "Monitor night temperatures"]),
            (1, 3, []),
        ),
        key_activities=_activities(
            (7, "Monitor for seedling emergence", "planting"),
            (21, "First true leaves - start fertilizing", "fertilizing"),
            (28, "Begin pest monitoring", "pest"),
            (35, "Install support/stakes", "planting"),
            (45, "Start pruning side shoots", "pruning"),
            (60, "Begin checking for ripe fruits", "harvest"),
            (75, "Peak harvest period begins", "harvest"),
        ),
    ),
    "Beans": PlantTimeline(
        sow_to_seedling=7,
        seedling_to_harvest=45,
        harvest_window=30,
        climate_adjustments=_adjustments(
            (0.95, 2, ["Mulch to retain moisture"]),
            (1.1, 4, ["Protect from late frosts"]),
            (1, 3, []),
        ),
        key_activities=_activities(
            (7, "Check for germination", "planting"),
            (14, "Install climbing support", "planting"),
            (21, "Start fertilizing", "fertilizing"),
            (30, "Monitor for bean beetles", "pest"),
            (45, "Begin harvesting", "harvest"),
            (60, "Peak production period", "harvest"),
        ),
    ),
    "Lettuce": PlantTimeline(
        sow_to_seedling=7,
        seedling_to_harvest=30,
        harvest_window=14,
        climate_adjustments=_adjustments(
            (1.1, 1, ["Provide shade cloth", "Prevent bolting"]),
            (0.9, 3, ["Protect from heavy frost"]),
            (1, 2, []),
        ),
        key_activities=_activities(
            (7, "Thin seedlings", "planting"),
            (14, "Begin liquid feeding", "fertilizing"),
            (21, "Check for slugs and snails", "pest"),
            (30, "Start harvesting outer leaves", "harvest"),
        ),
    ),
    "Carrots": PlantTimeline(
        sow_to_seedling=14,
        seedling_to_harvest=70,
        harvest_window=21,
        climate_adjustments=_adjustments(
            (1, 2, ["Maintain consistent moisture", "Mulch soil"]),
            (1.2, 4, ["Protect tops from frost"]),
            (1, 3, []),
        ),
        key_activities=_activities(
            (14, "Thin seedlings", "planting"),
            (28, "Monitor for carrot fly", "pest"),
            (42, "Begin fertilizing", "fertilizing"),
            (70, "Check root size", "harvest"),
            (84, "Complete harvest", "harvest"),
        ),
    ),
    "Peppers": PlantTimeline(
        sow_to_seedling=28,
        seedling_to_harvest=75,
        harvest_window=60,
        climate_adjustments=_adjustments(
            (0.9, 2, ["Monitor for sunscald", "Maintain humidity"]),
            (1.3, 4, ["Use frost protection", "Provide extra warmth"]),
            (1, 3, []),
        ),
        key_activities=_activities(
            (21, "First true leaves appear", "planting"),
            (28, "Begin fertilizing", "fertilizing"),
            (42, "Transplant to final position", "planting"),
            (56, "Install support stakes", "planting"),
            (70, "Monitor for aphids", "pest"),
            (75, "First harvest", "harvest"),
            (90, "Peak production period", "harvest"),
        ),
    ),
    "Cucumbers": PlantTimeline(
        sow_to_seedling=14,
        seedling_to_harvest=55,
        harvest_window=45,
        climate_adjustments=_adjustments(
            (0.9, 1, ["Monitor for powdery mildew", "Maintain high humidity"]),
            (1.2, 3, ["Provide warmth", "Protect from cold winds"]),
            (1, 2, []),
        ),
        key_activities=_activities(
            (14, "Transplant seedlings", "planting"),
            (21, "Install trellis", "planting"),
            (28, "Start fertilizing", "fertilizing"),
            (35, "Train vines", "pruning"),
            (42, "Monitor for cucumber beetles", "pest"),
            (55, "Begin harvesting", "harvest"),
            (70, "Peak harvest period", "harvest"),
        ),
    ),
}

DEFAULT_PLANT_TIMELINE = PlantTimeline(
    sow_to_seedling=14,
    seedling_to_harvest=60,
    harvest_window=30,
    climate_adjustments=_adjustments(
        (1, 2, ["Monitor moisture levels"]),
        (1.2, 4, ["Protect from frost"]),
        (1, 3, []),
    ),
    key_activities=_activities(
        (14, "Check seedling spacing and thin if needed", "planting"),
        (21, "Apply balanced organic fertilizer", "fertilizing"),
        (30, "Inspect leaves for pest damage", "pest"),
        (45, "Remove damaged or diseased foliage", "pruning"),
        (60, "Begin checking for harvest readiness", "harvest"),
    ),
)


def get_timeline(plant: str) -> PlantTimeline | None:
    """Case-insensitive timeline lookup; None for plants without one."""
    wanted = plant.strip().lower()
    for name, timeline in PLANT_TIMELINES.items():
        if name.lower() == wanted:
            return timeline
    return None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _mentions(text: str, phrases: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(phrase in lowered for phrase in phrases)


def plant_schedule(
    plant: str,
    planted_on: date,
    start: str = "seed",
    climate: str = TEMPERATE,
) -> tuple[date, list[ScheduledTask]]:
    """Estimated harvest date and dated care tasks for a new planting.

    ``start`` is "seed" or "seedling"; seedlings skip the sowing stage and any
    activity due before it. ``climate`` is "warm", "cool" or "temperate".
    """
    if start not in START_TYPES:
        raise ValueError(f"start must be one of {', '.join(START_TYPES)}")
    if climate not in CLIMATES:
        raise ValueError(f"climate must be one of {', '.join(CLIMATES)}")

    timeline = get_timeline(plant)
    if timeline is None:
        logger.info("No timeline for %r; using the default", plant)
        timeline = DEFAULT_PLANT_TIMELINE
    adjustment = timeline.climate_adjustments[climate]

    growing_days = timeline.seedling_to_harvest
    if start == "seed":
        growing_days += timeline.sow_to_seedling
    days_to_harvest = _round_half_up(growing_days * adjustment.growth_multiplier)

    tasks = []
    for item in timeline.key_activities:
        if start == "seedling" and item.timing < timeline.sow_to_seedling:
            continue
        if _mentions(item.activity, _SKIPPED_PHRASES):
            continue
        offset = _round_half_up(item.timing * adjustment.growth_multiplier)
        tasks.append(ScheduledTask(
            week=math.ceil(offset / 7),
            activity=item.activity,
            due=planted_on + timedelta(days=offset),
            category=item.category,
        ))

    care = [c for c in adjustment.extra_care if not _mentions(c, _WATERING_PHRASES)]
    for i, activity in enumerate(care, start=1):
        offset = days_to_harvest * 0.3 * i
        tasks.append(ScheduledTask(
            week=math.ceil(offset / 7),
            activity=activity,
            due=planted_on + timedelta(days=int(offset)),
            category="climate",
            details=f"Climate-specific care for {climate} conditions",
        ))

    return planted_on + timedelta(days=days_to_harvest), tasks
