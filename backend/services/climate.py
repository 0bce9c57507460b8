"""Coarse climate classification and the plant warnings that depend on it.

The zone decides which "don't plant this here" warnings a gardener sees.
Lookup order: city override, then region default, then warm.
"""

from dataclasses import dataclass, field
from enum import Enum

from services.regions import Region, normalize_region


class ClimateZone(str, Enum):
    WARM = "warm"
    COOL = "cool"


REGION_CLIMATE_ZONES = {
    Region.NSW: ClimateZone.WARM,
    Region.QLD: ClimateZone.WARM,
    Region.NT: ClimateZone.WARM,
    Region.WA: ClimateZone.WARM,
    Region.SA: ClimateZone.WARM,
    Region.VIC: ClimateZone.COOL,
    Region.TAS: ClimateZone.COOL,
    Region.ACT: ClimateZone.COOL,
}

# Overrides the region default regardless of which region is passed.
CITY_CLIMATE_ZONES = {
    "Hobart": ClimateZone.COOL,
    "Melbourne": ClimateZone.COOL,
    "Brisbane": ClimateZone.WARM,
    "Darwin": ClimateZone.WARM,
    "Perth": ClimateZone.WARM,
    "Adelaide": ClimateZone.WARM,
    "Sydney": ClimateZone.WARM,
    "Canberra": ClimateZone.COOL,
}

DEFAULT_CLIMATE_ZONE = ClimateZone.WARM


def resolve_climate(region: str | None, city: str | None) -> ClimateZone:
    if city and city in CITY_CLIMATE_ZONES:
        return CITY_CLIMATE_ZONES[city]

    # Region codes match exactly here; "vic" or "Victoria" fall through to warm.
    try:
        return REGION_CLIMATE_ZONES[Region(region)]
    except (KeyError, ValueError):
        return DEFAULT_CLIMATE_ZONE


@dataclass(frozen=True)
class PlantWarning:
    name: str
    reason: str
    alternatives: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InvasivePlant:
    name: str
    scientific_name: str
    description: str
    impact: str
    alternatives: tuple[str, ...] = field(default_factory=tuple)


CLIMATE_WARNINGS = {
    ClimateZone.WARM: [
        PlantWarning(
            "Brussels Sprouts",
            "Requires cool temperatures to develop properly. In warm climates, they become "
            "bitter and fail to form tight heads.",
            ("Cabbage", "Kale", "Collard Greens"),
        ),
        PlantWarning(
            "Peas",
            "Struggle in hot weather and high humidity, leading to poor pod development and "
            "increased disease susceptibility.",
            ("Bush Beans", "Winged Beans", "Yard Long Beans"),
        ),
        PlantWarning(
            "Cauliflower",
            "Needs cool weather to form heads properly. Heat causes loose, discolored heads.",
            ("Broccoli", "Chinese Cabbage", "Kohlrabi"),
        ),
        PlantWarning(
            "Spinach",
            "Bolts quickly in warm weather, becoming bitter and unusable.",
            ("Malabar Spinach", "Brazilian Spinach", "Sweet Potato Leaves"),
        ),
    ],
    ClimateZone.COOL: [
        PlantWarning(
            "Sweet Potato",
            "Requires long, hot growing season. Cool climates have insufficient heat for "
            "proper tuber development.",
            ("Regular Potatoes", "Parsnips", "Carrots"),
        ),
        PlantWarning(
            "Okra",
            "Needs consistent warm temperatures to produce pods. Cool weather stunts growth.",
            ("Green Beans", "Snap Peas", "Asparagus"),
        ),
        PlantWarning(
            "Watermelon",
            "Requires long, hot season to develop sweetness. Cool climates produce bland fruit.",
            ("Cantaloupe", "Honeydew", "Sugar Baby Watermelon"),
        ),
        PlantWarning(
            "Eggplant",
            "Needs warm nights and hot days. Cool weather results in poor fruit set.",
            ("Zucchini", "Peppers", "Tomatoes"),
        ),
    ],
}

INVASIVE_PLANTS = {
    Region.NSW: [
        InvasivePlant(
            "English Ivy",
            "Hedera helix",
            "Common ornamental vine that quickly becomes invasive",
            "Smothers native vegetation and can damage building structures",
            ("Native Violet", "Snake Vine", "Native Jasmine"),
        ),
        InvasivePlant(
            "Morning Glory",
            "Ipomoea indica",
            "Fast-growing climbing vine with purple-blue flowers",
            "Rapidly covers and kills native plants, difficult to control",
            ("Native Wisteria", "Purple Coral Pea", "Native Sarsaparilla"),
        ),
        InvasivePlant(
            "Lantana",
            "Lantana camara",
            "Heavily branched shrub with colorful flowers",
            "Toxic to livestock, forms dense thickets that exclude native species",
            ("Native Verbena", "Cut-leaf Daisy", "Native Lantana"),
        ),
        InvasivePlant(
            "Privet",
            "Ligustrum species",
            "Dense evergreen shrub or small tree",
            "Invades bushland, outcompetes native species, berries spread by birds",
            ("Lilly Pilly", "Native Laurel", "Sweet Pittosporum"),
        ),
    ],
}


def climate_warnings(zone: ClimateZone) -> list[PlantWarning]:
    return list(CLIMATE_WARNINGS.get(zone, []))


def invasive_plants(region: str | None) -> list[InvasivePlant]:
    code = normalize_region(region)
    if code is None:
        return []
    return list(INVASIVE_PLANTS.get(code, []))
