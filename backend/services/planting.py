"""Planting guides, seasons and monthly task calendars keyed by region and month.

All lookups read static tables only. Missing data is an expected condition
(not every region has every month populated yet), so resolvers log it and
return ``None`` or ``Season.UNKNOWN`` instead of raising.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from services.regions import MONTHS, Region, normalize_month, normalize_region

logger = logging.getLogger(__name__)


class Season(str, Enum):
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"
    SPRING = "Spring"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class RegionMonthGuide:
    overview: str
    sow: tuple[str, ...]
    plant: tuple[str, ...]


_SOUTHERN_SEASONS = {
    "December-February": Season.SUMMER,
    "March-May": Season.AUTUMN,
    "June-August": Season.WINTER,
    "September-November": Season.SPRING,
}

SEASON_TABLES: dict[Region, dict[str, Season]] = {region: dict(_SOUTHERN_SEASONS) for region in Region}


def _guide(overview: str, sow: list[str], plant: list[str]) -> RegionMonthGuide:
    return RegionMonthGuide(overview=overview, sow=tuple(sow), plant=tuple(plant))


MONTH_SUMMARIES: dict[Region, dict[str, str]] = {
    Region.TAS: {
        "January": "Cool climate gardening. Focus on leafy greens and root vegetables. Water early morning. "
                   "Protect from strong winds.",
        "February": "Late summer harvesting. Plant autumn crops. Monitor water needs. Start preparing winter beds.",
        "March": "Autumn planting season begins. Soil still warm enough for good growth. Plant winter vegetables "
                 "and green manure crops.",
        "April": "Main autumn planting month. Soil preparation for winter crops. Last chance for warm season "
                 "vegetables.",
        "May": "Early winter preparations. Focus on frost-hardy vegetables. Add protection for tender plants.",
        "June": "Winter dormancy begins. Maintain winter crops. Focus on soil improvement and planning.",
        "July": "Peak winter season. Limited outdoor growing. Good time for planning and maintenance.",
        "August": "Late winter preparation for spring. Start seedlings indoors. Clean and prepare beds.",
        "September": "Early spring plantings begin. Soil warming up. Watch for late frosts.",
        "October": "Main spring planting month. Soil temperature rising. Good growth conditions.",
        "November": "Late spring plantings. Increasing temperatures. Regular watering needed.",
        "December": "Early summer season. Peak growing conditions. Regular maintenance important.",
    },
    Region.VIC: {
        "January": "Hot summer conditions. Focus on heat-tolerant vegetables. Morning watering essential. "
                   "Watch for sun damage.",
        "February": "Late summer heat continues. Monitor water needs. Harvest summer crops. Plan autumn garden.",
    },
    Region.NSW: {
        "January": "Warm summer conditions. Focus on water management and heat protection. Early morning "
                   "gardening recommended.",
        "February": "Peak summer growing season. Maintain regular watering. Start planning autumn crops.",
    },
    Region.QLD: {
        "January": "Tropical summer conditions. Heavy rainfall period. Focus on drainage and disease prevention.",
        "February": "Wet season continues. Monitor plant health. Good time for tropical vegetables.",
    },
    Region.WA: {
        "January": "Mediterranean climate peak. Early morning watering essential. Focus on heat-tolerant varieties.",
        "February": "Hot and dry conditions continue. Deep watering important. Plan for autumn.",
    },
    Region.SA: {
        "January": "Hot, dry conditions dominate. Water management crucial. Focus on heat-hardy varieties.",
        "February": "Late summer heat persists. Monitor water needs. Begin autumn preparations.",
    },
    Region.NT: {
        "January": "Wet season peak. Focus on tropical vegetables. Monitor drainage and fungal issues.",
        "February": "Heavy rains continue. Plant tropical varieties. Watch for waterlogging.",
    },
    Region.ACT: {
        "January": "Warm summer conditions. Focus on water conservation. Morning watering recommended.",
        "February": "Late summer gardening. Monitor moisture levels. Begin autumn planning.",
    },
}

DEFAULT_MONTH_SUMMARIES = {
    "January": "General summer gardening. Regular watering needed. Monitor for pests.",
    "February": "Late summer activities. Harvest mature crops. Prepare for autumn.",
    "March": "Transition to autumn. Good planting conditions.",
    "April": "Mid-autumn activities. Prepare for cooler weather.",
    "May": "Late autumn tasks. Winter preparation important.",
    "June": "Early winter activities. Focus on hardy vegetables.",
    "July": "Mid-winter gardening. Maintenance and planning.",
    "August": "Late winter tasks. Prepare for spring.",
    "September": "Early spring activities. Soil preparation.",
    "October": "Mid-spring planting season. Active growth.",
    "November": "Late spring tasks. Summer preparation.",
    "December": "Early summer activities. Regular maintenance.",
}

MONTH_TASKS = {
    "January": ["Water early morning or evening", "Monitor for pests", "Maintain mulch coverage"],
    "February": ["Harvest summer crops", "Plan autumn plantings", "Maintain watering schedule"],
    "March": ["Prepare for autumn planting", "Clean up garden beds", "Add compost to soil"],
    "April": ["Focus on winter crops", "Improve soil", "Prepare for frost"],
    "May": ["Frost protection", "Winter maintenance", "Soil improvement"],
    "June": ["Winter care", "Frost management", "Plan spring garden"],
    "July": ["Protect from frost", "Winter pruning", "Soil preparation"],
    "August": ["Spring preparation", "Start seeds indoors", "Clean up winter debris"],
    "September": ["Spring planting begins", "Soil preparation", "Start feeding schedule"],
    "October": ["Main planting month", "Establish supports", "Monitor pests"],
    "November": ["Establish watering", "Apply summer mulch", "Plant heat-lovers"],
    "December": ["Heat protection", "Water management", "Regular harvesting"],
}

_TAS = MONTH_SUMMARIES[Region.TAS]

REGION_MONTH_GUIDES: dict[Region, dict[str, RegionMonthGuide]] = {
    Region.TAS: {
        "January": _guide(
            _TAS["January"],
            ["Beetroot", "Broccoli", "Brussels sprouts", "Winter Cabbage", "Kale", "Carrot", "Kohlrabi"],
            ["Broccoli", "Brussels sprouts", "Cabbage", "Capsicums", "Cauliflower", "Celery", "Leeks"],
        ),
        "February": _guide(
            _TAS["February"],
            ["Broccoli", "Carrot", "Cabbage", "Cauliflower", "Brussels sprouts", "Leek", "Turnip"],
            ["Broccoli", "Brussels sprouts", "Winter Cabbage", "Cauliflower", "Celery", "Leeks", "Lettuce"],
        ),
        "March": _guide(
            _TAS["March"],
            ["Broad Beans", "English Spinach", "Onions", "Peas", "Turnip", "Lettuce"],
            ["Garlic", "Shallots", "Winter Lettuce"],
        ),
        "April": _guide(
            _TAS["April"],
            ["Broad Beans", "Peas", "English Spinach", "Spring Onions"],
            ["Garlic", "Shallots"],
        ),
        "May": _guide(_TAS["May"], ["Broad Beans", "Peas"], ["Garlic", "Jerusalem Artichokes", "Shallots"]),
        "June": _guide(_TAS["June"], ["Broad Beans", "Peas"], ["Garlic", "Shallots"]),
        "July": _guide(
            _TAS["July"],
            ["Peas", "Broad Beans", "Spring Onions"],
            ["Garlic", "Shallots", "Asparagus Crowns"],
        ),
        "August": _guide(
            _TAS["August"],
            ["Peas", "Spring Onions", "Early Potatoes"],
            ["Asparagus", "Rhubarb", "Strawberries"],
        ),
        "September": _guide(
            _TAS["September"],
            ["Tomatoes", "Lettuce", "Carrots", "Beetroot"],
            ["Potatoes", "Asparagus", "Early Tomatoes"],
        ),
        "October": _guide(
            _TAS["October"],
            ["Beans", "Corn", "Cucumbers", "Pumpkins"],
            ["Tomatoes", "Capsicums", "Eggplants"],
        ),
        "November": _guide(
            _TAS["November"],
            ["Beans", "Sweet Corn", "Zucchini", "Pumpkins"],
            ["Tomatoes", "Basil", "Summer Herbs"],
        ),
        "December": _guide(
            _TAS["December"],
            ["Beans", "Sweet Corn", "Lettuce", "Carrots"],
            ["Tomatoes", "Capsicums", "Basil"],
        ),
    },
    Region.SA: {
        "January": _guide(
            "South Australian summer conditions require deep watering and mulching. Watch for pests in the heat.",
            ["Beans", "Carrots", "Beetroot", "Sweet Corn"],
            ["Tomatoes", "Capsicum", "Eggplant", "Chillies"],
        ),
        "February": _guide(
            MONTH_SUMMARIES[Region.SA]["February"],
            ["Asian Greens", "Carrots", "Beetroot", "Lettuce"],
            ["Brassicas"],
        ),
    },
    Region.NSW: {
        "January": _guide(
            MONTH_SUMMARIES[Region.NSW]["January"],
            ["Beans", "Sweet Corn", "Carrots", "Beetroot"],
            ["Leeks", "Late Tomatoes"],
        ),
        "February": _guide(
            MONTH_SUMMARIES[Region.NSW]["February"],
            ["Asian Greens", "Spring Onions", "Lettuce", "Carrots"],
            ["Brassicas", "Leeks"],
        ),
    },
    Region.VIC: {
        "January": _guide(
            MONTH_SUMMARIES[Region.VIC]["January"],
            ["Beans", "Carrots", "Beetroot", "Lettuce"],
            ["Leeks", "Celery", "Late Tomatoes"],
        ),
        "February": _guide(
            MONTH_SUMMARIES[Region.VIC]["February"],
            ["Asian Greens", "Spring Onions", "Carrots", "Turnip"],
            ["Brassicas", "Leeks"],
        ),
    },
    Region.ACT: {
        "January": _guide(
            MONTH_SUMMARIES[Region.ACT]["January"],
            ["Beans", "Carrots", "Beetroot"],
            ["Leeks", "Celery"],
        ),
        "February": _guide(
            MONTH_SUMMARIES[Region.ACT]["February"],
            ["Asian Greens", "Carrots", "Lettuce"],
            ["Brassicas"],
        ),
    },
    Region.WA: {
        "January": _guide(
            MONTH_SUMMARIES[Region.WA]["January"],
            ["Beans", "Spring Onions", "Lettuce"],
            ["Late Tomatoes"],
        ),
        "February": _guide(
            MONTH_SUMMARIES[Region.WA]["February"],
            ["Asian Greens", "Carrots", "Beetroot", "Lettuce"],
            ["Brassicas"],
        ),
    },
    Region.QLD: {
        "January": _guide(
            MONTH_SUMMARIES[Region.QLD]["January"],
            ["Snake Beans", "Okra", "Asian Greens"],
            ["Ginger", "Turmeric"],
        ),
        "February": _guide(
            MONTH_SUMMARIES[Region.QLD]["February"],
            ["Asian Greens", "Spring Onions", "Lettuce"],
            ["Sweet Potatoes", "Ginger"],
        ),
    },
    Region.NT: {
        "January": _guide(
            MONTH_SUMMARIES[Region.NT]["January"],
            ["Snake Beans", "Okra", "Asian Greens"],
            ["Taro", "Ginger", "Turmeric"],
        ),
        "February": _guide(
            MONTH_SUMMARIES[Region.NT]["February"],
            ["Snake Beans", "Asian Greens", "Spring Onions"],
            ["Sweet Potatoes", "Cassava"],
        ),
    },
}


@dataclass(frozen=True)
class MonthWeather:
    avg_temp: str
    rainfall: str
    humidity: str
    frost_risk: str
    daylight: str
    season: str


@dataclass(frozen=True)
class WeeklyGuide:
    week: int
    sow: tuple[str, ...]
    plant: tuple[str, ...]
    tasks: tuple[str, ...]


@dataclass(frozen=True)
class MonthDetail:
    name: str
    weekly_guide: tuple[WeeklyGuide, ...]
    key_tasks: tuple[str, ...]
    weather: MonthWeather


# Typical conditions for the calendar's home climate (southern Tasmania).
MONTH_WEATHER = {
    "January": MonthWeather("23°C", "45mm", "65%", "None", "14.5 hours", "Summer"),
    "February": MonthWeather("22°C", "40mm", "60%", "None", "13.5 hours", "Summer"),
    "March": MonthWeather("20°C", "50mm", "65%", "Low", "12 hours", "Autumn"),
    "April": MonthWeather("18°C", "55mm", "70%", "Medium", "10 hours", "Autumn"),
    "May": MonthWeather("15°C", "60mm", "75%", "High", "8 hours", "Winter"),
    "June": MonthWeather("12°C", "65mm", "80%", "High", "6 hours", "Winter"),
    "July": MonthWeather("11°C", "70mm", "80%", "Very High", "7 hours", "Winter"),
    "August": MonthWeather("13°C", "65mm", "75%", "High", "9 hours", "Winter"),
    "September": MonthWeather("15°C", "60mm", "70%", "Medium", "11 hours", "Spring"),
    "October": MonthWeather("17°C", "55mm", "65%", "Low", "13 hours", "Spring"),
    "November": MonthWeather("19°C", "50mm", "60%", "Very Low", "14 hours", "Spring"),
    "December": MonthWeather("21°C", "45mm", "60%", "None", "15 hours", "Summer"),
}

WEEKLY_TASKS = {
    "January": ["Monitor water needs daily", "Apply mulch to retain moisture", "Check for heat stress"],
    "February": ["Continue summer harvesting", "Prepare beds for autumn", "Monitor water needs"],
    "March": ["Begin autumn preparations", "Clean up summer crops", "Check soil fertility"],
    "April": ["Plant winter crops", "Add organic matter", "Check drainage"],
    "May": ["Protect from frost", "Maintain winter crops", "Check soil moisture"],
    "June": ["Winter maintenance", "Check frost protection", "Monitor soil moisture"],
    "July": ["Check frost protection", "Plan spring garden", "Maintain winter crops"],
    "August": ["Prepare for spring", "Last frost protection", "Start seedlings indoors"],
    "September": ["Begin spring planting", "Prepare garden beds", "Start fertilizing"],
    "October": ["Main spring planting", "Regular feeding", "Pest monitoring"],
    "November": ["Regular watering", "Mulch gardens", "Support climbing plants"],
    "December": ["Summer maintenance", "Regular harvesting", "Water management"],
}

MONTH_DETAILS = {
    month: MonthDetail(
        name=month,
        weekly_guide=(WeeklyGuide(week=1, sow=guide.sow, plant=guide.plant, tasks=tuple(WEEKLY_TASKS[month])),),
        key_tasks=tuple(MONTH_TASKS[month]),
        weather=MONTH_WEATHER[month],
    )
    for month, guide in REGION_MONTH_GUIDES[Region.TAS].items()
}


def resolve_guide(region: str, month: str) -> RegionMonthGuide | None:
    """Return the planting guide for a region/month pair, or None if not populated."""
    code = normalize_region(region)
    month_name = normalize_month(month)
    guides = REGION_MONTH_GUIDES.get(code) if code is not None else None
    guide = guides.get(month_name) if guides and month_name else None
    if guide is None:
        logger.warning("No planting data available for %s in %s", region, month)
    return guide


def months_in_range(label: str) -> list[str]:
    """Expand a "Start-End" month range label, wrapping past December.

    Returns an empty list when either end is not a month name.
    """
    start, sep, end = label.partition("-")
    if not sep or start not in MONTHS or end not in MONTHS:
        return []
    start_idx = MONTHS.index(start)
    end_idx = MONTHS.index(end)
    if start_idx <= end_idx:
        return MONTHS[start_idx:end_idx + 1]
    return MONTHS[start_idx:] + MONTHS[:end_idx + 1]


def resolve_season(region: str, month: str) -> Season:
    code = normalize_region(region)
    month_name = normalize_month(month)
    if code is None or month_name is None:
        return Season.UNKNOWN

    for label, season in SEASON_TABLES.get(code, {}).items():
        if month_name in months_in_range(label):
            return season

    logger.warning("Season table for %s has no range covering %s", code.value, month_name)
    return Season.UNKNOWN


def month_summary(region: str | None, month: str) -> str | None:
    """Region-specific activity summary, falling back to the general one."""
    month_name = normalize_month(month)
    if month_name is None:
        return None
    code = normalize_region(region)
    summaries = MONTH_SUMMARIES.get(code, {}) if code is not None else {}
    return summaries.get(month_name) or DEFAULT_MONTH_SUMMARIES.get(month_name)


def month_tasks(month: str) -> list[str]:
    month_name = normalize_month(month)
    return list(MONTH_TASKS.get(month_name, [])) if month_name else []


def month_detail(month: str) -> MonthDetail | None:
    """Weekly sow/plant guide, key tasks and typical weather for a month."""
    month_name = normalize_month(month)
    return MONTH_DETAILS.get(month_name) if month_name else None
