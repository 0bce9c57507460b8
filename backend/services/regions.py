"""Australian states/territories, their major cities, and month names."""

from enum import Enum


class Region(str, Enum):
    NSW = "NSW"
    VIC = "VIC"
    QLD = "QLD"
    WA = "WA"
    SA = "SA"
    TAS = "TAS"
    NT = "NT"
    ACT = "ACT"


REGION_NAMES = {
    Region.NSW: "New South Wales",
    Region.VIC: "Victoria",
    Region.QLD: "Queensland",
    Region.WA: "Western Australia",
    Region.SA: "South Australia",
    Region.TAS: "Tasmania",
    Region.NT: "Northern Territory",
    Region.ACT: "Australian Capital Territory",
}

CITIES = {
    Region.NSW: ["Sydney", "Newcastle", "Wollongong", "Central Coast"],
    Region.VIC: ["Melbourne", "Geelong", "Ballarat", "Bendigo"],
    Region.QLD: ["Brisbane", "Gold Coast", "Sunshine Coast", "Townsville"],
    Region.WA: ["Perth", "Fremantle", "Mandurah", "Bunbury"],
    Region.SA: ["Adelaide", "Mount Gambier", "Whyalla", "Port Augusta"],
    Region.TAS: ["Hobart", "Launceston", "Devonport", "Burnie"],
    Region.NT: ["Darwin", "Alice Springs", "Katherine", "Palmerston"],
    Region.ACT: ["Canberra", "Belconnen", "Tuggeranong", "Gungahlin"],
}

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def normalize_region(value: str | None) -> Region | None:
    """Resolve a state code ("vic") or full name ("Victoria") to a Region."""
    if not value:
        return None
    upper = value.strip().upper()
    if upper in Region.__members__:
        return Region[upper]
    for region, name in REGION_NAMES.items():
        if name.upper() == upper:
            return region
    return None


def normalize_month(value: str | None) -> str | None:
    """Return the canonical month name ("january" -> "January") or None."""
    if not value:
        return None
    month = value.strip().capitalize()
    return month if month in MONTHS else None


def is_valid_city(region: str, city: str) -> bool:
    code = normalize_region(region)
    if code is None or not city:
        return False
    return city in CITIES[code]
