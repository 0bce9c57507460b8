"""Companion planting ("bed buddies") reference table."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompanionPlantEntry:
    plant_name: str
    good_companions: frozenset[str]
    bad_companions: frozenset[str]
    reasons: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "plant_name": self.plant_name,
            "good_companions": sorted(self.good_companions),
            "bad_companions": sorted(self.bad_companions),
            "reasons": list(self.reasons),
        }


def _entry(name: str, good: list[str], bad: list[str], reasons: list[str]) -> CompanionPlantEntry:
    return CompanionPlantEntry(name, frozenset(good), frozenset(bad), tuple(reasons))


COMPANION_DATA = {
    entry.plant_name: entry
    for entry in [
        _entry(
            "Tomatoes",
            ["Basil", "Carrots", "Onions", "Parsley", "Marigolds"],
            ["Potatoes", "Brassicas", "Fennel"],
            [
                "Basil improves flavor and repels pests",
                "Carrots break up soil and improve tomato growth",
                "Marigolds deter nematodes",
                "Keep away from potatoes as they can spread blight between them",
                "Brassicas and tomatoes compete for same nutrients",
            ],
        ),
        _entry(
            "Carrots",
            ["Tomatoes", "Onions", "Leeks", "Rosemary", "Sage"],
            ["Dill", "Parsnips", "Queen Anne's Lace"],
            [
                "Tomatoes provide shade and secrete chemicals that help carrots",
                "Onions and leeks repel carrot fly",
                "Avoid planting with dill as it can cross-pollinate",
                "Keep away from related plants that may share pests",
            ],
        ),
        _entry(
            "Beans",
            ["Corn", "Potatoes", "Cucumbers", "Strawberries"],
            ["Onions", "Garlic", "Leeks"],
            [
                "Corn provides support for climbing beans",
                "Beans fix nitrogen in soil which benefits heavy feeders",
                "Alliums (onions, garlic) can stunt bean growth",
            ],
        ),
        _entry(
            "Cucumbers",
            ["Beans", "Corn", "Peas", "Radishes", "Sunflowers"],
            ["Potatoes", "Aromatic Herbs"],
            [
                "Beans and peas fix nitrogen that cucumbers need",
                "Radishes deter cucumber beetles",
                "Sunflowers provide support and shade",
                "Potatoes can inhibit growth",
            ],
        ),
        _entry(
            "Onions",
            ["Carrots", "Beets", "Lettuce", "Cabbage", "Tomatoes"],
            ["Beans", "Peas", "Sage"],
            [
                "Helps deter pests from many vegetables",
                "Improves growth of nearby plants",
                "Beans and peas are stunted by alliums",
            ],
        ),
        _entry(
            "Peas",
            ["Carrots", "Turnips", "Radishes", "Cucumber", "Corn"],
            ["Onions", "Garlic", "Potatoes"],
            [
                "Fixes nitrogen in soil for heavy feeders",
                "Corn provides support for climbing",
                "Alliums (onions, garlic) stunt growth",
            ],
        ),
        _entry(
            "Potatoes",
            ["Beans", "Corn", "Cabbage", "Horseradish"],
            ["Tomatoes", "Cucumbers", "Sunflowers"],
            [
                "Horseradish improves disease resistance",
                "Beans help fix nitrogen",
                "Tomatoes and potatoes are in same family and share diseases",
            ],
        ),
        _entry(
            "Lettuce",
            ["Carrots", "Radishes", "Strawberries", "Cucumbers"],
            ["Celery", "Parsley", "Broccoli"],
            [
                "Tall plants provide shade in summer",
                "Radishes mark rows and break soil",
                "Some brassicas can stunt growth",
            ],
        ),
    ]
}


def get_companions(plant: str) -> CompanionPlantEntry | None:
    wanted = plant.strip().lower()
    for name, entry in COMPANION_DATA.items():
        if name.lower() == wanted:
            return entry
    return None


def search_companions(term: str = "") -> list[str]:
    """Plant names containing ``term`` (case-insensitive), sorted."""
    needle = term.strip().lower()
    return sorted(name for name in COMPANION_DATA if needle in name.lower())
