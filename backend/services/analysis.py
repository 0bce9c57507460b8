"""Mock plant-issue predictions for uploaded photos.

There is no model behind this yet: issues are picked from keywords in the
image URL, or at random when none match.
"""

import random
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Prediction:
    issue: str
    confidence: float
    notes: str

    def to_dict(self) -> dict:
        return asdict(self)


NOTES = {
    "Powdery Mildew": "White powdery spots on leaves, usually in humid areas",
    "Leaf Spot": "Brown or black spots on leaves, edges may yellow",
    "Nitrogen Deficiency": "Yellowing leaves, especially older leaves at the base",
    "Overwatering": "Leaves may look limp or water-soaked",
    "Iron Deficiency": "Yellowing between leaf veins on new growth",
    "Early Blight": "Dark brown spots with target-like rings on leaves",
    "Blossom End Rot": "Dark, sunken spots on fruit bottoms",
    "Aphids": "Small insects clustering on new growth",
    "Spider Mites": "Fine webbing on leaf undersides",
    "Whiteflies": "Small white insects on leaf undersides",
}

# (keywords, [(issue, confidence), ...]) checked in order; first match wins.
KEYWORD_RULES = [
    (("white", "powdery"), [("Powdery Mildew", 0.87), ("Leaf Spot", 0.65), ("Nitrogen Deficiency", 0.40)]),
    (("yellow",), [("Nitrogen Deficiency", 0.75), ("Overwatering", 0.50), ("Iron Deficiency", 0.45)]),
    (("brown", "spot"), [("Leaf Spot", 0.82), ("Early Blight", 0.70), ("Blossom End Rot", 0.55)]),
    (("pest", "insect"), [("Aphids", 0.85), ("Spider Mites", 0.60), ("Whiteflies", 0.50)]),
]

RANDOM_ISSUES = [
    "Powdery Mildew",
    "Leaf Spot",
    "Nitrogen Deficiency",
    "Aphids",
    "Spider Mites",
    "Early Blight",
    "Overwatering",
    "Underwatering",
]


def predict_issues(image_url: str, rng: random.Random | None = None) -> list[Prediction]:
    url = image_url.lower()
    for keywords, issues in KEYWORD_RULES:
        if any(k in url for k in keywords):
            return [Prediction(issue, confidence, NOTES[issue]) for issue, confidence in issues]

    rng = rng or random.Random()
    picked = rng.sample(RANDOM_ISSUES, 3)
    return [
        Prediction(issue, round(0.7 - i * 0.15, 2), f"Potential {issue.lower()} detected")
        for i, issue in enumerate(picked)
    ]
