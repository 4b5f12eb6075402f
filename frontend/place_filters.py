"""Category selection state for the map and listing views."""
import random
from typing import Iterable, List, Optional

from places_api.models.places_model import PLACE_CATEGORIES

STOCKHOLM_CENTER = {"lat": 59.3293, "lng": 18.0686}
FALLBACK_RADIUS_DEG = 0.01  # roughly 1 km


class CategoryFilter:
    def __init__(self, categories: Iterable[str]):
        self.categories: List[str] = list(categories)
        self.selected = set(self.categories)

    @classmethod
    def from_response(cls, payload: Optional[dict]) -> "CategoryFilter":
        """Builds the filter from a /categories response, or the built-in list when the call failed."""
        if not payload or "error" in payload or not payload.get("categories"):
            return cls(PLACE_CATEGORIES)
        return cls(payload["categories"])

    def toggle(self, category: str, checked: bool):
        if checked:
            self.selected.add(category)
        else:
            self.selected.discard(category)

    def is_selected(self, category: str) -> bool:
        return category in self.selected

    def visible(self, places: List[dict]) -> List[dict]:
        return [p for p in places if p.get("category") in self.selected]

    @staticmethod
    def count_for(places: List[dict], category: str) -> int:
        return sum(1 for p in places if p.get("category") == category)


def has_coordinates(place: dict) -> bool:
    coords = (place.get("location") or {}).get("coordinates") or {}
    return bool(coords.get("lat")) and bool(coords.get("lng"))


def with_fallback_coordinates(places: List[dict], rng: Optional[random.Random] = None) -> List[dict]:
    """Places without usable lat/lng get a random spot near Stockholm centre so they still show on the map."""
    rng = rng or random.Random()
    result = []
    for place in places:
        if has_coordinates(place):
            result.append(place)
            continue
        location = dict(place.get("location") or {})
        location["coordinates"] = {
            "lat": STOCKHOLM_CENTER["lat"] + (rng.random() - 0.5) * FALLBACK_RADIUS_DEG * 2,
            "lng": STOCKHOLM_CENTER["lng"] + (rng.random() - 0.5) * FALLBACK_RADIUS_DEG * 2,
        }
        result.append({**place, "location": location})
    return result
