"""
Suggestion ordering for activity lists.

Consumed by the activity matcher through ActivitySuggestionRanker. A ranker
only reorders: the output holds exactly the input elements.
"""

from typing import List, Optional, Protocol

from models import Activity, Location


class ActivitySuggestionRanker(Protocol):
    def rank(self, activities: List[Activity], location: Optional[Location] = None) -> List[Activity]:
        ...


class DefaultSuggestionRanker:
    """
    Local first: activities explicitly offered in the caller's region, then
    unrestricted ones, then everything else. Stable within each tier.
    """

    LOCAL, UNRESTRICTED, OTHER = 0, 1, 2

    def _tier(self, activity: Activity, region: str) -> int:
        if activity.available_in_regions and region in activity.available_in_regions:
            return self.LOCAL
        if not activity.has_location_restriction:
            return self.UNRESTRICTED
        return self.OTHER

    def rank(self, activities: List[Activity], location: Optional[Location] = None) -> List[Activity]:
        if location is None or not location.region:
            return list(activities)
        return sorted(activities, key=lambda a: self._tier(a, location.region))
