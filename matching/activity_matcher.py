"""
Activity filtering and mode recommendations.

Filters are applied in a fixed order (location, text search, duration class)
and each one is skipped when its option is unset. Location availability and
suggestion ordering are delegated to injected collaborators.

MODE_RULES is product-owned. Only the after-school rule (short sessions or
homework) is an established booking rule; the keyword rules for the other
modes are product choices and can be retuned without a compatibility concern.
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from models import Activity, ActivityFilterOptions, BookingMode, DurationBucket, Location
from .location import DefaultRegionEvaluator, RegionAvailabilityEvaluator
from .suggestions import ActivitySuggestionRanker, DefaultSuggestionRanker

logger = logging.getLogger(__name__)


def _text(activity: Activity) -> str:
    return f"{activity.name} {activity.description}".lower()


def _mentions(activity: Activity, *keywords: str) -> bool:
    haystack = _text(activity)
    return any(k in haystack for k in keywords)


# Booking mode -> recommendation rule. Modes without a rule recommend nothing.
MODE_RULES: Dict[BookingMode, Callable[[Activity], bool]] = {
    BookingMode.SCHOOL_RUN_AFTER: lambda a: a.duration <= 2 or "homework" in a.name.lower(),
    BookingMode.WEEKEND_RESPITE: lambda a: a.duration >= 2 or _mentions(a, "outdoor", "park", "nature", "adventure", "relax"),
    BookingMode.THERAPY_COMPANION: lambda a: _mentions(a, "therapy", "sensory", "calm", "mindful", "wellbeing"),
    BookingMode.EXAM_SUPPORT: lambda a: _mentions(a, "study", "homework", "revision", "exam", "tutor", "learning"),
    BookingMode.HOLIDAY_DAY_TRIP: lambda a: a.duration >= 3 or _mentions(a, "trip", "museum", "zoo", "day out", "explore"),
}


def _resolve_mode(mode_key: Union[BookingMode, str, None]) -> Optional[BookingMode]:
    if not mode_key:
        return None
    try:
        return BookingMode(mode_key)
    except ValueError:
        return None


class ActivityMatcher:
    """Filters and orders activity catalogues for a booking."""

    def __init__(
        self,
        evaluator: Optional[RegionAvailabilityEvaluator] = None,
        ranker: Optional[ActivitySuggestionRanker] = None
    ):
        self.evaluator = evaluator or DefaultRegionEvaluator()
        self.ranker = ranker or DefaultSuggestionRanker()

    def filter(self, activities: List[Activity], options: ActivityFilterOptions) -> List[Activity]:
        result = activities

        if options.location:
            result = self.filter_by_location(result, options.location)

        if options.search:
            query = options.search.lower()
            result = [
                a for a in result
                if query in a.name.lower() or query in a.description.lower()
            ]

        if options.duration_filter:
            result = [a for a in result if self.duration_bucket(a.duration) == options.duration_filter]

        logger.debug(f"Activity filter kept {len(result)}/{len(activities)}")
        return result

    def filter_by_location(self, activities: List[Activity], location: Optional[Location]) -> List[Activity]:
        if location is None:
            return activities
        return self.evaluator.filter(activities, location)

    def rank(self, activities: List[Activity], location: Optional[Location] = None) -> List[Activity]:
        return self.ranker.rank(activities, location)

    @staticmethod
    def duration_bucket(duration: float) -> DurationBucket:
        """Filter classes: short up to 1h, medium up to 3h, long beyond."""
        if duration <= 1:
            return DurationBucket.SHORT
        if duration <= 3:
            return DurationBucket.MEDIUM
        return DurationBucket.LONG

    @staticmethod
    def filter_by_mode(activities: List[Activity], mode_key: Union[BookingMode, str, None]) -> List[Activity]:
        mode = _resolve_mode(mode_key)
        rule = MODE_RULES.get(mode) if mode else None
        if rule is None:
            return []
        return [a for a in activities if rule(a)]
