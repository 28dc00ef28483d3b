"""
Activity service: the entry point booking flows use for activities.

Combines the matcher (filter / rank / mode recommendations) with the
calculator (durations) and adds selection validation.
"""

import logging
from typing import List, Optional, Union

from models import Activity, ActivityFilterOptions, BookingMode, DurationBucket, Location
from .activity_matcher import ActivityMatcher
from .calculator import ActivityCalculator, format_hours
from .results import ActivityStats, SelectionValidation

logger = logging.getLogger(__name__)


class ActivityService:
    """Facade over ActivityMatcher and ActivityCalculator."""

    # Below this share of the session, a selection is flagged as under-used
    UNDER_UTILISATION_RATIO = 0.5

    def __init__(self, matcher: Optional[ActivityMatcher] = None):
        self.matcher = matcher or ActivityMatcher()

    # --- Filtering & Ranking ---

    def filter_activities(self, activities: List[Activity], options: ActivityFilterOptions) -> List[Activity]:
        return self.matcher.filter(activities, options)

    def rank_activities(self, activities: List[Activity], location: Optional[Location] = None) -> List[Activity]:
        return self.matcher.rank(activities, location)

    # --- Durations ---

    def get_total_duration(self, activities: List[Activity], selected_ids: List[int]) -> float:
        return ActivityCalculator.calculate_total_duration(activities, selected_ids)

    def can_select_activity(
        self,
        activity: Activity,
        selected_ids: List[int],
        all_activities: List[Activity],
        session_duration: float
    ) -> bool:
        return ActivityCalculator.can_select(activity, selected_ids, all_activities, session_duration)

    def get_remaining_capacity(self, activities: List[Activity], selected_ids: List[int], session_duration: float) -> float:
        return ActivityCalculator.get_remaining_capacity(activities, selected_ids, session_duration)

    def exceeds_duration(self, activities: List[Activity], selected_ids: List[int], session_duration: float) -> bool:
        return ActivityCalculator.exceeds_duration(activities, selected_ids, session_duration)

    def get_duration_color(self, duration: float) -> DurationBucket:
        return ActivityCalculator.get_duration_color(duration)

    # --- Validation ---

    def validate_selection(
        self,
        selected_ids: List[int],
        trainer_choice: bool,
        all_activities: List[Activity],
        session_duration: float
    ) -> SelectionValidation:
        """
        Check a selection against the session budget.

        Errors: nothing selected without Trainer's Choice, or the selection
        runs over the session. Warning: the selection fills less than half
        of the session.
        """
        result = SelectionValidation()

        if not selected_ids and not trainer_choice:
            result.errors.append("Please select at least one activity or choose Trainer's Choice")

        if selected_ids:
            total = self.get_total_duration(all_activities, selected_ids)
            if total > session_duration:
                result.errors.append(
                    f"Selected activities ({format_hours(total)}) exceed session duration ({format_hours(session_duration)})"
                )
            elif total < session_duration * self.UNDER_UTILISATION_RATIO:
                result.warnings.append(
                    f"Selected activities ({format_hours(total)}) are less than 50% of session duration ({format_hours(session_duration)})"
                )

        if not result.valid:
            logger.debug(f"Selection {selected_ids} rejected: {result.errors}")
        return result

    # --- Mode Recommendations ---

    def get_recommended_for_mode(self, activities: List[Activity], mode_key: Union[BookingMode, str, None]) -> List[Activity]:
        return ActivityMatcher.filter_by_mode(activities, mode_key)

    def is_recommended_for_mode(self, activity: Activity, mode_key: Union[BookingMode, str, None]) -> bool:
        if not mode_key or mode_key == BookingMode.SINGLE_DAY_EVENT:
            return False
        recommended = ActivityMatcher.filter_by_mode([activity], mode_key)
        return any(item.id == activity.id for item in recommended)

    # --- Reporting ---

    def get_stats(
        self,
        all_activities: List[Activity],
        filtered_activities: List[Activity],
        location: Optional[Location] = None
    ) -> ActivityStats:
        return ActivityStats(
            total=len(all_activities),
            available=len(filtered_activities),
            filtered=len(filtered_activities),
            region=location.region if location else None,
        )
