"""
Duration arithmetic for activity selections.

All durations are in hours. The session duration is the budget a booking
has; selected activities are summed and checked against it.
"""

from typing import List

from models import Activity, DurationBucket


def format_hours(hours: float) -> str:
    """3 -> '3h', 3.5 -> '3.5h'."""
    if hours == int(hours):
        return f"{int(hours)}h"
    return f"{hours:.1f}h"


class ActivityCalculator:
    """Stateless helpers for selection totals and capacity."""

    @staticmethod
    def calculate_total_duration(activities: List[Activity], selected_ids: List[int]) -> float:
        selected = set(selected_ids)
        return sum(a.duration for a in activities if a.id in selected)

    @staticmethod
    def can_select(
        activity: Activity,
        selected_ids: List[int],
        all_activities: List[Activity],
        session_duration: float
    ) -> bool:
        """
        Whether toggling `activity` on is allowed.

        Deselecting is always allowed. The first pick may exceed the session
        so the parent can lengthen the session afterwards; later picks must fit.
        """
        if activity.id in selected_ids:
            return True

        current = ActivityCalculator.calculate_total_duration(all_activities, selected_ids)
        if current + activity.duration <= session_duration:
            return True

        return len(selected_ids) == 0

    @staticmethod
    def get_remaining_capacity(activities: List[Activity], selected_ids: List[int], session_duration: float) -> float:
        total = ActivityCalculator.calculate_total_duration(activities, selected_ids)
        return max(0.0, session_duration - total)

    @staticmethod
    def exceeds_duration(activities: List[Activity], selected_ids: List[int], session_duration: float) -> bool:
        return ActivityCalculator.calculate_total_duration(activities, selected_ids) > session_duration

    @staticmethod
    def get_duration_color(duration: float) -> DurationBucket:
        """Intensity class for a single activity; the UI maps it to colours."""
        if duration >= 2:
            return DurationBucket.LONG
        if duration >= 1.5:
            return DurationBucket.MEDIUM
        return DurationBucket.SHORT
