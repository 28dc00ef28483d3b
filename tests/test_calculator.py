"""
Tests for selection durations and the first-activity exception.
"""

import pytest

from models import Activity, DurationBucket
from matching import ActivityCalculator, format_hours


def make_activity(activity_id, duration):
    return Activity(id=activity_id, name=f"Activity {activity_id}", duration=duration)


@pytest.fixture
def pair():
    return [make_activity(1, 1.5), make_activity(2, 2)]


def test_total_duration(pair):
    assert ActivityCalculator.calculate_total_duration(pair, [1, 2]) == 3.5
    assert ActivityCalculator.calculate_total_duration(pair, [2]) == 2
    assert ActivityCalculator.calculate_total_duration(pair, []) == 0


def test_total_duration_ignores_unknown_ids(pair):
    assert ActivityCalculator.calculate_total_duration(pair, [1, 99]) == 1.5


def test_first_activity_may_exceed_session():
    """The first pick is allowed even when it is longer than the session."""
    other = make_activity(1, 1)
    long_one = make_activity(2, 5)
    catalogue = [other, long_one]

    assert ActivityCalculator.can_select(long_one, [], catalogue, 3) is True
    assert ActivityCalculator.can_select(long_one, [1], catalogue, 3) is False


def test_can_select_when_it_fits():
    catalogue = [make_activity(1, 1), make_activity(2, 2)]
    assert ActivityCalculator.can_select(catalogue[1], [1], catalogue, 3) is True


def test_deselection_always_allowed():
    catalogue = [make_activity(1, 4), make_activity(2, 4)]
    assert ActivityCalculator.can_select(catalogue[0], [1, 2], catalogue, 3) is True


def test_remaining_capacity(pair):
    assert ActivityCalculator.get_remaining_capacity(pair, [1], 3) == 1.5
    assert ActivityCalculator.get_remaining_capacity(pair, [1, 2], 3) == 0


def test_exceeds_duration(pair):
    assert ActivityCalculator.exceeds_duration(pair, [1, 2], 3) is True
    assert ActivityCalculator.exceeds_duration(pair, [1, 2], 3.5) is False


@pytest.mark.parametrize("duration, expected", [
    (3, DurationBucket.LONG),
    (2, DurationBucket.LONG),
    (1.5, DurationBucket.MEDIUM),
    (1.49, DurationBucket.SHORT),
    (0.5, DurationBucket.SHORT),
])
def test_duration_color(duration, expected):
    assert ActivityCalculator.get_duration_color(duration) == expected


def test_format_hours():
    assert format_hours(3) == "3h"
    assert format_hours(3.0) == "3h"
    assert format_hours(3.5) == "3.5h"
