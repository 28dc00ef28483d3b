"""
Tests for activity filtering, duration classes, mode recommendations and
delegation to the injected location / suggestion collaborators.
"""

import pytest

from models import ActivityFilterOptions, BookingMode, DurationBucket, Location
from matching import ActivityMatcher


def ids(items):
    return [item.id for item in items]


@pytest.fixture
def matcher():
    return ActivityMatcher()


# --- filter ---

def test_filter_without_options_is_identity(matcher, activities):
    assert matcher.filter(activities, ActivityFilterOptions()) == activities


def test_filter_by_region(matcher, activities):
    """Unrestricted activities stay; region-bound ones need a matching region."""
    options = ActivityFilterOptions(location=Location(region="Hertfordshire"))
    assert ids(matcher.filter(activities, options)) == [1, 2, 3]


def test_filter_search_matches_name_or_description(matcher, activities):
    assert ids(matcher.filter(activities, ActivityFilterOptions(search="HOMEWORK"))) == [1]
    assert ids(matcher.filter(activities, ActivityFilterOptions(search="nature"))) == [2]
    assert matcher.filter(activities, ActivityFilterOptions(search="zzz")) == []


def test_filter_empty_search_is_skipped(matcher, activities):
    assert matcher.filter(activities, ActivityFilterOptions(search="")) == activities


@pytest.mark.parametrize("bucket, expected", [
    (DurationBucket.SHORT, [3, 5]),
    (DurationBucket.MEDIUM, [1, 2, 6]),
    (DurationBucket.LONG, [4]),
])
def test_filter_by_duration_bucket(matcher, activities, bucket, expected):
    assert ids(matcher.filter(activities, ActivityFilterOptions(duration_filter=bucket))) == expected


def test_duration_filter_all_means_unset(matcher, activities):
    options = ActivityFilterOptions(duration_filter="all")
    assert options.duration_filter is None
    assert matcher.filter(activities, options) == activities


def test_filters_combine(matcher, activities):
    options = ActivityFilterOptions(
        location=Location(region="Hertfordshire"),
        duration_filter=DurationBucket.MEDIUM
    )
    assert ids(matcher.filter(activities, options)) == [1, 2]


def test_duration_bucket_boundaries():
    assert ActivityMatcher.duration_bucket(1) == DurationBucket.SHORT
    assert ActivityMatcher.duration_bucket(1.01) == DurationBucket.MEDIUM
    assert ActivityMatcher.duration_bucket(3) == DurationBucket.MEDIUM
    assert ActivityMatcher.duration_bucket(3.01) == DurationBucket.LONG


def test_filter_by_location_none_is_identity(matcher, activities):
    assert matcher.filter_by_location(activities, None) == activities


# --- Modes ---

@pytest.mark.parametrize("mode, expected", [
    ("school-run-after", [1, 2, 3, 5]),
    ("weekend-respite", [2, 4, 6]),
    ("therapy-companion", [3]),
    ("exam-support", [1, 5]),
    ("holiday-day-trip", [4, 6]),
    (BookingMode.EXAM_SUPPORT, [1, 5]),
])
def test_filter_by_mode(activities, mode, expected):
    assert ids(ActivityMatcher.filter_by_mode(activities, mode)) == expected


@pytest.mark.parametrize("mode", ["single-day-event", "sessions", "unknown", "", None])
def test_modes_without_rule_recommend_nothing(activities, mode):
    assert ActivityMatcher.filter_by_mode(activities, mode) == []


def test_school_run_homework_overrides_duration():
    """A long activity still counts for school runs when it is homework."""
    from models import Activity
    long_homework = Activity(id=9, name="Homework Marathon", duration=4)
    long_other = Activity(id=10, name="Cinema", duration=4)
    assert ids(ActivityMatcher.filter_by_mode([long_homework, long_other], "school-run-after")) == [9]


# --- Collaborators ---

class RecordingEvaluator:
    def __init__(self):
        self.calls = []

    def filter(self, activities, location):
        self.calls.append(location)
        return activities[:2]


class ReversingRanker:
    def __init__(self):
        self.hints = []

    def rank(self, activities, location=None):
        self.hints.append(location)
        return list(reversed(activities))


def test_location_filter_is_delegated(activities):
    evaluator = RecordingEvaluator()
    matcher = ActivityMatcher(evaluator=evaluator)
    location = Location(region="Essex")

    result = matcher.filter(activities, ActivityFilterOptions(location=location, search="park"))

    assert evaluator.calls == [location]
    # search runs on the evaluator's output
    assert ids(result) == [2]


def test_rank_is_delegated(activities):
    ranker = ReversingRanker()
    matcher = ActivityMatcher(ranker=ranker)
    location = Location(region="Essex")

    ranked = matcher.rank(activities, location)

    assert ranker.hints == [location]
    assert ids(ranked) == [6, 5, 4, 3, 2, 1]
