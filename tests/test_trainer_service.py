"""
Tests for the trainer service facade and directory helpers.
"""

import pytest

from models import Location, RankingCriteria, TrainerFilterOptions, TrainerRequirements
from matching import TrainerService


def ids(items):
    return [item.id for item in items]


@pytest.fixture
def service():
    return TrainerService()


def test_filter_applies_all_options(service, trainers, package_activities):
    options = TrainerFilterOptions(
        capabilities=["travel_escort"],
        location=Location(region="Hertfordshire"),
        activity_ids=[3]
    )
    assert ids(service.filter(trainers, options, package_activities)) == [3]


def test_filter_without_options_is_identity(service, trainers):
    assert service.filter(trainers, TrainerFilterOptions()) == trainers


def test_filter_ignores_activities_without_bindings(service, trainers):
    options = TrainerFilterOptions(activity_ids=[3])
    assert service.filter(trainers, options) == trainers


def test_rank_and_best_match(service, trainers, package_activities):
    ranked = service.rank(trainers, RankingCriteria(capabilities=["travel_escort"]), package_activities)
    assert ids(ranked) == [1, 3, 2, 4, 5]

    best = service.get_best_match(trainers, TrainerRequirements(activity=2), package_activities)
    assert best.id == 2


def test_stats_count_available_trainers(service, trainers):
    filtered = [t for t in trainers if t.id in (1, 3)]
    stats = service.get_stats(trainers, filtered)

    assert stats.total == 5
    assert stats.filtered == 2
    assert stats.available == 1


def test_activity_count(service, package_activities):
    assert service.get_activity_count(3, package_activities) == 3
    assert service.get_activity_count(1, package_activities) == 2
    assert service.get_activity_count(42, package_activities) == 0


@pytest.mark.parametrize("tag, label", [
    ("travel_escort", "Travel escort"),
    ("school_run", "School run"),
    ("respite", "Weekend respite"),
    ("escort", "Club/Class escort"),
    ("therapy_companion", "Therapy companion"),
    ("exam_support", "Exam support"),
    ("hospital_support", "Hospital support"),
    ("creative_support", "Creative support"),
    ("mentoring", "Mentoring"),
    ("outdoor_support", "Outdoor support"),
    ("sequential_learning", "Sequential learning"),
    ("juggling", "juggling"),
])
def test_capability_display_name(service, tag, label):
    assert service.get_capability_display_name(tag) == label


def test_available_capabilities(service, trainers):
    assert service.get_available_capabilities(trainers) == [
        "exam_support",
        "outdoor_support",
        "respite",
        "school_run",
        "therapy_companion",
        "travel_escort",
    ]
    assert service.get_available_capabilities([]) == []


def test_capability_checks(service, trainers):
    amira = trainers[0]
    assert service.matches_required_capabilities(amira, ["travel_escort", "school_run"]) is True
    assert service.matches_required_capabilities(amira, ["respite"]) is False
    assert service.get_missing_capabilities(amira, ["respite", "school_run"]) == ["respite"]
