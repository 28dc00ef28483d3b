"""
Tests for capability predicates, the capability score and name normalisation.
"""

import pytest

from models import Trainer
from matching import CapabilityMatcher, normalize_capabilities


def make_trainer(capabilities, trainer_id=1):
    return Trainer(id=trainer_id, name=f"Trainer {trainer_id}", capabilities=capabilities)


# --- has_capability / has_all / has_any ---

def test_has_capability():
    trainer = make_trainer(["travel_escort"])
    assert CapabilityMatcher.has_capability(trainer, "travel_escort") is True
    assert CapabilityMatcher.has_capability(trainer, "school_run") is False


def test_has_capability_without_declared_set():
    """A trainer with no capability list simply holds nothing."""
    assert CapabilityMatcher.has_capability(make_trainer(None), "travel_escort") is False


@pytest.mark.parametrize("capabilities", [None, [], ["travel_escort"]])
def test_empty_requirement_is_vacuously_met(capabilities):
    """No requirement: every trainer passes both predicates and scores 100."""
    trainer = make_trainer(capabilities)
    assert CapabilityMatcher.has_all_capabilities(trainer, []) is True
    assert CapabilityMatcher.has_any_capability(trainer, []) is True
    assert CapabilityMatcher.get_capability_score(trainer, []) == 100


def test_has_all_capabilities():
    trainer = make_trainer(["travel_escort", "school_run"])
    assert CapabilityMatcher.has_all_capabilities(trainer, ["travel_escort", "school_run"]) is True
    assert CapabilityMatcher.has_all_capabilities(trainer, ["travel_escort", "respite"]) is False
    assert CapabilityMatcher.has_all_capabilities(make_trainer(None), ["travel_escort"]) is False


def test_has_any_capability():
    trainer = make_trainer(["travel_escort"])
    assert CapabilityMatcher.has_any_capability(trainer, ["respite", "travel_escort"]) is True
    assert CapabilityMatcher.has_any_capability(trainer, ["respite"]) is False
    assert CapabilityMatcher.has_any_capability(make_trainer(None), ["respite"]) is False


# --- Scores ---

def test_capability_score_partial_match():
    """Holding one of two required capabilities scores 50."""
    assert CapabilityMatcher.get_capability_score(make_trainer(["a"]), ["a", "b"]) == 50


def test_capability_score_bounds():
    assert CapabilityMatcher.get_capability_score(make_trainer(["a", "b", "c"]), ["a", "b"]) == 100
    assert CapabilityMatcher.get_capability_score(make_trainer(["c"]), ["a", "b"]) == 0
    assert CapabilityMatcher.get_capability_score(make_trainer(None), ["a"]) == 0


def test_compare_capabilities_favours_better_coverage():
    a = make_trainer(["a", "b"], trainer_id=1)
    b = make_trainer(["a"], trainer_id=2)
    assert CapabilityMatcher.compare_capabilities(a, b, ["a", "b"]) == 50
    assert CapabilityMatcher.compare_capabilities(b, a, ["a", "b"]) == -50
    assert CapabilityMatcher.compare_capabilities(a, b, []) == 0


def test_missing_capabilities():
    trainer = make_trainer(["travel_escort"])
    assert CapabilityMatcher.get_missing_capabilities(trainer, ["travel_escort", "respite"]) == ["respite"]
    assert CapabilityMatcher.get_missing_capabilities(make_trainer(None), ["a", "b"]) == ["a", "b"]


# --- Normalisation ---

def test_normalize_capabilities_maps_directory_names():
    raw = ["Creative Play", "  Travel Escort ", "travel_escort", "juggling", "Respite Care"]
    assert normalize_capabilities(raw) == ["creative_support", "travel_escort", "respite"]


def test_normalize_capabilities_handles_empty_input():
    assert normalize_capabilities([]) == []
    assert normalize_capabilities(None) == []
