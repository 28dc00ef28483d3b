"""
Trainer / activity matching engine.

Pure functions over caller-supplied snapshots: nothing here fetches,
caches or mutates data.
"""

from .activity_matcher import ActivityMatcher, MODE_RULES
from .activity_service import ActivityService
from .calculator import ActivityCalculator, format_hours
from .capabilities import CAPABILITY_LABELS, CapabilityMatcher, normalize_capabilities
from .location import DefaultRegionEvaluator, RegionAvailabilityEvaluator, haversine_km
from .results import ActivityStats, SelectionValidation, TrainerStats
from .suggestions import ActivitySuggestionRanker, DefaultSuggestionRanker
from .trainer_matcher import TrainerMatcher
from .trainer_service import TrainerService

__all__ = [
    "ActivityCalculator",
    "ActivityMatcher",
    "ActivityService",
    "ActivityStats",
    "ActivitySuggestionRanker",
    "CAPABILITY_LABELS",
    "CapabilityMatcher",
    "DefaultRegionEvaluator",
    "DefaultSuggestionRanker",
    "MODE_RULES",
    "RegionAvailabilityEvaluator",
    "SelectionValidation",
    "TrainerMatcher",
    "TrainerService",
    "TrainerStats",
    "format_hours",
    "haversine_km",
    "normalize_capabilities",
]
