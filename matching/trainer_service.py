"""
Trainer service: the entry point booking flows use for trainers.
"""

from typing import List, Optional

from models import (
    PackageActivity,
    RankingCriteria,
    Trainer,
    TrainerFilterOptions,
    TrainerRequirements
)
from .capabilities import CAPABILITY_LABELS, CapabilityMatcher
from .results import TrainerStats
from .trainer_matcher import TrainerMatcher


class TrainerService:
    """Facade over TrainerMatcher and CapabilityMatcher, plus directory helpers."""

    def filter(
        self,
        trainers: List[Trainer],
        options: TrainerFilterOptions,
        package_activities: Optional[List[PackageActivity]] = None
    ) -> List[Trainer]:
        """Apply capability, then location, then activity-support filters."""
        result = TrainerMatcher.match_by_capability(trainers, options.capabilities)
        result = TrainerMatcher.match_by_location(result, options.location)
        if options.activity_ids and package_activities:
            result = TrainerMatcher.match_by_activities(result, options.activity_ids, package_activities)
        return result

    def rank(
        self,
        trainers: List[Trainer],
        criteria: RankingCriteria,
        package_activities: Optional[List[PackageActivity]] = None
    ) -> List[Trainer]:
        return TrainerMatcher.rank_trainers(trainers, criteria, package_activities)

    def get_best_match(
        self,
        trainers: List[Trainer],
        requirements: TrainerRequirements,
        package_activities: Optional[List[PackageActivity]] = None
    ) -> Optional[Trainer]:
        return TrainerMatcher.get_best_match(trainers, requirements, package_activities)

    def get_stats(self, all_trainers: List[Trainer], filtered_trainers: List[Trainer]) -> TrainerStats:
        return TrainerStats(
            total=len(all_trainers),
            filtered=len(filtered_trainers),
            available=sum(1 for t in filtered_trainers if t.available),
        )

    def get_activity_count(self, trainer_id: int, package_activities: List[PackageActivity]) -> int:
        """How many package activities this trainer is qualified for."""
        return sum(1 for pa in package_activities if trainer_id in pa.trainer_ids)

    def get_capability_display_name(self, capability: str) -> str:
        return CAPABILITY_LABELS.get(capability, capability)

    def get_available_capabilities(self, trainers: List[Trainer]) -> List[str]:
        tags = set()
        for trainer in trainers:
            tags.update(trainer.capabilities or [])
        return sorted(tags)

    def matches_required_capabilities(self, trainer: Trainer, required: List[str]) -> bool:
        return CapabilityMatcher.has_all_capabilities(trainer, required)

    def get_missing_capabilities(self, trainer: Trainer, required: List[str]) -> List[str]:
        return CapabilityMatcher.get_missing_capabilities(trainer, required)
