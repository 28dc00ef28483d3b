"""
Trainer filtering and ranking.

Hard requirements (capability, location, activity support) remove trainers;
the ranking score orders whoever is left, best first.
"""

import logging
import re
from typing import List, Optional, Tuple

from models import (
    ActivityRef,
    Location,
    PackageActivity,
    RankingCriteria,
    Trainer,
    TrainerRequirements
)
from .capabilities import CapabilityMatcher

logger = logging.getLogger(__name__)


def _find_activity(activity_id: int, package_activities: List[PackageActivity]) -> Optional[PackageActivity]:
    return next((pa for pa in package_activities if pa.id == activity_id), None)


def _is_numeric_id(ref: ActivityRef) -> bool:
    return isinstance(ref, int) and not isinstance(ref, bool)


def _parse_activity_id(ref: ActivityRef) -> Optional[int]:
    """Numeric ids pass through; strings contribute their leading integer ('12', '12-swim')."""
    if _is_numeric_id(ref):
        return ref
    match = re.match(r"\s*([+-]?\d+)", str(ref))
    if not match:
        return None
    return int(match.group(1))


class TrainerMatcher:
    """
    Stateless trainer filters plus the weighted ranking score.

    Score terms (higher is better):
    - capability coverage (0-100) x CAPABILITY_WEIGHT, when capabilities are requested
    - share of requested activities supported (0-100) x ACTIVITY_WEIGHT
    - rating (0-5 scaled to 0-100) x weights.rating
    - experience (capped at EXPERIENCE_CEILING_YEARS, scaled to 0-100) x weights.experience
    """

    CAPABILITY_WEIGHT = 0.4
    ACTIVITY_WEIGHT = 0.3
    EXPERIENCE_CEILING_YEARS = 10

    @staticmethod
    def match_by_capability(trainers: List[Trainer], required: List[str]) -> List[Trainer]:
        if not required:
            return trainers
        return [t for t in trainers if CapabilityMatcher.has_all_capabilities(t, required)]

    @staticmethod
    def match_by_location(
        trainers: List[Trainer],
        location: Optional[Location],
        max_distance: Optional[float] = None
    ) -> List[Trainer]:
        """
        Keep trainers who travel to `location.region`.
        Trainers without declared regions serve everywhere. A postcode-only
        location keeps everyone; `max_distance` is accepted but not applied yet.
        """
        if location is None or location.is_empty:
            return trainers

        target_region = location.region

        def serves(trainer: Trainer) -> bool:
            if trainer.service_regions is None:
                return True
            if target_region:
                return target_region in trainer.service_regions
            return True

        return [t for t in trainers if serves(t)]

    @staticmethod
    def match_by_activity(
        trainers: List[Trainer],
        activity_id: int,
        package_activities: List[PackageActivity]
    ) -> List[Trainer]:
        activity = _find_activity(activity_id, package_activities)
        if activity is None:
            # Unknown activity: nothing to restrict on
            return trainers
        return [t for t in trainers if t.id in activity.trainer_ids]

    @staticmethod
    def match_by_activities(
        trainers: List[Trainer],
        activity_ids: List[int],
        package_activities: List[PackageActivity]
    ) -> List[Trainer]:
        """Keep trainers who can run at least one of the activities."""
        if not activity_ids or not package_activities:
            return trainers

        trainer_ids = set()
        for activity_id in activity_ids:
            activity = _find_activity(activity_id, package_activities)
            if activity:
                trainer_ids.update(activity.trainer_ids)

        return [t for t in trainers if t.id in trainer_ids]

    @classmethod
    def score_trainer(
        cls,
        trainer: Trainer,
        criteria: RankingCriteria,
        package_activities: Optional[List[PackageActivity]] = None
    ) -> float:
        weights = criteria.weights
        score = 0.0

        # 1. Capability coverage
        if criteria.capabilities:
            score += CapabilityMatcher.get_capability_score(trainer, criteria.capabilities) * cls.CAPABILITY_WEIGHT

        # 2. Activity support (numeric ids known to the package only)
        if criteria.activities and package_activities is not None:
            activity_ids = [
                ref for ref in criteria.activities
                if _is_numeric_id(ref) and _find_activity(ref, package_activities)
            ]
            if activity_ids:
                supported = cls._activity_support_count(trainer, activity_ids, package_activities)
                score += (supported / len(activity_ids)) * 100 * cls.ACTIVITY_WEIGHT

        # 3. Rating, 0-5 -> 0-100
        rating = trainer.rating or 0
        score += rating * 20 * weights.rating

        # 4. Experience, capped
        experience = trainer.experience or 0
        score += min(experience / cls.EXPERIENCE_CEILING_YEARS, 1) * 100 * weights.experience

        return score

    @classmethod
    def rank_trainers(
        cls,
        trainers: List[Trainer],
        criteria: RankingCriteria,
        package_activities: Optional[List[PackageActivity]] = None
    ) -> List[Trainer]:
        """Best first. Equal scores keep their input order."""
        scored: List[Tuple[Trainer, float]] = [
            (trainer, cls.score_trainer(trainer, criteria, package_activities))
            for trainer in trainers
        ]
        # sorted() is stable, including with reverse=True
        scored = sorted(scored, key=lambda item: item[1], reverse=True)
        return [trainer for trainer, _ in scored]

    @classmethod
    def get_best_match(
        cls,
        trainers: List[Trainer],
        requirements: TrainerRequirements,
        package_activities: Optional[List[PackageActivity]] = None
    ) -> Optional[Trainer]:
        filtered = cls.match_by_capability(trainers, requirements.capabilities)
        filtered = cls.match_by_location(filtered, requirements.location)

        # Falsy references (0, "") are treated as "no activity requested"
        if requirements.activity and package_activities:
            activity_id = _parse_activity_id(requirements.activity)
            if activity_id is None:
                logger.warning(f"Ignoring unparseable activity reference {requirements.activity!r}")
            elif _find_activity(activity_id, package_activities):
                filtered = cls.match_by_activity(filtered, activity_id, package_activities)

        if not filtered:
            logger.info("No eligible trainer for the given requirements")
            return None

        criteria = RankingCriteria(
            capabilities=requirements.capabilities,
            location=requirements.location,
            activities=[requirements.activity] if requirements.activity else [],
        )
        ranked = cls.rank_trainers(filtered, criteria, package_activities)
        best = ranked[0]
        logger.info(f"Best match: trainer {best.id} ({best.name}) out of {len(filtered)} eligible")
        return best

    @staticmethod
    def _activity_support_count(
        trainer: Trainer,
        activity_ids: List[int],
        package_activities: List[PackageActivity]
    ) -> int:
        count = 0
        for activity_id in activity_ids:
            activity = _find_activity(activity_id, package_activities)
            if activity and trainer.id in activity.trainer_ids:
                count += 1
        return count
