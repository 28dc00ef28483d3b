"""
Capability checks for trainers.

Answers "does this trainer hold what the booking needs?", both as a yes/no
and as a 0-100 match percentage used by the ranking score.
"""

from typing import Iterable, List

from models import Trainer

# Fixed display labels for capability tags
CAPABILITY_LABELS = {
    "travel_escort": "Travel escort",
    "school_run": "School run",
    "respite": "Weekend respite",
    "escort": "Club/Class escort",
    "therapy_companion": "Therapy companion",
    "exam_support": "Exam support",
    "hospital_support": "Hospital support",
    "creative_support": "Creative support",
    "mentoring": "Mentoring",
    "outdoor_support": "Outdoor support",
    "sequential_learning": "Sequential learning",
}

# Free-text names the trainer directory uses -> capability tag
CAPABILITY_ALIASES = {
    # Creative
    "creative play": "creative_support",
    "creative activities": "creative_support",
    "artistic support": "creative_support",
    "art therapy": "creative_support",
    # Mentoring
    "mentor": "mentoring",
    "mentorship": "mentoring",
    # Outdoor
    "outdoor exploration": "outdoor_support",
    "outdoor activities": "outdoor_support",
    "outdoor support": "outdoor_support",
    # Travel / escort
    "travel escort": "travel_escort",
    "school run": "school_run",
    # Therapy / support
    "therapy companion": "therapy_companion",
    "therapy support": "therapy_companion",
    "respite care": "respite",
    "exam support": "exam_support",
    "hospital support": "hospital_support",
    "sequential learning": "sequential_learning",
}


def normalize_capabilities(raw: Iterable[str]) -> List[str]:
    """
    Map directory capability names onto known tags.
    Unknown names are dropped; order is kept and duplicates removed.
    """
    normalized: List[str] = []
    for name in raw or []:
        key = str(name).strip().lower()
        tag = CAPABILITY_ALIASES.get(key, key)
        if tag in CAPABILITY_LABELS and tag not in normalized:
            normalized.append(tag)
    return normalized


class CapabilityMatcher:
    """
    Stateless capability predicates and scores.
    A trainer with `capabilities=None` holds nothing.
    """

    @staticmethod
    def has_capability(trainer: Trainer, capability: str) -> bool:
        if trainer.capabilities is None:
            return False
        return capability in trainer.capabilities

    @staticmethod
    def has_all_capabilities(trainer: Trainer, required: List[str]) -> bool:
        if not required:
            return True
        if trainer.capabilities is None:
            return False
        return all(cap in trainer.capabilities for cap in required)

    @staticmethod
    def has_any_capability(trainer: Trainer, required: List[str]) -> bool:
        if not required:
            return True
        if trainer.capabilities is None:
            return False
        return any(cap in trainer.capabilities for cap in required)

    @staticmethod
    def get_capability_score(trainer: Trainer, required: List[str]) -> float:
        """
        Percentage (0-100) of `required` the trainer holds.
        No requirement counts as a perfect match.
        """
        if not required:
            return 100.0
        if trainer.capabilities is None:
            return 0.0

        matched = sum(1 for cap in required if cap in trainer.capabilities)
        score = (matched / len(required)) * 100
        return max(0.0, min(100.0, score))

    @staticmethod
    def compare_capabilities(a: Trainer, b: Trainer, required: List[str]) -> float:
        """Positive when `a` covers more of `required` than `b`."""
        return CapabilityMatcher.get_capability_score(a, required) - CapabilityMatcher.get_capability_score(b, required)

    @staticmethod
    def get_missing_capabilities(trainer: Trainer, required: List[str]) -> List[str]:
        held = trainer.capabilities or []
        return [cap for cap in required if cap not in held]
