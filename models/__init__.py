"""
Data models package for the Trainer Matching Engine.

This package exports the three groups of input records:
1. Demand (Activity, booking modes, activity filters)
2. Supply (Trainer, PackageActivity)
3. Requests (Location, RankingCriteria, TrainerRequirements)
"""

from .activity import (
    Activity,
    ActivityFilterOptions,
    BookingMode,
    DurationBucket
)

from .trainer import (
    Trainer,
    PackageActivity
)

from .location import (
    Location,
    format_uk_postcode,
    region_from_postcode,
    validate_uk_postcode
)

from .criteria import (
    ActivityRef,
    RankingCriteria,
    RankingWeights,
    TrainerFilterOptions,
    TrainerRequirements
)

__all__ = [
    # --- Demand Models ---
    "Activity",
    "ActivityFilterOptions",
    "BookingMode",
    "DurationBucket",

    # --- Supply Models ---
    "Trainer",
    "PackageActivity",

    # --- Request Models ---
    "Location",
    "ActivityRef",
    "RankingCriteria",
    "RankingWeights",
    "TrainerFilterOptions",
    "TrainerRequirements",

    # --- Postcode Helpers ---
    "format_uk_postcode",
    "region_from_postcode",
    "validate_uk_postcode",
]
