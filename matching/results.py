"""
Result records returned by the matching services.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SelectionValidation:
    """Verdict on a parent's activity selection. Warnings never make it invalid."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class ActivityStats:
    total: int
    available: int
    filtered: int
    region: Optional[str] = None


@dataclass
class TrainerStats:
    total: int
    filtered: int
    available: int
