"""
Request-side models for the Trainer Matching Engine.

These describe what the caller is looking for: ranking criteria for a list
of trainers, and the requirements for resolving a single best trainer.
"""

from datetime import date as date_type
from typing import List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

from .location import Location

# Activities are referenced by numeric id, or by name / free-text when the caller has no id.
ActivityRef = Union[int, str]


class RankingWeights(BaseModel):
    """Weights applied to the rating and experience terms of a trainer score."""
    rating: float = Field(default=0.4, ge=0)
    experience: float = Field(default=0.3, ge=0)
    # Accepted for forward compatibility; no distance term is scored yet.
    distance: float = Field(default=0.3, ge=0)


class RankingCriteria(BaseModel):
    """What to favour when ordering trainers. Every part is optional."""
    location: Optional[Location] = Field(default=None)
    capabilities: List[str] = Field(default_factory=list, description="Capability tags to reward")
    activities: List[ActivityRef] = Field(default_factory=list, description="Requested activities")
    date: Optional[date_type] = Field(default=None)
    weights: RankingWeights = Field(default_factory=RankingWeights)


class TrainerRequirements(BaseModel):
    """Hard requirements for picking a single trainer for a booking."""
    capabilities: List[str] = Field(default_factory=list, description="Capabilities the trainer must hold")
    activity: Optional[ActivityRef] = Field(default=None, description="Activity the trainer must support")
    location: Optional[Location] = Field(default=None)
    date: Optional[date_type] = Field(default=None)
    duration: Optional[float] = Field(default=None, gt=0, description="Session length in hours")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "capabilities": ["travel_escort"],
            "activity": 3,
            "location": {"region": "Hertfordshire"},
            "date": "2026-11-02",
            "duration": 5
        }
    })


class TrainerFilterOptions(BaseModel):
    """Filters applied by TrainerService.filter, in order: capability, location, activities."""
    capabilities: List[str] = Field(default_factory=list)
    location: Optional[Location] = Field(default=None)
    activity_ids: List[int] = Field(default_factory=list)
