"""
Trainer data models for the Trainer Matching Engine.

This module defines the 'Supply' side of a booking:
1. Trainers (people with capabilities, travel regions and a track record)
2. Package activity bindings (which trainers may run which activity)
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class Trainer(BaseModel):
    """
    A trainer as supplied by the trainer directory.

    `capabilities=None` means nothing is declared, so the trainer fails any
    capability requirement. `service_regions=None` means the trainer travels
    anywhere, so location filters always keep them.
    """
    id: int = Field(description="Unique identifier")
    name: str = Field(min_length=1, description="Display name")
    slug: str = Field(default="", description="URL slug of the public profile")

    # Matching inputs
    capabilities: Optional[List[str]] = Field(
        default=None,
        description="Capability tags such as 'travel_escort' (None = none declared)"
    )
    service_regions: Optional[List[str]] = Field(
        default=None,
        description="Regions the trainer travels to (None = no restriction)"
    )

    # Ranking inputs
    rating: Optional[float] = Field(default=None, ge=0, le=5, description="Average review score, 0-5")
    experience: Optional[float] = Field(default=None, ge=0, description="Years of experience")

    available: bool = Field(default=True, description="Currently accepting bookings")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": 12,
            "name": "Sarah Jones",
            "slug": "sarah-jones",
            "capabilities": ["travel_escort", "school_run"],
            "service_regions": ["Hertfordshire", "Greater London"],
            "rating": 4.8,
            "experience": 6
        }
    })


class PackageActivity(BaseModel):
    """Links one package activity to the trainers qualified to deliver it."""
    id: int = Field(description="Activity identifier")
    trainer_ids: List[int] = Field(default_factory=list, description="Trainers who can run this activity")
