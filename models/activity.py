"""
Activity data models for the Trainer Matching Engine.
"""

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from .location import Location


class DurationBucket(str, Enum):
    """Coarse duration classes used by filters and presentation hints."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class BookingMode(str, Enum):
    """Booking intents that have an activity recommendation rule."""
    SCHOOL_RUN_AFTER = "school-run-after"
    WEEKEND_RESPITE = "weekend-respite"
    THERAPY_COMPANION = "therapy-companion"
    EXAM_SUPPORT = "exam-support"
    HOLIDAY_DAY_TRIP = "holiday-day-trip"
    SINGLE_DAY_EVENT = "single-day-event"


class Activity(BaseModel):
    """
    A bookable activity from a package catalogue.
    Location fields are all optional; when none are set the activity is offered everywhere.
    """

    # --- Core Identity ---
    id: int = Field(description="Unique identifier for the activity")
    name: str = Field(min_length=1, description="Human-readable name")
    description: str = Field(default="", description="Free-text description shown to parents")

    # --- Timing ---
    duration: float = Field(gt=0, description="Length of the activity in hours")

    # --- Availability ---
    available_in_regions: Optional[List[str]] = Field(
        default=None,
        description="Regions (counties) where the activity is offered"
    )
    available_postcodes: Optional[List[str]] = Field(
        default=None,
        description="Specific postcodes where the activity is offered"
    )
    service_radius_km: Optional[float] = Field(
        default=None,
        gt=0,
        description="Radius around the activity's coordinates it is offered within"
    )
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    @model_validator(mode='after')
    def validate_coordinates(self):
        """Coordinates only make sense as a pair."""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("Both latitude and longitude must be provided together")
        return self

    @property
    def has_location_restriction(self) -> bool:
        # An empty list is still a declared restriction that matches nowhere
        return (
            self.available_in_regions is not None
            or self.available_postcodes is not None
            or self.service_radius_km is not None
        )

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": 7,
            "name": "Homework Club",
            "description": "Quiet homework help straight after school",
            "duration": 1.5,
            "available_in_regions": ["Hertfordshire"],
            "available_postcodes": None,
            "service_radius_km": None
        }
    })


class ActivityFilterOptions(BaseModel):
    """Optional criteria for narrowing an activity catalogue. Unset criteria are skipped."""

    location: Optional[Location] = Field(default=None, description="Where the session takes place")
    search: Optional[str] = Field(default=None, description="Case-insensitive text matched on name or description")
    duration_filter: Optional[DurationBucket] = Field(default=None, description="Keep only this duration class")

    @field_validator('duration_filter', mode='before')
    @classmethod
    def accept_all_as_unset(cls, v):
        """The booking UI sends 'all' when no duration class is picked."""
        if isinstance(v, str) and v.strip().lower() in ("", "all"):
            return None
        return v
