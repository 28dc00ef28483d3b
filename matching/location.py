"""
Regional availability of activities.

The activity matcher consumes this through the RegionAvailabilityEvaluator
interface so callers can plug in a geocoding-backed evaluator. The default
implementation works purely from the fields on the Activity record.
"""

import logging
import math
from typing import List, Optional, Protocol

from models import Activity, Location, format_uk_postcode

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class RegionAvailabilityEvaluator(Protocol):
    def filter(self, activities: List[Activity], location: Optional[Location]) -> List[Activity]:
        ...


class DefaultRegionEvaluator:
    """
    Region / postcode / radius availability check.

    An activity is available when ANY declared restriction matches:
    region membership, exact postcode, or distance within its service radius.
    """

    def is_available(self, activity: Activity, location: Location) -> bool:
        # No restriction declared: offered everywhere
        if not activity.has_location_restriction:
            return True

        if activity.available_in_regions and location.region:
            if location.region in activity.available_in_regions:
                return True

        if activity.available_postcodes and location.postcode:
            wanted = format_uk_postcode(location.postcode)
            if wanted in {format_uk_postcode(pc) for pc in activity.available_postcodes}:
                return True

        if activity.service_radius_km and location.has_coordinates:
            if activity.latitude is not None and activity.longitude is not None:
                distance = haversine_km(location.latitude, location.longitude, activity.latitude, activity.longitude)
                if distance <= activity.service_radius_km:
                    return True

        return False

    def filter(self, activities: List[Activity], location: Optional[Location]) -> List[Activity]:
        if location is None or location.is_empty:
            return activities

        kept = [a for a in activities if self.is_available(a, location)]
        logger.debug(f"Location filter ({location.region or location.postcode}) kept {len(kept)}/{len(activities)} activities")
        return kept
