"""
Location model and UK postcode helpers.

Postcode handling is deliberately offline: the region is derived from the
postcode area letters using a static county table.
"""

import re
from typing import Optional
from pydantic import BaseModel, Field, model_validator

UK_POSTCODE_PATTERN = re.compile(r"^([A-Z]{1,2}\d{1,2}[A-Z]?)\s*(\d[A-Z]{2})$", re.IGNORECASE)

# Postcode area (letter prefix) -> county / region
POSTCODE_AREA_REGIONS = {
    # Greater London
    "W": "Greater London", "WC": "Greater London", "SW": "Greater London",
    "SE": "Greater London", "E": "Greater London", "EC": "Greater London",
    "N": "Greater London", "NW": "Greater London", "IG": "Greater London",
    "RM": "Greater London", "EN": "Greater London", "HA": "Greater London",
    "UB": "Greater London", "TW": "Greater London", "KT": "Greater London",
    "SM": "Greater London", "CR": "Greater London", "BR": "Greater London",
    "DA": "Greater London",
    # Home counties
    "AL": "Hertfordshire", "WD": "Hertfordshire", "SG": "Hertfordshire", "HP": "Hertfordshire",
    "CM": "Essex", "SS": "Essex", "CO": "Essex",
    "ME": "Kent", "CT": "Kent", "TN": "Kent",
    "GU": "Surrey", "RH": "Surrey",
    "RG": "Berkshire", "SL": "Berkshire",
    "MK": "Buckinghamshire",
    "LU": "Bedfordshire",
    # East
    "CB": "Cambridgeshire", "PE": "Cambridgeshire",
    "NR": "Norfolk",
    "IP": "Suffolk",
    "OX": "Oxfordshire",
    # North West
    "M": "Greater Manchester", "OL": "Greater Manchester", "BL": "Greater Manchester",
    "SK": "Greater Manchester", "WA": "Greater Manchester",
    "L": "Merseyside", "CH": "Merseyside",
    "PR": "Lancashire", "BB": "Lancashire", "FY": "Lancashire",
    "CW": "Cheshire",
    # Midlands
    "B": "West Midlands", "CV": "West Midlands", "WS": "West Midlands",
    "WV": "West Midlands", "DY": "West Midlands",
    "DE": "Derbyshire",
    "NG": "Nottinghamshire",
    "LE": "Leicestershire",
    "ST": "Staffordshire",
    "SY": "Shropshire", "TF": "Shropshire",
    "WR": "Worcestershire",
    "NN": "Northamptonshire",
    "LN": "Lincolnshire",
    # Yorkshire
    "LS": "West Yorkshire", "BD": "West Yorkshire", "HX": "West Yorkshire",
    "HD": "West Yorkshire", "WF": "West Yorkshire",
    "S": "South Yorkshire", "DN": "South Yorkshire",
    # South and South West
    "SO": "Hampshire", "PO": "Hampshire",
    "BN": "Sussex",
    "BH": "Dorset", "DT": "Dorset",
    "BA": "Somerset", "TA": "Somerset",
    "EX": "Devon", "TQ": "Devon", "PL": "Devon",
    "TR": "Cornwall",
    "BS": "Bristol",
    "GL": "Gloucestershire",
    "SN": "Wiltshire", "SP": "Wiltshire",
    # Scotland
    "G": "Glasgow", "EH": "Edinburgh", "AB": "Aberdeenshire", "DD": "Dundee",
    "FK": "Falkirk", "KY": "Fife", "PA": "Argyll", "PH": "Perth", "IV": "Inverness",
    # Wales
    "CF": "Cardiff", "SA": "Swansea", "NP": "Newport", "LD": "Powys", "LL": "North Wales",
    # Northern Ireland
    "BT": "Northern Ireland",
}


def validate_uk_postcode(postcode: Optional[str]) -> bool:
    if not postcode:
        return False
    return UK_POSTCODE_PATTERN.match(postcode.strip()) is not None


def format_uk_postcode(postcode: Optional[str]) -> str:
    """Uppercase and insert the outward/inward space. Unrecognised input is returned as-is."""
    if not postcode:
        return ""
    compact = re.sub(r"\s+", "", postcode.strip().upper())
    match = UK_POSTCODE_PATTERN.match(compact)
    if match:
        return f"{match.group(1)} {match.group(2)}"
    return postcode


def region_from_postcode(postcode: Optional[str]) -> str:
    """Map a postcode to its county/region via the area letters."""
    if not postcode:
        return "Unknown"
    outward = format_uk_postcode(postcode).split(" ")[0]
    area = re.sub(r"\d.*$", "", outward.upper())
    return POSTCODE_AREA_REGIONS.get(area, "Other")


class Location(BaseModel):
    """Where a session happens. Every field is optional."""

    postcode: Optional[str] = Field(default=None, description="UK postcode")
    region: Optional[str] = Field(default=None, description="County / region name")
    city: Optional[str] = Field(default=None)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    @model_validator(mode='after')
    def validate_coordinates(self):
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("Both latitude and longitude must be provided together")
        return self

    @property
    def is_empty(self) -> bool:
        """No region and no postcode: location filters treat this as 'anywhere'."""
        return not self.region and not self.postcode

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_postcode(cls, postcode: str, **extra) -> "Location":
        """Build a location whose region is looked up from the postcode area."""
        return cls(
            postcode=format_uk_postcode(postcode),
            region=region_from_postcode(postcode),
            **extra
        )
