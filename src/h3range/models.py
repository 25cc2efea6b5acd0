from pydantic import BaseModel, Field

from src.h3range.grid import EARTH_HALF_CIRCUMFERENCE_M


class GeoPoint(BaseModel):
    """Point on the Earth's surface."""
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class RadiusQuery(GeoPoint):
    """Search circle around a point."""
    radius_m: float = Field(
        ...,
        ge=0,
        le=EARTH_HALF_CIRCUMFERENCE_M,
        allow_inf_nan=False,
        description="Search radius in meters, at most half the Earth's circumference",
    )
