"""
Coordinate validation and rectangular bounds.

Everything here works on plain lat/lon floats in decimal degrees:
- `is_valid_coordinate()`: range + finiteness check (never raises)
- `is_within_bounds()`: closed-interval containment in a lat/lon rectangle
- `is_within_country()`: containment in the configured country rectangle
- `bounding_box()`: square-ish search envelope around a point, for query pre-filtering
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Protocol

from geomatch.config.settings import Settings, get_settings

# Approximate length of one degree of latitude.
KM_PER_DEGREE = 111.0


class HasBounds(Protocol):
    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned lat/lon rectangle in decimal degrees."""

    north: float
    south: float
    east: float
    west: float

    def contains(self, lat: float, lon: float) -> bool:
        return is_within_bounds(lat, lon, self)


def _is_finite_number(value: object) -> bool:
    # bool is an int subclass; `True` is not a latitude.
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def is_valid_coordinate(lat: object, lon: object) -> bool:
    """Return True iff lat/lon are finite numbers within ±90 / ±180."""
    if not (_is_finite_number(lat) and _is_finite_number(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180  # type: ignore[operator]


def is_within_bounds(lat: float, lon: float, bounds: HasBounds) -> bool:
    """Inclusive containment test; points on any edge count as inside."""
    return bounds.south <= lat <= bounds.north and bounds.west <= lon <= bounds.east


def is_within_country(lat: float, lon: float, settings: Settings | None = None) -> bool:
    """Check a point against the configured country rectangle (`settings.country`)."""
    settings = settings or get_settings()
    return is_within_bounds(lat, lon, settings.country)


def bounding_box(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """Build a search envelope of `radius_km` around a point.

    Planar approximation for small radii. The longitude delta divides by cos(lat),
    so it grows without bound near the poles; callers must not rely on it there.
    """
    lat_delta = radius_km / KM_PER_DEGREE
    lon_delta = radius_km / (KM_PER_DEGREE * math.cos(math.radians(lat)))
    return BoundingBox(
        north=lat + lat_delta,
        south=lat - lat_delta,
        east=lon + lon_delta,
        west=lon - lon_delta,
    )
