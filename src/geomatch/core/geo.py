from __future__ import annotations

from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt
from typing import Iterable

"""
Geospatial helpers.

We keep a tiny geometry layer here so matching code can do distance calculations
without pulling in heavier GIS dependencies.
"""

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Range checks happen at the decode/validation boundary (`geomatch.core.wkt`,
    `geomatch.core.bounds`), so numeric helpers here accept any finite pair.
    """

    lat: float
    lon: float


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Compute great-circle distance in kilometers between two points."""
    lat1 = radians(a.lat)
    lon1 = radians(a.lon)
    lat2 = radians(b.lat)
    lon2 = radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points.
    return 2 * EARTH_RADIUS_KM * asin(sqrt(min(h, 1.0)))


def haversine_m(a: Coordinate, b: Coordinate) -> float:
    """Compute great-circle distance in meters between two points."""
    return haversine_km(a, b) * 1000.0


def centroid(points: Iterable[Coordinate]) -> Coordinate | None:
    """Arithmetic mean of latitudes and longitudes (None for no points).

    Longitudes are averaged flat: sets straddling the antimeridian get a centroid
    on the wrong side of the globe.
    """
    pts = list(points)
    if not pts:
        return None
    if len(pts) == 1:
        return pts[0]
    total_lat = sum(p.lat for p in pts)
    total_lon = sum(p.lon for p in pts)
    return Coordinate(lat=total_lat / len(pts), lon=total_lon / len(pts))


def format_coordinates(lat: float, lon: float) -> str:
    """Render a display label such as `14.634900°N, 90.506900°W`."""
    lat_dir = "N" if lat >= 0 else "S"
    lon_dir = "E" if lon >= 0 else "W"
    return f"{abs(lat):.6f}°{lat_dir}, {abs(lon):.6f}°{lon_dir}"
