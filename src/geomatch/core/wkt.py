"""
Point geometry codec.

The geospatial datastore stores and returns single points as `POINT(<lon> <lat>)`
(longitude first, one space). Entity payloads that already went through an API
layer carry GeoJSON-style or named lat/lon objects instead; `decode_location()`
accepts all three and resolves them to one `Coordinate`.

Nothing here raises on bad input: undecodable values come back as None.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from geomatch.core.bounds import is_valid_coordinate
from geomatch.core.geo import Coordinate
from geomatch.domain.models import LocationShape

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"

# Optional EWKT SRID prefix, e.g. `SRID=4326;POINT(-90.5 14.6)`.
_POINT_RE = re.compile(
    rf"^\s*(?:SRID=\d+;)?POINT\s*\(\s*({_NUMBER})\s+({_NUMBER})\s*\)\s*$",
    re.IGNORECASE,
)

_LOCATION_ADAPTER = TypeAdapter(LocationShape)


def encode_point(c: Coordinate) -> str:
    """Encode a coordinate as `POINT(<lon> <lat>)` using Python's default number text."""
    return f"POINT({c.lon} {c.lat})"


def decode_point(s: Any) -> Coordinate | None:
    """Decode `POINT(<lon> <lat>)`; returns None for empty, malformed or out-of-range input."""
    if not s or not isinstance(s, str):
        return None
    m = _POINT_RE.match(s)
    if not m:
        return None
    lon = float(m.group(1))
    lat = float(m.group(2))
    if not is_valid_coordinate(lat, lon):
        return None
    return Coordinate(lat=lat, lon=lon)


def decode_location(value: Any) -> Coordinate | None:
    """Resolve an entity-embedded location to a Coordinate (or None).

    Accepted shapes:
    - `{"coordinates": [lon, lat]}` (GeoJSON order)
    - `{"latitude": lat, "longitude": lon}` (or `lat`/`lon`)
    - `"POINT(lon lat)"` text
    - an existing `Coordinate`
    """
    if value is None:
        return None
    if isinstance(value, Coordinate):
        coord = value
    elif isinstance(value, str):
        return decode_point(value)
    else:
        if isinstance(value, BaseModel):
            value = value.model_dump()
        try:
            shape = _LOCATION_ADAPTER.validate_python(value)
        except ValidationError:
            return None
        coord = shape.to_coordinate()

    if not is_valid_coordinate(coord.lat, coord.lon):
        return None
    return coord
