from __future__ import annotations

# Proximity matching: "which activities are within N km of me, closest first?"
#
# Upstream records are heterogeneous (raw datastore rows carry `POINT(...)` text,
# API payloads carry GeoJSON or lat/lon objects, some rows carry nothing).
# We fail open: records without a usable location are skipped, never raised on.

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from geomatch.config.settings import Settings
from geomatch.core.geo import Coordinate, haversine_km
from geomatch.core.wkt import decode_location

logger = logging.getLogger(__name__)

# Distances use Python's round(): half-to-even on the binary float value.
DISTANCE_DECIMALS = 2


def _entity_location(entity: Mapping[str, Any], location_key: str) -> Coordinate | None:
    # Records without the location key may carry the location fields at top level.
    if location_key in entity:
        return decode_location(entity[location_key])
    return decode_location(entity)


def find_nearby(
    origin: Coordinate,
    radius_km: float,
    entities: Iterable[Any],
    *,
    location_key: str = "location",
) -> list[dict[str, Any]]:
    """Return entities within `radius_km` of `origin`, closest first.

    Each result is a shallow copy of the entity with `distance_km` (2 decimals),
    `latitude` and `longitude` added. The radius is inclusive and equal distances
    keep their input order.
    """
    matches: list[dict[str, Any]] = []
    skipped = 0
    for entity in entities:
        if isinstance(entity, BaseModel):
            entity = entity.model_dump()
        loc = _entity_location(entity, location_key) if isinstance(entity, Mapping) else None
        if loc is None:
            skipped += 1
            continue

        distance_km = round(haversine_km(origin, loc), DISTANCE_DECIMALS)
        if distance_km <= radius_km:
            matches.append({**entity, "distance_km": distance_km, "latitude": loc.lat, "longitude": loc.lon})

    # list.sort is stable, so ties keep input order.
    matches.sort(key=lambda m: m["distance_km"])

    if skipped:
        logger.debug("Skipped %d entities without a decodable location", skipped)
    logger.debug(
        "Found %d entities within %.2f km of (%.4f, %.4f)", len(matches), radius_km, origin.lat, origin.lon
    )
    return matches


@dataclass(frozen=True)
class ProximityMatcher:
    """`find_nearby` bound to configured defaults (radius, location key)."""

    default_radius_km: float = 5.0
    location_key: str = "location"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProximityMatcher":
        cfg = settings.matching
        return cls(default_radius_km=cfg.default_radius_km, location_key=cfg.location_key)

    def find_nearby(
        self, origin: Coordinate, entities: Iterable[Any], *, radius_km: float | None = None
    ) -> list[dict[str, Any]]:
        radius = self.default_radius_km if radius_km is None else radius_km
        return find_nearby(origin, radius, entities, location_key=self.location_key)
