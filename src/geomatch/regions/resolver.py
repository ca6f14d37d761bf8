"""
Coarse region lookup for display and classification.

Regions are rectangles approximating real (non-rectangular) administrative areas, so
they overlap. `RegionResolver.resolve()` returns the first region in table order that
contains the point; table order is part of the contract and must not be re-sorted.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from geomatch.config.settings import Settings, get_settings
from geomatch.domain.models import Region
from geomatch.regions.loader import load_regions

UNKNOWN_REGION = "Unknown"


class RegionResolver:
    def __init__(self, regions: Iterable[Region], *, unknown: str = UNKNOWN_REGION):
        self._regions: tuple[Region, ...] = tuple(regions)
        self._unknown = unknown

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegionResolver":
        return cls(load_regions(settings.regions.path))

    def find(self, lat: float, lon: float) -> Region | None:
        """Return the first region containing the point, or None."""
        for region in self._regions:
            if region.contains(lat, lon):
                return region
        return None

    def resolve(self, lat: float, lon: float) -> str:
        """Return the name of the first region containing the point, or "Unknown"."""
        region = self.find(lat, lon)
        return region.name if region is not None else self._unknown


@lru_cache
def get_region_resolver() -> RegionResolver:
    """Build the process-wide resolver from settings (cached, read-only)."""
    return RegionResolver.from_settings(get_settings())


def resolve_region(lat: float, lon: float) -> str:
    return get_region_resolver().resolve(lat, lon)
