"""
Domain models (Pydantic).

These types represent the stable "contract" at the edges of the core:
- entity location payloads (`GeoJsonLocation`, `NamedLocation`), which upstream
  data sends in either shape depending on where it came from
- region table rows (`Region`), loaded from YAML

Downstream code never sees these shapes; everything is resolved once into
`geomatch.core.geo.Coordinate`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Discriminator, Field, StrictFloat, Tag, model_validator

from geomatch.core.bounds import is_within_bounds
from geomatch.core.geo import Coordinate


class GeoJsonLocation(BaseModel):
    """`{"coordinates": [lon, lat]}` (GeoJSON order; an altitude value is ignored)."""

    model_config = ConfigDict(frozen=True)

    coordinates: list[StrictFloat] = Field(..., min_length=2, max_length=3)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(lat=self.coordinates[1], lon=self.coordinates[0])


class NamedLocation(BaseModel):
    """`{"latitude": ..., "longitude": ...}`; the short `lat`/`lon` keys are accepted too."""

    model_config = ConfigDict(frozen=True)

    latitude: StrictFloat = Field(..., validation_alias=AliasChoices("latitude", "lat"))
    longitude: StrictFloat = Field(..., validation_alias=AliasChoices("longitude", "lon", "lng"))

    def to_coordinate(self) -> Coordinate:
        return Coordinate(lat=self.latitude, lon=self.longitude)


def _location_tag(value: Any) -> str | None:
    if isinstance(value, (GeoJsonLocation, NamedLocation)):
        return "geojson" if isinstance(value, GeoJsonLocation) else "named"
    if not isinstance(value, Mapping):
        return None
    # A null `coordinates` column falls through to the named lat/lon fields.
    return "geojson" if value.get("coordinates") is not None else "named"


LocationShape = Annotated[
    Union[
        Annotated[GeoJsonLocation, Tag("geojson")],
        Annotated[NamedLocation, Tag("named")],
    ],
    Discriminator(_location_tag),
]


class Region(BaseModel):
    """A named administrative area approximated as a lat/lon rectangle."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    north: float = Field(..., ge=-90, le=90)
    south: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)
    west: float = Field(..., ge=-180, le=180)

    @model_validator(mode="after")
    def _validate_edges(self) -> "Region":
        if self.south > self.north:
            raise ValueError(f"region '{self.name}': south must not be greater than north")
        if self.west > self.east:
            raise ValueError(f"region '{self.name}': west must not be greater than east")
        return self

    def contains(self, lat: float, lon: float) -> bool:
        return is_within_bounds(lat, lon, self)
