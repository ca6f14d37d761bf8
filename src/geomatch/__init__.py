"""Geospatial proximity matching for volunteer activities."""

from geomatch.core.bounds import BoundingBox, bounding_box, is_valid_coordinate, is_within_bounds, is_within_country
from geomatch.core.geo import Coordinate, centroid, format_coordinates, haversine_km, haversine_m
from geomatch.core.wkt import decode_location, decode_point, encode_point
from geomatch.matching.nearby import ProximityMatcher, find_nearby
from geomatch.regions.resolver import UNKNOWN_REGION, RegionResolver, get_region_resolver, resolve_region

__all__ = [
    "BoundingBox",
    "Coordinate",
    "ProximityMatcher",
    "RegionResolver",
    "UNKNOWN_REGION",
    "bounding_box",
    "centroid",
    "decode_location",
    "decode_point",
    "encode_point",
    "find_nearby",
    "format_coordinates",
    "get_region_resolver",
    "haversine_km",
    "haversine_m",
    "is_valid_coordinate",
    "is_within_bounds",
    "is_within_country",
    "resolve_region",
]
