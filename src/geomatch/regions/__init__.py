from geomatch.regions.loader import load_regions, parse_regions
from geomatch.regions.resolver import UNKNOWN_REGION, RegionResolver, get_region_resolver, resolve_region

__all__ = ["UNKNOWN_REGION", "RegionResolver", "get_region_resolver", "load_regions", "parse_regions", "resolve_region"]
