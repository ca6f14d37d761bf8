"""
Region table loader.

The default table ships as `src/geomatch/config/regions.yaml` (Guatemalan departments).
An external table can be configured via `regions.path` / `GEOMATCH_REGIONS_PATH`.
Rows are validated into frozen `Region` models and returned as a tuple, so the
loaded table is read-only.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter

from geomatch.core.env import resolve_project_path
from geomatch.domain.models import Region

logger = logging.getLogger(__name__)

_REGIONS_ADAPTER = TypeAdapter(list[Region])


def parse_regions(payload: Any, *, source: str = "<payload>") -> tuple[Region, ...]:
    """Validate a raw list of region rows, keeping table order."""
    if not isinstance(payload, list):
        raise ValueError(f"Invalid region table in {source}; expected a list of regions.")
    regions = _REGIONS_ADAPTER.validate_python(payload)

    seen: set[str] = set()
    for r in regions:
        if r.name in seen:
            raise ValueError(f"Duplicate region name '{r.name}' in {source}")
        seen.add(r.name)
    return tuple(regions)


def load_default_regions() -> tuple[Region, ...]:
    """Load the packaged region table."""
    text = resources.files("geomatch.config").joinpath("regions.yaml").read_text(encoding="utf-8")
    regions = parse_regions(yaml.safe_load(text), source="regions.yaml")
    logger.info("Loaded %d regions from packaged table", len(regions))
    return regions


def load_regions(path: str | Path | None = None) -> tuple[Region, ...]:
    """Load a region table from a YAML file, or the packaged table when `path` is None."""
    if path is None:
        return load_default_regions()
    resolved = resolve_project_path(path)
    regions = parse_regions(yaml.safe_load(resolved.read_text(encoding="utf-8")), source=str(resolved))
    logger.info("Loaded %d regions from %s", len(regions), resolved)
    return regions
