"""Ordering and region filtering of changed locations."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .models import Location, RankedChanges

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_REGIONS: frozenset[str] = frozenset(
    {
        "Ale",
        "Göteborg",
        "Kungälv",
        "Mölndal",
    }
)


def rank_changes(
    changed: Sequence[Location],
    allowed_regions: Iterable[str] = DEFAULT_ALLOWED_REGIONS,
) -> RankedChanges:
    """Sort *changed* by ascending availability and keep allow-listed regions.

    The sort is stable, so locations with equal counts keep their discovery
    order. Region names are compared exactly.
    """

    allowed = frozenset(allowed_regions)
    ordered = sorted(changed, key=lambda location: location.available_count)
    kept = [location for location in ordered if location.region in allowed]

    filtered_count = len(ordered) - len(kept)
    if filtered_count:
        logger.debug(
            "Dropped regions: %s",
            ", ".join(sorted({location.region for location in ordered} - allowed)),
        )

    return RankedChanges(locations=kept, filtered_count=filtered_count)
