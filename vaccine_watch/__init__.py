"""Watch a regional booking page for new vaccination availability."""

from .extraction import ExtractionError, extract_locations, parse_booking_block, parse_booking_blocks
from .models import Location, Malformed, Parsed, RankedChanges, Skipped
from .ranking import DEFAULT_ALLOWED_REGIONS, rank_changes
from .selectors import DEFAULT_SELECTORS, PageSelectors
from .snapshot import ReconcileResult, Snapshot, reconcile
from .watcher import AvailabilityWatcher, CycleReport

__all__ = [
    "AvailabilityWatcher",
    "CycleReport",
    "DEFAULT_ALLOWED_REGIONS",
    "DEFAULT_SELECTORS",
    "ExtractionError",
    "Location",
    "Malformed",
    "PageSelectors",
    "Parsed",
    "RankedChanges",
    "ReconcileResult",
    "Skipped",
    "Snapshot",
    "extract_locations",
    "parse_booking_block",
    "parse_booking_blocks",
    "rank_changes",
    "reconcile",
]
