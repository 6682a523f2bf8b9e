"""One polling cycle: fetch, extract, reconcile, rank and act."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Optional

from .extraction import extract_locations
from .models import Location, RankedChanges
from .ranking import DEFAULT_ALLOWED_REGIONS, rank_changes
from .selectors import DEFAULT_SELECTORS, PageSelectors
from .snapshot import Snapshot, reconcile

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CycleReport:
    """Outcome of a single poll of the booking page."""

    polled_at: datetime
    extracted: list[Location]
    changed: list[Location]
    ranked: RankedChanges
    first_run: bool
    opened_link: Optional[str]


def _local_now() -> datetime:
    return datetime.now().astimezone()


class AvailabilityWatcher:
    """Keeps the snapshot between polls and decides when to hand off a link.

    ``fetch`` returns the page HTML and may raise; ``action`` receives the
    booking link of the best changed location. The action is never invoked on
    the first cycle, which only establishes the baseline.
    """

    def __init__(
        self,
        fetch: Callable[[], str],
        *,
        allowed_regions: Iterable[str] = DEFAULT_ALLOWED_REGIONS,
        action: Optional[Callable[[str], object]] = None,
        selectors: PageSelectors = DEFAULT_SELECTORS,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._fetch = fetch
        self._allowed_regions = frozenset(allowed_regions)
        self._action = action
        self._selectors = selectors
        self._clock = clock
        self._snapshot = Snapshot()
        self._first_run = True

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def first_run(self) -> bool:
        return self._first_run

    def poll_once(self) -> CycleReport:
        polled_at = self._clock()
        html = self._fetch()
        extracted = extract_locations(html, self._selectors)

        result = reconcile(self._snapshot, extracted)
        ranked = rank_changes(result.changed, self._allowed_regions)

        first_run = self._first_run
        self._snapshot = result.snapshot
        self._first_run = False

        logger.info(
            "Found %d locations, %d changed, %d after region filter",
            len(extracted),
            len(result.changed),
            len(ranked.locations),
        )

        opened_link: Optional[str] = None
        primary = ranked.primary
        if primary is not None and not first_run and self._action is not None:
            logger.info(
                "Opening %s (%s: %s, %d available)",
                primary.booking_link,
                primary.region,
                primary.organization,
                primary.available_count,
            )
            self._action(primary.booking_link)
            opened_link = primary.booking_link

        return CycleReport(
            polled_at=polled_at,
            extracted=extracted,
            changed=result.changed,
            ranked=ranked,
            first_run=first_run,
            opened_link=opened_link,
        )
