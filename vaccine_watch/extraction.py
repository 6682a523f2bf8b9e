"""Booking block extraction for the vaccination availability watcher."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from .models import Location, Malformed, ParseOutcome, Parsed, Skipped
from .selectors import DEFAULT_SELECTORS, PageSelectors

logger = logging.getLogger(__name__)

# Counts are unsigned 64-bit on the wire.
MAX_AVAILABLE_COUNT = 2**64 - 1


class ExtractionError(RuntimeError):
    """Raised when a booking block matches but its contents cannot be converted."""


def parse_booking_block(
    block: Tag,
    selectors: PageSelectors = DEFAULT_SELECTORS,
) -> ParseOutcome:
    """Turn a single booking block into a location.

    All three parts (label, link and availability annotation) must be present
    and match; otherwise the block is skipped as a whole.
    """

    label_node = block.select_one(selectors.label)
    if label_node is None:
        return Skipped(f"no {selectors.label} label")

    link_node = block.select_one(selectors.link)
    if link_node is None:
        return Skipped(f"no {selectors.link} link")
    href = link_node.get("href")
    if href is None:
        return Skipped("link has no href")

    annotation_node = block.select_one(selectors.annotation)
    if annotation_node is None:
        return Skipped(f"no {selectors.annotation} annotation")

    label = label_node.get_text()
    label_match = selectors.label_pattern.match(label)
    if not label_match:
        return Skipped(f"label {label!r} does not match")

    annotation = annotation_node.get_text()
    annotation_match = selectors.annotation_pattern.match(annotation)
    if not annotation_match:
        return Skipped(f"annotation {annotation!r} does not match")

    digits = annotation_match.group("count")
    try:
        if not digits.isascii():
            raise ValueError("non-ASCII digits")
        available_count = int(digits)
        if available_count > MAX_AVAILABLE_COUNT:
            raise ValueError("count out of range")
    except ValueError as exc:
        return Malformed(
            ExtractionError(
                f"Invalid availability count {digits!r} in {annotation!r}: {exc}"
            )
        )

    return Parsed(
        Location(
            region=label_match.group("region").strip(),
            organization=label_match.group("organization").strip(),
            booking_link=href,
            available_count=available_count,
        )
    )


def parse_booking_blocks(
    html: str,
    selectors: PageSelectors = DEFAULT_SELECTORS,
) -> list[ParseOutcome]:
    """Return one parse outcome per booking block, in document order."""

    if not html:
        return []

    soup = BeautifulSoup(html, "lxml")
    return [parse_booking_block(block, selectors) for block in soup.select(selectors.block)]


def extract_locations(
    html: str,
    selectors: PageSelectors = DEFAULT_SELECTORS,
) -> list[Location]:
    """Extract every valid location from the booking page *html*.

    Blocks that are incomplete are dropped. A block whose count cannot be
    converted aborts the whole extraction with :class:`ExtractionError`.
    """

    locations: list[Location] = []
    skipped = 0

    for outcome in parse_booking_blocks(html, selectors):
        if isinstance(outcome, Parsed):
            locations.append(outcome.location)
        elif isinstance(outcome, Skipped):
            skipped += 1
            logger.debug("Skipping booking block: %s", outcome.reason)
        else:
            raise outcome.error

    logger.debug("Extracted %d locations (%d blocks skipped)", len(locations), skipped)
    return locations
