"""Data models used across the vaccination availability watcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

LocationKey = tuple[str, str]


@dataclass(slots=True, frozen=True)
class Location:
    """A clinic's bookable availability as listed on the booking page."""

    region: str
    organization: str
    booking_link: str
    available_count: int

    @property
    def key(self) -> LocationKey:
        return (self.region, self.organization)


@dataclass(slots=True, frozen=True)
class Parsed:
    """A booking block that produced a complete location."""

    location: Location


@dataclass(slots=True, frozen=True)
class Skipped:
    """A booking block that is not a usable record (expected page noise)."""

    reason: str


@dataclass(slots=True, frozen=True)
class Malformed:
    """A booking block whose matched content could not be converted."""

    error: Exception


ParseOutcome = Union[Parsed, Skipped, Malformed]


@dataclass(slots=True)
class RankedChanges:
    """Changed locations after sorting and region filtering."""

    locations: list[Location]
    filtered_count: int

    @property
    def primary(self) -> Optional[Location]:
        return self.locations[0] if self.locations else None

    @property
    def filtered_message(self) -> Optional[str]:
        if self.filtered_count <= 0:
            return None
        if self.filtered_count == 1:
            return "Filtered 1 location."
        return f"Filtered {self.filtered_count} locations."
