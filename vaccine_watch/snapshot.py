"""Last-seen availability per location and change detection between polls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional, Union

from .models import Location, LocationKey


class Snapshot:
    """Most recently seen location for every (region, organization) key.

    Entries are never evicted: a location that drops off the page keeps its
    last known availability, so it is only reported again if it returns with
    a different count.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[LocationKey, Location]] = None) -> None:
        self._entries: dict[LocationKey, Location] = dict(entries or {})

    @classmethod
    def from_locations(cls, locations: Iterable[Location]) -> "Snapshot":
        return cls({location.key: location for location in locations})

    def get(self, key: LocationKey) -> Optional[Location]:
        return self._entries.get(key)

    def __getitem__(self, key: LocationKey) -> Location:
        return self._entries[key]

    def __contains__(self, item: Union[LocationKey, Location]) -> bool:
        key = item.key if isinstance(item, Location) else item
        return key in self._entries

    def __iter__(self) -> Iterator[Location]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Snapshot({len(self._entries)} locations)"


@dataclass(slots=True)
class ReconcileResult:
    """Updated snapshot plus the locations that are new or changed."""

    snapshot: Snapshot
    changed: list[Location]


def reconcile(current: Snapshot, new_locations: Iterable[Location]) -> ReconcileResult:
    """Fold freshly extracted locations into *current*.

    A location is reported when its key is unknown or its available count
    differs from the stored one. Every input location overwrites its entry,
    so link changes are picked up silently. Input order is preserved in the
    change list and duplicate keys are applied in order (last write wins).
    *current* itself is left untouched.
    """

    entries = dict(current._entries)
    changed: list[Location] = []

    for location in new_locations:
        previous = entries.get(location.key)
        if previous is None or previous.available_count != location.available_count:
            changed.append(location)
        entries[location.key] = location

    return ReconcileResult(snapshot=Snapshot(entries), changed=changed)
