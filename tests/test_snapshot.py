from __future__ import annotations

from vaccine_watch.snapshot import Snapshot, reconcile


def test_new_keys_are_all_reported_in_input_order(make_location):
    locations = [
        make_location("Kungälv", "B", 8),
        make_location("Ale", "A", 2),
        make_location("Borås", "C", 1),
    ]

    result = reconcile(Snapshot(), locations)

    assert result.changed == locations
    assert len(result.snapshot) == 3
    assert sorted(result.snapshot, key=lambda location: location.key) == sorted(
        locations, key=lambda location: location.key
    )


def test_reconcile_is_idempotent(make_location):
    locations = [make_location("Ale", "A", 5), make_location("Ale", "B", 0)]

    first = reconcile(Snapshot(), locations)
    second = reconcile(first.snapshot, locations)

    assert second.changed == []
    assert second.snapshot == first.snapshot


def test_count_change_is_reported_and_overwrites_entry(make_location):
    snapshot = Snapshot.from_locations([make_location("Ale", "A", 5, "L1")])
    updated = make_location("Ale", "A", 7, "L2")

    result = reconcile(snapshot, [updated])

    assert result.changed == [updated]
    entry = result.snapshot[("Ale", "A")]
    assert entry.available_count == 7
    assert entry.booking_link == "L2"


def test_stable_count_updates_link_silently(make_location):
    snapshot = Snapshot.from_locations([make_location("Ale", "A", 5, "L1")])

    result = reconcile(snapshot, [make_location("Ale", "A", 5, "L2")])

    assert result.changed == []
    assert result.snapshot[("Ale", "A")].booking_link == "L2"


def test_input_snapshot_is_not_mutated(make_location):
    original = make_location("Ale", "A", 5)
    snapshot = Snapshot.from_locations([original])

    reconcile(snapshot, [make_location("Ale", "A", 9), make_location("Ale", "B", 1)])

    assert len(snapshot) == 1
    assert snapshot[("Ale", "A")] is original


def test_missing_locations_are_never_evicted(make_location):
    snapshot = reconcile(
        Snapshot(), [make_location("Ale", "A", 5), make_location("Ale", "B", 3)]
    ).snapshot

    gone = reconcile(snapshot, [make_location("Ale", "A", 5)])
    assert ("Ale", "B") in gone.snapshot

    back = reconcile(gone.snapshot, [make_location("Ale", "B", 3)])
    assert back.changed == []


def test_keys_are_case_sensitive(make_location):
    snapshot = Snapshot.from_locations([make_location("Ale", "A", 5)])

    result = reconcile(snapshot, [make_location("ale", "A", 5)])

    assert [location.region for location in result.changed] == ["ale"]
    assert len(result.snapshot) == 2


def test_duplicate_keys_in_one_input_are_last_write_wins(make_location):
    first = make_location("Ale", "A", 4, "L1")
    second = make_location("Ale", "A", 6, "L2")

    result = reconcile(Snapshot(), [first, second])

    assert result.changed == [first, second]
    assert result.snapshot[("Ale", "A")] == second


def test_membership_by_location_or_key(make_location):
    location = make_location("Ale", "A", 5)
    snapshot = Snapshot.from_locations([location])

    assert location in snapshot
    assert ("Ale", "A") in snapshot
    assert make_location("Ale", "A", 99) in snapshot
    assert ("Ale", "B") not in snapshot
    assert snapshot.get(("Ale", "B")) is None
