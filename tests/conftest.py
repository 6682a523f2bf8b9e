"""Shared fixtures for the watcher tests."""

from __future__ import annotations

import pytest

from vaccine_watch.models import Location


@pytest.fixture
def make_location():
    def _make(
        region: str = "Ale",
        organization: str = "Vårdcentralen Nödinge",
        available_count: int = 5,
        booking_link: str = "https://example.com/boka",
    ) -> Location:
        return Location(
            region=region,
            organization=organization,
            booking_link=booking_link,
            available_count=available_count,
        )

    return _make
