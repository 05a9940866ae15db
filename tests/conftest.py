"""Shared fakes for the session tests."""
from __future__ import annotations

import asyncio
import datetime as dt
from typing import Any, Dict, List, Optional

import pytest

from meeting_host.core.models import AvailabilityQuery, BookingRequest, Room
from meeting_host.core.schedule_client import ScheduleApiError

NOW = dt.datetime(2026, 10, 19, 8, 15)
TODAY = NOW.date()
TOMORROW = TODAY + dt.timedelta(days=1)


class FakeScheduleClient:
    """In-memory stand-in for ScheduleClient.

    Rooms come back with a capacity at least the requested one. A lookup or
    booking can be held open with `hold_query(n)` / `hold_booking()` and
    released later, to control completion order.
    """

    def __init__(self) -> None:
        self.catalogue = [
            Room(id="r1", name="Fjord", capacity=4),
            Room(id="r2", name="Glacier", capacity=8),
            Room(id="r3", name="Atrium", capacity=20),
        ]
        self.queries: List[AvailabilityQuery] = []
        self.bookings: List[BookingRequest] = []
        self.fail_rooms = False
        self.fail_booking = False
        self._query_gates: Dict[int, asyncio.Event] = {}
        self._booking_gate: Optional[asyncio.Event] = None

    def hold_query(self, number: int) -> asyncio.Event:
        gate = asyncio.Event()
        self._query_gates[number] = gate
        return gate

    def hold_booking(self) -> asyncio.Event:
        self._booking_gate = asyncio.Event()
        return self._booking_gate

    async def available_rooms(self, query: AvailabilityQuery) -> List[Room]:
        self.queries.append(query)
        gate = self._query_gates.get(len(self.queries))
        if gate is not None:
            await gate.wait()
        if self.fail_rooms:
            raise ScheduleApiError("connection refused")
        return [room for room in self.catalogue if room.capacity >= query.capacity]

    async def book(self, booking: BookingRequest) -> Any:
        self.bookings.append(booking)
        if self._booking_gate is not None:
            await self._booking_gate.wait()
        if self.fail_booking:
            raise ScheduleApiError("bad gateway")
        return {"ok": True}


@pytest.fixture
def fake_client() -> FakeScheduleClient:
    return FakeScheduleClient()
