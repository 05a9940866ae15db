import asyncio
import logging
from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from meeting_host.core import config
from meeting_host.core.models import AvailabilityQuery, BookingRequest, Room, RoomsResponse

logger = logging.getLogger(__name__)


class ScheduleApiError(Exception):
    """The schedule backend could not be reached or sent back something unusable."""


class ScheduleClient:
    """
    Talks to the room schedule backend:
      GET  /api/schedule?capacity=&date=&timeFrom=&timeTo=  -> {"rooms": [...]}
      POST /api/schedule  {title, date, timeFrom, timeTo, description, guests, roomId}

    `requests` blocks, so the async methods push each call onto a worker
    thread and the event loop keeps handling form events meanwhile. Those
    threads can overlap, so without an explicit `session` every call goes
    through the module-level `requests.get` / `requests.post` and never
    shares a Session.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or config.SCHEDULE_API_URL).rstrip("/")
        self.timeout = config.SCHEDULE_API_TIMEOUT if timeout is None else timeout
        self.http = session or requests

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/schedule"

    def get_available_rooms(self, query: AvailabilityQuery) -> List[Room]:
        params = query.to_params()
        try:
            r = self.http.get(self.url, params=params, timeout=self.timeout)
            r.raise_for_status()
            data = RoomsResponse.model_validate(r.json())
        except (requests.exceptions.RequestException, ValidationError, ValueError) as e:
            logger.warning("Room lookup failed: %s (url=%s params=%s)", e, self.url, params)
            raise ScheduleApiError(f"Failed to fetch available rooms: {e}") from e
        return data.rooms

    def post_booking(self, booking: BookingRequest) -> Any:
        payload = booking.to_json()
        try:
            r = self.http.post(self.url, json=payload, timeout=self.timeout)
            # status is not checked: any JSON body counts as accepted
            return r.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning("Booking failed: %s (url=%s payload=%s)", e, self.url, payload)
            raise ScheduleApiError(f"Failed to schedule meeting: {e}") from e

    async def available_rooms(self, query: AvailabilityQuery) -> List[Room]:
        return await asyncio.to_thread(self.get_available_rooms, query)

    async def book(self, booking: BookingRequest) -> Any:
        return await asyncio.to_thread(self.post_booking, booking)
