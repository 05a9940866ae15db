import asyncio
import datetime as dt
import logging
from typing import Callable, List, Optional, Set

from meeting_host.core.models import AvailabilityQuery, Notification, RoomOption
from meeting_host.core.schedule_client import ScheduleApiError, ScheduleClient

logger = logging.getLogger(__name__)

ROOMS_FAILED = "Failed to fetch available rooms"


class AvailabilityCoordinator:
    """
    Keeps the room picker in line with the draft's head count and time window.

    Each query() starts its own lookup and nothing is cancelled. Lookups are
    numbered in issue order and only the newest one issued may touch the room
    list; any earlier response is dropped, whether it lands before or after
    the newer one.
    """

    def __init__(self, client: ScheduleClient, notify: Callable[[Notification], None]):
        self.client = client
        self.notify = notify
        self.rooms: List[RoomOption] = []
        self.last_query: Optional[AvailabilityQuery] = None
        self.pending: Set[asyncio.Task] = set()
        self._issued = 0

    def query(self, capacity: int, date: dt.date, time_from: dt.time,
              time_to: dt.time) -> "asyncio.Task[Optional[List[RoomOption]]]":
        query = AvailabilityQuery(capacity=capacity, date=date, time_from=time_from, time_to=time_to)
        self._issued += 1
        self.last_query = query

        task = asyncio.get_running_loop().create_task(self._run(self._issued, query))
        self.pending.add(task)
        task.add_done_callback(self.pending.discard)
        return task

    async def _run(self, seq: int, query: AvailabilityQuery) -> Optional[List[RoomOption]]:
        try:
            rooms = await self.client.available_rooms(query)
        except ScheduleApiError as e:
            logger.warning("Availability query #%d failed: %s", seq, e)
            self.notify(Notification.error(ROOMS_FAILED))
            return None

        options = [RoomOption.from_room(room) for room in rooms]
        if seq != self._issued:
            logger.debug("Dropping stale availability result #%d (newest is #%d)", seq, self._issued)
            return options

        self.rooms = options
        logger.info("Rooms for %s: %d available", query.to_params(), len(options))
        return options
