import asyncio
import datetime as dt
import logging
from typing import Callable, Optional, Set, Tuple

from meeting_host.core.models import BookingRequest, MeetingDraft, Notification, ValidationErrors
from meeting_host.core.schedule_client import ScheduleApiError, ScheduleClient
from meeting_host.core.validator import validate

logger = logging.getLogger(__name__)

BOOKED = "Meeting has been scheduled successfully"
BOOKING_FAILED = "Failed to schedule meeting. Please try again."


class SubmissionController:
    """Idle -> Submitting -> Idle. Only one booking may be in flight."""

    def __init__(self, client: ScheduleClient, notify: Callable[[Notification], None]):
        self.client = client
        self.notify = notify
        self.submitting = False
        self.pending: Set[asyncio.Task] = set()

    def submit(self, draft: MeetingDraft, now: dt.datetime
               ) -> Tuple[Optional[ValidationErrors], "Optional[asyncio.Task[bool]]"]:
        """
        Returns (errors, task). errors is None when the call was ignored
        because a booking is already in flight; task is None unless a
        request went out.
        """
        if self.submitting:
            logger.debug("Submit ignored: booking already in flight")
            return None, None
        self.submitting = True

        errors = validate(draft, now)
        if errors:
            logger.info("Submit blocked by validation: %s", sorted(errors))
            self.submitting = False
            return errors, None

        booking = BookingRequest.from_draft(draft)
        task = asyncio.get_running_loop().create_task(self._book(booking))
        self.pending.add(task)
        task.add_done_callback(self.pending.discard)
        return errors, task

    async def _book(self, booking: BookingRequest) -> bool:
        try:
            await self.client.book(booking)
        except ScheduleApiError as e:
            logger.warning("Booking %r failed: %s", booking.title, e)
            self.notify(Notification.error(BOOKING_FAILED))
            return False
        finally:
            self.submitting = False

        logger.info("Booked %r in room %s for %d guests", booking.title, booking.room_id, len(booking.guests))
        self.notify(Notification.success(BOOKED))
        return True
