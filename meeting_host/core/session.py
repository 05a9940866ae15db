import asyncio
import datetime as dt
import logging
from typing import Callable, List, Optional

from meeting_host.core.availability import AvailabilityCoordinator
from meeting_host.core.models import MeetingDraft, Notification, SessionState, ValidationErrors
from meeting_host.core.participants import ParticipantSet
from meeting_host.core.schedule_client import ScheduleClient
from meeting_host.core.submission import SubmissionController
from meeting_host.core.validator import END_BEFORE_START, end_before_start

logger = logging.getLogger(__name__)


class SchedulingFormSession:
    """
    One meeting being composed. Owns the draft and the error map and is the
    only thing that changes them.

    Handlers are plain methods called in event order from the host's event
    loop. The ones that affect room availability (head count, date, start
    or end time) start a lookup in the background and return at once.
    Picker handlers take None for "dismissed without a value" and ignore it.
    """

    def __init__(self, client: Optional[ScheduleClient] = None,
                 clock: Callable[[], dt.datetime] = dt.datetime.now,
                 draft: Optional[MeetingDraft] = None):
        self.client = client or ScheduleClient()
        self.clock = clock
        self.draft = draft or MeetingDraft()
        self.errors: ValidationErrors = {}
        self.new_participant = ""
        self.notifications: List[Notification] = []

        self.availability = AvailabilityCoordinator(self.client, self._notify)
        self.participants = ParticipantSet(self.draft.participants, self._refresh_rooms)
        self.submission = SubmissionController(self.client, self._notify)

    # read side

    @property
    def submitting(self) -> bool:
        return self.submission.submitting

    def state(self) -> SessionState:
        return SessionState(
            draft=self.draft.model_copy(deep=True),
            new_participant=self.new_participant,
            errors=dict(self.errors),
            rooms=list(self.availability.rooms),
            submitting=self.submitting,
        )

    def drain_notifications(self) -> List[Notification]:
        out, self.notifications = self.notifications, []
        return out

    # field events

    def set_title(self, text: str) -> None:
        self.draft.title = text
        self.errors.pop("title", None)

    def set_date(self, value: Optional[dt.date]) -> None:
        if value is None:
            return
        self.draft.date = value
        self.errors.pop("meetingDate", None)
        self._refresh_rooms()

    def set_time_from(self, value: Optional[dt.time]) -> None:
        if value is None:
            return
        self.draft.time_from = value
        self.errors.pop("timeFrom", None)
        self.errors.pop("timeTo", None)
        self._refresh_rooms()

    def set_time_to(self, value: Optional[dt.time]) -> None:
        if value is None:
            return
        self.draft.time_to = value
        # end time is re-checked as soon as it is picked
        if end_before_start(self.draft.time_from, value):
            self.errors["timeTo"] = END_BEFORE_START
        else:
            self.errors.pop("timeTo", None)
        self._refresh_rooms()

    def set_description(self, text: str) -> None:
        self.draft.description = text

    def set_new_participant(self, text: str) -> None:
        self.new_participant = text

    def add_participant(self, raw: Optional[str] = None) -> bool:
        """Add `raw`, or the pending participant text when not given."""
        from_input = raw is None
        added = self.participants.add(self.new_participant if from_input else raw)
        if added:
            self.errors.pop("participants", None)
            if from_input:
                self.new_participant = ""
        return added

    def remove_participant(self, value: str) -> None:
        self.participants.remove(value)

    def select_room(self, room_id: str) -> None:
        self.draft.selected_room_id = room_id
        self.errors.pop("selectedRoom", None)

    # submit

    def submit(self) -> "Optional[asyncio.Task[bool]]":
        errors, task = self.submission.submit(self.draft, self.clock())
        if errors is not None:
            self.errors = errors
        return task

    async def settle(self) -> None:
        """Wait until no lookup or booking is outstanding."""
        while True:
            pending = self.availability.pending | self.submission.pending
            if not pending:
                return
            await asyncio.gather(*pending)

    def _refresh_rooms(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = len(self.participants)
        self.availability.query(capacity, self.draft.date, self.draft.time_from, self.draft.time_to)

    def _notify(self, notification: Notification) -> None:
        logger.info("[%s] %s", notification.title, notification.message)
        self.notifications.append(notification)
