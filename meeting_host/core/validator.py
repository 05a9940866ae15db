import datetime as dt

from meeting_host.core.models import MeetingDraft, ValidationErrors

TITLE_REQUIRED = "Title is required"
DATE_IN_PAST = "Meeting date cannot be in the past"
END_BEFORE_START = "End time cannot be before start time"
PARTICIPANTS_REQUIRED = "At least one participant is required"
ROOM_REQUIRED = "Please select a meeting room"


def end_before_start(time_from: dt.time, time_to: dt.time) -> bool:
    return time_to < time_from


def validate(draft: MeetingDraft, now: dt.datetime) -> ValidationErrors:
    """
    Check every rule (no short-circuit) and return only the failing fields.
    An empty result means the draft can be submitted.
    """
    errors: ValidationErrors = {}

    if not draft.title.strip():
        errors["title"] = TITLE_REQUIRED
    # anything earlier than the start of today
    if draft.date < now.date():
        errors["meetingDate"] = DATE_IN_PAST
    if end_before_start(draft.time_from, draft.time_to):
        errors["timeTo"] = END_BEFORE_START
    if not draft.participants:
        errors["participants"] = PARTICIPANTS_REQUIRED
    if not draft.selected_room_id:
        errors["selectedRoom"] = ROOM_REQUIRED

    return errors


def is_valid(errors: ValidationErrors) -> bool:
    return not errors
