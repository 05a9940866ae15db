import datetime as dt
from typing import Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DATE_FORMAT = "%Y-%m-%d"  # yyyy-MM-dd on the wire
TIME_FORMAT = "%H:%M"     # HH:mm on the wire

FormField = Literal["title", "meetingDate", "timeFrom", "timeTo", "participants", "selectedRoom"]

# field name -> message; a missing key means the field passed the last validation
ValidationErrors = Dict[FormField, str]


def _now_to_minute() -> dt.time:
    return dt.datetime.now().time().replace(second=0, microsecond=0)


class MeetingDraft(BaseModel):
    # camelCase on the wire, like the error keys and the booking body
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    date: dt.date = Field(default_factory=dt.date.today)
    time_from: dt.time = Field(default_factory=_now_to_minute)
    time_to: dt.time = Field(default_factory=_now_to_minute)
    description: str = ""
    participants: List[str] = Field(default_factory=list)
    selected_room_id: str = ""  # "" = no room picked


class Room(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Union[str, int]  # some backends send numeric ids
    name: str
    capacity: int


class RoomsResponse(BaseModel):
    rooms: List[Room]


class RoomOption(BaseModel):
    """What the room picker needs: the label to show and the id to send back."""
    model_config = ConfigDict(frozen=True)

    label: str
    value: str

    @classmethod
    def from_room(cls, room: Room) -> "RoomOption":
        return cls(label=room.name, value=str(room.id))


class AvailabilityQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    capacity: int
    date: dt.date
    time_from: dt.time
    time_to: dt.time

    def to_params(self) -> Dict[str, str]:
        return {
            "capacity": str(self.capacity),
            "date": self.date.strftime(DATE_FORMAT),
            "timeFrom": self.time_from.strftime(TIME_FORMAT),
            "timeTo": self.time_to.strftime(TIME_FORMAT),
        }


class BookingRequest(BaseModel):
    """JSON body of POST /api/schedule."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    date: str
    time_from: str = Field(alias="timeFrom")
    time_to: str = Field(alias="timeTo")
    description: str
    guests: List[str]
    room_id: str = Field(alias="roomId")

    @classmethod
    def from_draft(cls, draft: MeetingDraft) -> "BookingRequest":
        return cls(
            title=draft.title,
            date=draft.date.strftime(DATE_FORMAT),
            time_from=draft.time_from.strftime(TIME_FORMAT),
            time_to=draft.time_to.strftime(TIME_FORMAT),
            description=draft.description,
            guests=list(draft.participants),
            room_id=draft.selected_room_id,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class Notification(BaseModel):
    kind: Literal["success", "error"]
    title: str
    message: str

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(kind="success", title="Success", message=message)

    @classmethod
    def error(cls, message: str) -> "Notification":
        return cls(kind="error", title="Error", message=message)


class SessionState(BaseModel):
    """Everything the UI renders."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    draft: MeetingDraft
    new_participant: str
    errors: ValidationErrors
    rooms: List[RoomOption]
    submitting: bool
