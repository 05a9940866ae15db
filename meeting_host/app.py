# meeting_host/app.py
import datetime as dt
import logging
from typing import List, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel

from meeting_host.core import config
from meeting_host.core.models import Notification, SessionState, ValidationErrors
from meeting_host.core.session import SchedulingFormSession

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI()

# =========================
# Models
# =========================
class TextIn(BaseModel):
    value: str

class DateIn(BaseModel):
    value: Optional[dt.date] = None  # null = picker dismissed

class TimeIn(BaseModel):
    value: Optional[dt.time] = None

class ParticipantIn(BaseModel):
    email: Optional[str] = None  # falls back to the pending participant text

class SubmitOut(BaseModel):
    accepted: bool
    errors: ValidationErrors

# =========================
# Session
# =========================
# One form per host process, the way a single screen holds one draft.
_session: Optional[SchedulingFormSession] = None

def get_session() -> SchedulingFormSession:
    global _session
    if _session is None:
        _session = SchedulingFormSession()
        logger.info("New scheduling session against %s", _session.client.url)
    return _session

# =========================
# Routes
# =========================
# Handlers are async so lookups and bookings start on the server's event loop.
@app.get("/health")
def health():
    return {"ok": True}

@app.get("/session", response_model=SessionState)
async def read_session(session: SchedulingFormSession = Depends(get_session)):
    return session.state()

@app.put("/session/title", response_model=SessionState)
async def put_title(body: TextIn, session: SchedulingFormSession = Depends(get_session)):
    session.set_title(body.value)
    return session.state()

@app.put("/session/date", response_model=SessionState)
async def put_date(body: DateIn, session: SchedulingFormSession = Depends(get_session)):
    session.set_date(body.value)
    return session.state()

@app.put("/session/time-from", response_model=SessionState)
async def put_time_from(body: TimeIn, session: SchedulingFormSession = Depends(get_session)):
    session.set_time_from(body.value)
    return session.state()

@app.put("/session/time-to", response_model=SessionState)
async def put_time_to(body: TimeIn, session: SchedulingFormSession = Depends(get_session)):
    session.set_time_to(body.value)
    return session.state()

@app.put("/session/description", response_model=SessionState)
async def put_description(body: TextIn, session: SchedulingFormSession = Depends(get_session)):
    session.set_description(body.value)
    return session.state()

@app.put("/session/new-participant", response_model=SessionState)
async def put_new_participant(body: TextIn, session: SchedulingFormSession = Depends(get_session)):
    session.set_new_participant(body.value)
    return session.state()

@app.put("/session/room", response_model=SessionState)
async def put_room(body: TextIn, session: SchedulingFormSession = Depends(get_session)):
    session.select_room(body.value)
    return session.state()

@app.post("/session/participants", response_model=SessionState)
async def add_participant(body: ParticipantIn, session: SchedulingFormSession = Depends(get_session)):
    session.add_participant(body.email)
    return session.state()

@app.delete("/session/participants/{email}", response_model=SessionState)
async def remove_participant(email: str, session: SchedulingFormSession = Depends(get_session)):
    session.remove_participant(email)
    return session.state()

@app.post("/session/submit", response_model=SubmitOut)
async def submit(session: SchedulingFormSession = Depends(get_session)):
    """
    Validate and, when the form is clean, start the booking.
    The outcome arrives later via /session/notifications.
    """
    task = session.submit()
    return {"accepted": task is not None, "errors": session.errors}

@app.get("/session/notifications", response_model=List[Notification])
async def notifications(session: SchedulingFormSession = Depends(get_session)):
    return session.drain_notifications()

def main():
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)

if __name__ == "__main__":
    main()
