import os

from dotenv import load_dotenv

load_dotenv()

# Backend that answers GET/POST /api/schedule
SCHEDULE_API_URL = os.getenv("SCHEDULE_API_URL", "http://localhost:3000").rstrip("/")
# Seconds; applies to both the room lookup and the booking call
SCHEDULE_API_TIMEOUT = float(os.getenv("SCHEDULE_API_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Where the host listens (PORT is what Heroku hands us)
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
