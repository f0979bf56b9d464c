"""Runtime configuration for calrecur.

Values come from the environment (or a local `.env` file). The recurrence
engine itself takes no configuration; these settings only shape the HTTP
surface and process logging.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Longest query window the API accepts, in days (keeps a single request bounded).
MAX_WINDOW_DAYS = int(os.getenv("CALRECUR_MAX_WINDOW_DAYS", "3660"))

LOG_LEVEL = os.getenv("CALRECUR_LOG_LEVEL", "INFO").upper()

HOST = os.getenv("CALRECUR_HOST", "0.0.0.0")
PORT = int(os.getenv("CALRECUR_PORT", "8000"))
RELOAD = os.getenv("CALRECUR_RELOAD", "False").lower() == "true"
