import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DATABASE_URL = os.getenv("ROSTER_DATABASE_URL", f"sqlite:///{BASE_DIR}/classroom.db")

# Opaque token compared verbatim against the Authorization header.
# Unset means every protected route answers 401.
AUTH_TOKEN = os.getenv("ROSTER_AUTH_TOKEN", "")

# GitHub Classroom grade export; "{week}" is substituted per request.
CLASSROOM_GRADES_URL = os.getenv(
    "ROSTER_CLASSROOM_GRADES_URL",
    "http://localhost:8001/classroom/weeks/{week}/grades",
)
CLASSROOM_TOKEN = os.getenv("ROSTER_CLASSROOM_TOKEN", "")
CLASSROOM_TIMEOUT_SECONDS = float(os.getenv("ROSTER_CLASSROOM_TIMEOUT_SECONDS", "10"))

# Group allocation
GROUP_SIZE = int(os.getenv("ROSTER_GROUP_SIZE", "6"))  # students per group
GROUPED_ROWS_LIMIT = int(os.getenv("ROSTER_GROUPED_ROWS_LIMIT", "30"))  # past this, one group each
ABSENT_GROUP_LABEL = os.getenv("ROSTER_ABSENT_GROUP_LABEL", "Group 6")

LOG_LEVEL = os.getenv("ROSTER_LOG_LEVEL", "INFO")
