import re
from typing import Optional

from pydantic import BaseModel, field_validator

_WEEK_RE = re.compile(r"week[-_ ]?0*(\d+)", re.IGNORECASE)


class Assignment(BaseModel):
    """One student's line of a GitHub Classroom grade export."""

    assignment_name: str = ""
    github_username: str
    points_awarded: str = ""
    points_available: str = ""
    submission_timestamp: Optional[str] = None
    student_repository_name: Optional[str] = None

    @field_validator("points_awarded", "points_available", mode="before")
    @classmethod
    def _as_text(cls, value):
        # the export is CSV-shaped; numbers sometimes come through as JSON numbers
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)

    def is_submitted(self) -> bool:
        return bool(self.submission_timestamp and self.submission_timestamp.strip())

    def week_pattern(self) -> Optional[int]:
        for source in (self.assignment_name, self.student_repository_name):
            if not source:
                continue
            match = _WEEK_RE.search(source)
            if match:
                return int(match.group(1))
        return None
