from typing import Optional

from pydantic import BaseModel, Field

# Fields a human-entered weekly record owns; reconciliation never re-derives them.
RECORDED_FIELDS = (
    "attendance",
    "fa",
    "fb",
    "fc",
    "fd",
    "bonus_attempt",
    "bonus_answer_quality",
    "bonus_follow_up",
    "exercise_submitted",
    "exercise_test_passing",
    "exercise_good_documentation",
    "exercise_good_structure",
    "total",
)


class Row(BaseModel):
    name: str
    mail: Optional[str] = None
    week: int = Field(ge=0)

    attendance: Optional[str] = None  # "yes" | "no" | None
    group_id: str = ""
    ta: Optional[str] = None
    total: Optional[float] = None

    fa: Optional[int] = None
    fb: Optional[int] = None
    fc: Optional[int] = None
    fd: Optional[int] = None

    bonus_attempt: Optional[int] = None
    bonus_answer_quality: Optional[int] = None
    bonus_follow_up: Optional[int] = None

    exercise_submitted: Optional[str] = None
    exercise_test_passing: Optional[str] = None
    exercise_good_documentation: Optional[str] = None
    exercise_good_structure: Optional[str] = None

    class Config:
        from_attributes = True


def default_recorded_fields() -> dict:
    """Values a freshly derived week starts with before anyone records anything."""
    return {
        "attendance": "no",
        "fa": 0,
        "fb": 0,
        "fc": 0,
        "fd": 0,
        "bonus_attempt": 0,
        "bonus_answer_quality": 0,
        "bonus_follow_up": 0,
        "exercise_submitted": "no",
        "exercise_test_passing": "no",
        "exercise_good_documentation": "no",
        "exercise_good_structure": "no",
        "total": 0,
    }
