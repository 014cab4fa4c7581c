import logging
from typing import Callable, Iterable, Mapping, Optional

from roster.schemas.assignment import Assignment

logger = logging.getLogger(__name__)

FULL_MARKS = "100"


def index_submissions(
    assignments: Iterable[Assignment],
    resolve_name: Callable[[str], Optional[str]],
) -> dict[str, Assignment]:
    """Map participant name -> submitted assignment. Later entries win."""
    by_name: dict[str, Assignment] = {}
    for assignment in assignments:
        if not assignment.is_submitted():
            continue
        name = resolve_name(assignment.github_username)
        if name is None:
            logger.debug("no participant for github user %s", assignment.github_username)
            continue
        by_name[name] = assignment
    return by_name


def exercise_status(
    name: str,
    week: int,
    submissions: Mapping[str, Assignment],
) -> tuple[str, str] | None:
    """(exercise_submitted, exercise_test_passing) for a submission made for ``week``."""
    assignment = submissions.get(name)
    if assignment is None or assignment.week_pattern() != week:
        return None
    passing = "yes" if assignment.points_awarded == FULL_MARKS else "no"
    return ("yes", passing)
