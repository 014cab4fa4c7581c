from roster.core.errors import SubmissionFetchError
from roster.db.session import SessionLocal
from roster.schemas.assignment import Assignment
from roster.schemas.row import Row
from roster.services.persistence import PersistenceGateway


class FakeSubmissionSource:
    def __init__(self):
        self.assignments: list[Assignment] = []
        self.fail = False
        self.calls: list[int] = []

    async def fetch_submissions(self, week: int) -> list[Assignment]:
        self.calls.append(week)
        if self.fail:
            raise SubmissionFetchError()
        return list(self.assignments)


class RecordingGateway:
    """Stands in for PersistenceGateway in engine tests."""

    def __init__(self):
        self.flushes: list[list[Row]] = []

    def flush(self, rows) -> None:
        self.flushes.append(list(rows))


def make_row(name: str, week: int, attendance: str | None = "yes", total: float | None = 0, **fields) -> Row:
    return Row(name=name, week=week, attendance=attendance, total=total, **fields)


def submission(github: str, week: int, points: str = "100", submitted: bool = True) -> Assignment:
    return Assignment(
        assignment_name=f"week-{week}-exercise",
        github_username=github,
        points_awarded=points,
        points_available="100",
        submission_timestamp="2026-10-12T10:00:00Z" if submitted else None,
        student_repository_name=f"week-{week}-exercise-{github}",
    )


def stored_rows() -> list[Row]:
    return PersistenceGateway(SessionLocal).load()
