from fastapi import Depends, Request

from roster.core import config
from roster.db.session import SessionLocal
from roster.services.classroom import ClassroomSubmissionSource
from roster.services.engine import ReconciliationEngine
from roster.services.participants import ParticipantDirectory
from roster.services.persistence import PersistenceGateway
from roster.services.table import RosterTable


# The table lives on app.state, created once at startup.
def get_table(request: Request) -> RosterTable:
    return request.app.state.table


def get_gateway() -> PersistenceGateway:
    return PersistenceGateway(SessionLocal)


def get_directory() -> ParticipantDirectory:
    return ParticipantDirectory(SessionLocal)


def get_submission_source() -> ClassroomSubmissionSource:
    return ClassroomSubmissionSource(
        config.CLASSROOM_GRADES_URL,
        token=config.CLASSROOM_TOKEN,
        timeout=config.CLASSROOM_TIMEOUT_SECONDS,
    )


def get_engine(
    table: RosterTable = Depends(get_table),
    gateway: PersistenceGateway = Depends(get_gateway),
    directory: ParticipantDirectory = Depends(get_directory),
) -> ReconciliationEngine:
    return ReconciliationEngine(table, gateway, directory.resolve_name)
