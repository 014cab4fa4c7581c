import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from roster.core.deps import (
    get_directory,
    get_engine,
    get_gateway,
    get_submission_source,
    get_table,
)
from roster.core.errors import InvalidWeek, NotFound, ValidationError
from roster.core.permissions import require_token
from roster.schemas.message import MessageResponse, ParticipantGithub
from roster.schemas.row import Row
from roster.services.classroom import ClassroomSubmissionSource
from roster.services.engine import ReconciliationEngine
from roster.services.participants import ParticipantDirectory
from roster.services.persistence import PersistenceGateway
from roster.services.table import RosterTable

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/weekly_data/{week}",
    response_model=list[Row],
    dependencies=[Depends(require_token)],
    responses={
        400: {"description": "Invalid week number"},
        401: {"description": "Missing or invalid token"},
        502: {"description": "Submission source unreachable"},
    },
)
async def get_weekly_data(
    week: int,
    engine: ReconciliationEngine = Depends(get_engine),
    source: ClassroomSubmissionSource = Depends(get_submission_source),
):
    if week < 0:
        logger.warning("rejected weekly data request for week %s", week)
        raise InvalidWeek()

    logger.info("Getting and updating weekly data for week: %s", week)

    submissions = []
    if week >= 1:
        # fetch before touching the table so a dead upstream commits nothing
        submissions = await source.fetch_submissions(week)

    result = await run_in_threadpool(engine.reconcile, week, submissions)
    return result.rows


@router.post(
    "/weekly_data/{week}",
    response_model=MessageResponse,
    responses={400: {"description": "No student data provided"}},
)
def add_weekly_data(
    week: int,
    rows: list[Row],
    table: RosterTable = Depends(get_table),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    if not rows:
        raise ValidationError("No student data provided")

    with table.locked():
        table.upsert_many(rows)
        gateway.flush(table.snapshot())

    logger.info("added data for %s in week %s", rows[0].name, week)
    return MessageResponse(message="Weekly data inserted/updated successfully")


@router.post("/del/{week}", response_model=MessageResponse)
def delete_weekly_data(
    week: int,
    row: Row,
    table: RosterTable = Depends(get_table),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    with table.locked():
        deleted = table.remove(row.name, row.mail, row.week)
        if deleted:
            gateway.flush(table.snapshot())

    if not deleted:
        logger.info("No matching data found for %s in week %s - nothing to delete", row.name, row.week)
        return MessageResponse(message="No matching data found to delete")

    logger.info("Deleted data for %s in week %s", row.name, row.week)
    return MessageResponse(message="Weekly data deleted successfully")


@router.get(
    "/participants/{name}/github",
    response_model=ParticipantGithub,
    dependencies=[Depends(require_token)],
)
def participant_github(
    name: str,
    directory: ParticipantDirectory = Depends(get_directory),
):
    github = directory.github_username(name)
    if not github:
        raise NotFound(f"No participant named {name}")
    return ParticipantGithub(name=name, github=github)
