import logging

import httpx
from pydantic import TypeAdapter

from roster.core.errors import SubmissionFetchError
from roster.schemas.assignment import Assignment

logger = logging.getLogger(__name__)

_ASSIGNMENTS = TypeAdapter(list[Assignment])


class ClassroomSubmissionSource:
    """Fetches a week's grade export from GitHub Classroom (or a proxy of it)."""

    def __init__(
        self,
        grades_url: str,
        token: str = "",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.grades_url = grades_url
        self.token = token
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def fetch_submissions(self, week: int) -> list[Assignment]:
        url = self.grades_url.format(week=week)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers=self._headers())
                response.raise_for_status()
                assignments = _ASSIGNMENTS.validate_python(response.json())
        except httpx.HTTPStatusError as exc:
            logger.warning("submission source answered %s for week %s", exc.response.status_code, week)
            raise SubmissionFetchError(
                f"Submission source returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("submission source unreachable for week %s: %s", week, exc)
            raise SubmissionFetchError() from exc
        except ValueError as exc:  # bad JSON or a pydantic ValidationError
            logger.warning("unreadable submission payload for week %s: %s", week, exc)
            raise SubmissionFetchError("Submission source returned an unreadable payload") from exc

        logger.info("fetched %d submissions for week %s", len(assignments), week)
        return assignments
