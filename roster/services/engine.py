"""Weekly reconciliation: derive a week's roster from the week before it."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Optional

from roster.core.errors import InvalidWeek
from roster.schemas.assignment import Assignment
from roster.schemas.row import RECORDED_FIELDS, Row, default_recorded_fields
from roster.services.allocator import Allocator, sort_prior_week
from roster.services.enricher import exercise_status, index_submissions
from roster.services.persistence import PersistenceGateway
from roster.services.table import RosterTable

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    rows: list[Row] = field(default_factory=list)
    changed: bool = False


class ReconciliationEngine:
    def __init__(
        self,
        table: RosterTable,
        gateway: PersistenceGateway,
        resolve_name: Callable[[str], Optional[str]],
        allocator: Allocator | None = None,
    ):
        self.table = table
        self.gateway = gateway
        self.resolve_name = resolve_name
        self.allocator = allocator or Allocator()

    def reconcile(self, week: int, submissions: Iterable[Assignment]) -> ReconcileResult:
        """
        Build, store and return the roster for ``week``.

        Week 0 is returned as stored. For later weeks, the previous week is
        read, derived and committed in a single hold of the table lock; the
        table is flushed to storage only if some row is new or changed.
        """
        if week < 0:
            raise InvalidWeek()

        if week == 0:
            return ReconcileResult(rows=self.table.rows_for_week(0))

        # name lookups hit the participants table; keep them outside the lock
        by_name = index_submissions(submissions, self.resolve_name)

        with self.table.locked() as table:
            prior_rows = sort_prior_week(table.rows_for_week(week - 1))
            existing = {row.name: row for row in table.rows_for_week(week)}

            result = self.derive(week, prior_rows, existing, by_name)

            table.upsert_many(result.rows)
            if result.changed:
                logger.info("Data changed - writing to database for week %s", week)
                self.gateway.flush(table.snapshot())
            else:
                logger.info("No data changes detected for week %s - skipping database write", week)

        return result

    def derive(
        self,
        week: int,
        prior_rows: list[Row],
        existing: Mapping[str, Row],
        submissions: Mapping[str, Assignment],
    ) -> ReconcileResult:
        """Pure part of reconcile: ``prior_rows`` must already be sorted."""
        result = ReconcileResult()
        allocations = self.allocator.allocate(prior_rows, week)

        for prior, allocation in zip(prior_rows, allocations):
            row = prior.model_copy(update={"week": week})
            if allocation is not None:
                row.group_id = allocation.group_id
                row.ta = allocation.ta

            current = existing.get(row.name)
            if current is not None:
                for name in RECORDED_FIELDS:
                    setattr(row, name, getattr(current, name))
            else:
                result.changed = True
                for name, value in default_recorded_fields().items():
                    setattr(row, name, value)

            status = exercise_status(row.name, week, submissions)
            if status is not None:
                submitted, passing = status
                if row.exercise_submitted != submitted or row.exercise_test_passing != passing:
                    logger.debug("exercise status changed for %s in week %s", row.name, week)
                    row.exercise_submitted = submitted
                    row.exercise_test_passing = passing
                    result.changed = True

            result.rows.append(row)

        return result
