import logging
from typing import Iterable

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from roster.core.errors import PersistenceError
from roster.models.weekly_row import WeeklyRow
from roster.schemas.row import Row

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """Mirrors the whole in-memory table into the ``weekly_data`` table."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def flush(self, rows: Iterable[Row]) -> None:
        """Replace the stored table with ``rows`` in one transaction."""
        db: Session = self.session_factory()
        try:
            db.execute(delete(WeeklyRow))
            db.add_all(WeeklyRow(**row.model_dump()) for row in rows)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("writing roster to storage failed")
            raise PersistenceError() from exc
        finally:
            db.close()

    def load(self) -> list[Row]:
        db: Session = self.session_factory()
        try:
            stored = db.execute(select(WeeklyRow).order_by(WeeklyRow.id)).scalars().all()
            return [Row.model_validate(r) for r in stored]
        except SQLAlchemyError as exc:
            logger.exception("reading roster from storage failed")
            raise PersistenceError("Could not read roster from storage") from exc
        finally:
            db.close()
