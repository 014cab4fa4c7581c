from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from roster.models.participant import Participant


class ParticipantDirectory:
    """Name <-> GitHub account lookups against the ``participants`` table."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def resolve_name(self, github_username: str) -> str | None:
        # stored accounts may be full profile URLs, so match on the suffix
        stmt = (
            select(Participant.name)
            .where(Participant.github.like(f"%{github_username}"))
            .order_by(Participant.id)
            .limit(1)
        )
        db: Session = self.session_factory()
        try:
            return db.execute(stmt).scalar_one_or_none()
        finally:
            db.close()

    def github_username(self, name: str) -> str | None:
        stmt = (
            select(Participant.github)
            .where(Participant.name.like(f"%{name}"))
            .order_by(Participant.id)
            .limit(1)
        )
        db: Session = self.session_factory()
        try:
            return db.execute(stmt).scalar_one_or_none()
        finally:
            db.close()
