from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from roster.db.base_class import Base


class Participant(Base):
    __tablename__ = "participants"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # full account reference, e.g. "https://github.com/octocat" or "octocat"
    github: Mapped[str | None] = mapped_column(String(255))
