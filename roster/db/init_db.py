from roster.db.base_class import Base
from roster.db.session import engine

# import models so SQLAlchemy registers them
from roster.models import participant, weekly_row  # noqa: F401


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
