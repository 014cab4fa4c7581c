import pytest
from sqlalchemy.exc import OperationalError

from roster.core.errors import PersistenceError
from roster.db.session import SessionLocal
from roster.services.participants import ParticipantDirectory
from roster.services.persistence import PersistenceGateway
from tests.helpers import make_row


def test_flush_replaces_stored_table():
    gateway = PersistenceGateway(SessionLocal)
    gateway.flush([make_row("Ann", 1), make_row("Bob", 1)])

    gateway.flush([make_row("Cid", 2, mail="c@x.com", fa=3, exercise_submitted="yes")])

    (row,) = gateway.load()
    assert (row.name, row.week, row.mail, row.fa, row.exercise_submitted) == ("Cid", 2, "c@x.com", 3, "yes")


def test_load_keeps_insertion_order():
    rows = [make_row("Zed", 0), make_row("Amy", 0), make_row("Kim", 1, attendance=None, total=None)]
    gateway = PersistenceGateway(SessionLocal)

    gateway.flush(rows)

    assert gateway.load() == rows


class BrokenSession:
    def __init__(self):
        self.rolled_back = False
        self.closed = False

    def execute(self, *args, **kwargs):
        raise OperationalError("DELETE FROM weekly_data", {}, Exception("disk I/O error"))

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


def test_flush_failure_is_raised_as_persistence_error():
    session = BrokenSession()
    gateway = PersistenceGateway(lambda: session)

    with pytest.raises(PersistenceError):
        gateway.flush([make_row("Ann", 1)])

    assert session.rolled_back
    assert session.closed


def test_participant_lookup_matches_account_suffix(seed_participants):
    seed_participants([("Ann Lee", "https://github.com/annlee"), ("Bob Ray", "bobray")])
    directory = ParticipantDirectory(SessionLocal)

    assert directory.resolve_name("annlee") == "Ann Lee"
    assert directory.resolve_name("bobray") == "Bob Ray"
    assert directory.resolve_name("nobody") is None
    assert directory.github_username("Bob Ray") == "bobray"
    assert directory.github_username("Nobody") is None
