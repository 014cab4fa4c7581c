import threading
from contextlib import contextmanager
from typing import Iterable, Iterator

from roster.schemas.row import Row


class RosterTable:
    """The in-memory roster shared by every request.

    Rows are kept in insertion order and are unique per (name, week). All access
    goes through one re-entrant lock, so a caller can hold ``locked()`` across a
    read-derive-commit sequence and still use the ordinary methods inside it.
    Rows handed out are copies; the only ways to change the table are
    ``upsert`` and ``remove``.
    """

    def __init__(self, rows: Iterable[Row] = ()) -> None:
        self._lock = threading.RLock()
        self._rows: list[Row] = []
        for row in rows:
            self.upsert(row)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    @contextmanager
    def locked(self) -> Iterator["RosterTable"]:
        with self._lock:
            yield self

    def _position(self, name: str, week: int) -> int | None:
        for pos, row in enumerate(self._rows):
            if row.name == name and row.week == week:
                return pos
        return None

    def get(self, name: str, week: int) -> Row | None:
        with self._lock:
            pos = self._position(name, week)
            return None if pos is None else self._rows[pos].model_copy()

    def rows_for_week(self, week: int) -> list[Row]:
        with self._lock:
            return [row.model_copy() for row in self._rows if row.week == week]

    def snapshot(self) -> list[Row]:
        with self._lock:
            return [row.model_copy() for row in self._rows]

    def upsert(self, row: Row) -> None:
        """Replace the row with the same (name, week) in place, or append."""
        with self._lock:
            stored = row.model_copy()
            pos = self._position(row.name, row.week)
            if pos is None:
                self._rows.append(stored)
            else:
                self._rows[pos] = stored

    insert_or_update = upsert

    def upsert_many(self, rows: Iterable[Row]) -> None:
        with self._lock:
            for row in rows:
                self.upsert(row)

    def remove(self, name: str, mail: str | None, week: int) -> bool:
        with self._lock:
            for pos, row in enumerate(self._rows):
                if row.name == name and row.mail == mail and row.week == week:
                    del self._rows[pos]
                    return True
            return False
