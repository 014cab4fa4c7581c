"""Deterministic group and teaching-assistant assignment for a week's roster."""

import enum
import math
from dataclasses import dataclass
from typing import Sequence

from roster.core import config
from roster.schemas.row import Row


class TA(enum.Enum):
    ANMOL = "anmol"
    BHAVYA = "bhavya"
    DEVANSH = "devansh"
    KAVYA = "kavya"
    RISHI = "rishi"
    SETU = "setu"  # takes every absent student, never in the rotation

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    TA.ANMOL: "Anmol",
    TA.BHAVYA: "Bhavya",
    TA.DEVANSH: "Devansh",
    TA.KAVYA: "Kavya",
    TA.RISHI: "Rishi",
    TA.SETU: "Setu",
}


def ta_pool(reserved: TA = TA.SETU) -> list[TA]:
    return [ta for ta in TA if ta is not reserved]


@dataclass(frozen=True)
class Allocation:
    group_id: str
    ta: str


def _total_rank(total: float | None) -> tuple[bool, float]:
    # NaN has no order against numbers; rank it with unrecorded totals so the
    # name decides between them
    if total is None or math.isnan(total):
        return (False, 0.0)
    return (True, total)


def sort_prior_week(rows: Sequence[Row]) -> list[Row]:
    """
    Order last week's rows for allocation:
    - attendance descending ("yes" before "no" before unrecorded)
    - total descending, unrecorded or NaN last
    - name descending
    """

    def key(row: Row):
        return (
            (row.attendance is not None, row.attendance or ""),
            _total_rank(row.total),
            row.name,
        )

    return sorted(rows, key=key, reverse=True)


class Allocator:
    def __init__(
        self,
        group_size: int = config.GROUP_SIZE,
        grouped_rows_limit: int = config.GROUPED_ROWS_LIMIT,
        absent_group: str = config.ABSENT_GROUP_LABEL,
        absent_ta: TA = TA.SETU,
    ):
        if group_size < 1:
            raise ValueError("group_size must be at least 1")
        self.group_size = group_size
        self.grouped_rows_limit = grouped_rows_limit
        self.absent_group = absent_group
        self.absent_ta = absent_ta
        self.pool = ta_pool(absent_ta)

    def allocate(self, rows: Sequence[Row], week: int) -> list[Allocation | None]:
        """
        One entry per row, in order. Present students fill groups of
        ``group_size`` up to ``grouped_rows_limit`` positions, then get a group
        each; the TA for a group shifts by one every week. Absent students all
        go to the absent group. Unrecorded attendance yields None.
        """
        allocations: list[Allocation | None] = []
        group_counter = -1
        pool_size = len(self.pool)

        for index, row in enumerate(rows):
            if row.attendance == "no":
                allocations.append(Allocation(self.absent_group, self.absent_ta.display_name))
            elif row.attendance == "yes":
                if index >= self.grouped_rows_limit or index % self.group_size == 0:
                    group_counter += 1
                # a present row ahead of the first group opening lands in the first slot
                slot = max(group_counter, 0) % pool_size
                ta = self.pool[(slot + week - 1) % pool_size]
                allocations.append(Allocation(f"Group {slot + 1}", ta.display_name))
            else:
                allocations.append(None)

        return allocations
