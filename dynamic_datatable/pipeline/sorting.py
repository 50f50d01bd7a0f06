"""Single-key, stable ordering of records."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional, Sequence, Tuple

from dynamic_datatable.constants import SORT_ASC, SORT_DESC
from dynamic_datatable.schema import get_field, plain_text

_NUMERIC_TYPES = (bool, int, float, Decimal)


@dataclass(frozen=True)
class SortState:
    """Active sort column (None for unsorted) and its direction."""

    column: Optional[str] = None
    direction: str = SORT_ASC

    def __post_init__(self):
        if self.direction not in (SORT_ASC, SORT_DESC):
            raise ValueError(
                f"Sort direction must be '{SORT_ASC}' or '{SORT_DESC}', got {self.direction!r}"
            )

    @property
    def descending(self) -> bool:
        return self.direction == SORT_DESC

    def toggle(self, column: str) -> "SortState":
        """Flip direction on the current column, or sort a new column ascending."""
        if column == self.column:
            return SortState(column, SORT_ASC if self.descending else SORT_DESC)
        return SortState(column, SORT_ASC)


def _is_missing(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return value is None


def _sort_key(value: Any) -> Tuple[int, Any]:
    # numbers < strings < everything else (compared by plain text)
    if isinstance(value, _NUMERIC_TYPES):
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    return (2, plain_text(value))


def apply_sort(records: Sequence[Any], sort: SortState) -> List[Any]:
    """Order records by ``sort.column``.

    Python's sort is stable, also with ``reverse=True``, so records with
    equal keys keep their input order in both directions. Missing values
    (None, NaN, absent field) always come last, in input order.
    """
    if not sort.column:
        return list(records)

    present = []
    missing = []
    for record in records:
        value = get_field(record, sort.column)
        if _is_missing(value):
            missing.append(record)
        else:
            present.append((_sort_key(value), record))

    present.sort(key=lambda pair: pair[0], reverse=sort.descending)
    return [record for _, record in present] + missing
