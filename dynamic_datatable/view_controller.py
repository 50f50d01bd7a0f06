"""
View state and orchestration for a dynamic datatable.

The controller owns filter, sort and page state. Every transition reruns the
pipeline (filters -> sorting -> pagination) and publishes a ``ViewResult``
for the presentation layer.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dynamic_datatable.config import (
    get_page_size,
    memoization_enabled,
    schema_validation_enabled,
)
from dynamic_datatable.exceptions import UnknownFilterFieldError
from dynamic_datatable.pipeline import (
    SortState,
    active_filters,
    apply_filters,
    apply_sort,
    paginate,
    total_pages_for,
)
from dynamic_datatable.schema import (
    ActionDef,
    ColumnDef,
    FilterField,
    get_field,
    validate_records,
)
from dynamic_datatable.ui.cell_renderer import CellContext, render_cell
from dynamic_datatable.ui.format_utils import page_summary


@dataclass
class ViewState:
    """Interactive state of one view."""

    filters: Dict[str, str] = field(default_factory=dict)
    sort: SortState = field(default_factory=SortState)
    page: int = 1


@dataclass(frozen=True)
class ViewResult:
    """What the presentation layer draws after a recomputation."""

    rows: List[Any]
    total_filtered: int
    current_page: int
    total_pages: int
    page_size: int
    start_index: int = 0
    end_index: int = 0
    has_previous: bool = False
    has_next: bool = False

    @property
    def summary(self) -> str:
        return page_summary(self.start_index, self.end_index, self.total_filtered)


class ViewController:
    """Filter/sort/paginate controller over an in-memory record sequence."""

    def __init__(
        self,
        records: Sequence[Any],
        columns: Sequence[ColumnDef],
        filter_fields: Sequence[FilterField] = (),
        actions: Optional[Sequence[ActionDef]] = None,
        title: str = "",
        page_size: Optional[int] = None,
    ):
        """Build a view and compute its first page.

        Args:
            records: Rows to present; treated as immutable
            columns: Ordered column definitions
            filter_fields: Ordered filter controls
            actions: Actions rendered into ``actions`` columns
            title: Passed through to the presentation layer
            page_size: Rows per page, defaults to the configured page size

        Raises:
            SchemaConfigurationError: if a column or filter key is missing
                from a record (unless schema validation is disabled)
            ValueError: if ``page_size`` is not positive
        """
        self._records: Tuple[Any, ...] = tuple(records)
        self._columns: Tuple[ColumnDef, ...] = tuple(columns)
        self._filter_fields: Tuple[FilterField, ...] = tuple(filter_fields)
        self._actions: Tuple[ActionDef, ...] = tuple(actions or ())
        self.title = title

        self.page_size = page_size if page_size is not None else get_page_size()
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

        if schema_validation_enabled():
            validate_records(self._records, self._columns, self._filter_fields)

        self._filter_keys = {f.key for f in self._filter_fields}
        self._memoize = memoization_enabled()
        self._cell_context = CellContext.from_config()

        self._state = ViewState()
        self._cache_key = None
        self._cache_rows: List[Any] = []
        self._result = self._recompute()

    # ------------------------------------------------------------------
    # Read-only accessors

    @property
    def columns(self) -> List[ColumnDef]:
        return list(self._columns)

    @property
    def filter_fields(self) -> List[FilterField]:
        return list(self._filter_fields)

    @property
    def actions(self) -> List[ActionDef]:
        return list(self._actions)

    @property
    def filters(self) -> Dict[str, str]:
        return dict(self._state.filters)

    @property
    def sort(self) -> SortState:
        return self._state.sort

    @property
    def current_page(self) -> int:
        return self._state.page

    @property
    def result(self) -> ViewResult:
        return self._result

    def visible_columns(self, mobile: bool = False) -> List[ColumnDef]:
        """Columns to draw; the mobile layout drops ``show_on_mobile=False``."""
        if not mobile:
            return list(self._columns)
        return [col for col in self._columns if col.show_on_mobile]

    # ------------------------------------------------------------------
    # Transitions

    def set_filter(self, key: str, value: Optional[str]) -> ViewResult:
        """Set one filter value and go back to the first page.

        Raises:
            UnknownFilterFieldError: if ``key`` has no filter field
        """
        if key not in self._filter_keys:
            raise UnknownFilterFieldError(key)
        self._state.filters[key] = "" if value is None else str(value)
        self._state.page = 1
        return self._recompute()

    def clear_filters(self) -> ViewResult:
        self._state.filters.clear()
        self._state.page = 1
        return self._recompute()

    def toggle_sort(self, column: str) -> ViewResult:
        """Sort by ``column``; repeating the same column flips direction."""
        self._state.sort = self._state.sort.toggle(column)
        logging.debug(
            f"Datatable sort is now {self._state.sort.column} {self._state.sort.direction}"
        )
        return self._recompute()

    def set_page(self, page: int) -> ViewResult:
        """Move to ``page``, clamped to the available pages."""
        self._state.page = int(page)
        return self._recompute()

    def next_page(self) -> ViewResult:
        return self.set_page(self._state.page + 1)

    def previous_page(self) -> ViewResult:
        return self.set_page(self._state.page - 1)

    # ------------------------------------------------------------------
    # Rendering helpers for the presentation layer

    def render_cell(self, column: ColumnDef, record: Any):
        return render_cell(
            column,
            get_field(record, column.key),
            record,
            self._actions,
            self._cell_context,
        )

    def render_row(self, record: Any, mobile: bool = False) -> List[Tuple[ColumnDef, Any]]:
        """(column, rendered cell) pairs for one record, in column order."""
        return [
            (column, self.render_cell(column, record))
            for column in self.visible_columns(mobile)
        ]

    # ------------------------------------------------------------------

    def _filtered_sorted(self) -> List[Any]:
        key = (
            tuple(active_filters(self._state.filters, self._filter_fields)),
            self._state.sort,
        )
        if self._memoize and key == self._cache_key:
            logging.debug("Reusing cached filtered/sorted datatable rows")
            return self._cache_rows

        rows = apply_filters(self._records, self._state.filters, self._filter_fields)
        rows = apply_sort(rows, self._state.sort)
        self._cache_key = key
        self._cache_rows = rows
        return rows

    def _recompute(self) -> ViewResult:
        rows = self._filtered_sorted()
        total_pages = total_pages_for(len(rows), self.page_size)
        self._state.page = min(max(self._state.page, 1), total_pages)

        page = paginate(rows, self._state.page, self.page_size)
        self._result = ViewResult(
            rows=page.items,
            total_filtered=page.total_items,
            current_page=page.page,
            total_pages=page.total_pages,
            page_size=page.page_size,
            start_index=page.start_index,
            end_index=page.end_index,
            has_previous=page.has_previous,
            has_next=page.has_next,
        )
        logging.debug(
            f"Datatable '{self.title}' page {page.page}/{page.total_pages}, "
            f"{page.total_items} of {len(self._records)} records match"
        )
        return self._result
