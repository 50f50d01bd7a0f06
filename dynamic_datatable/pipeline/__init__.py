"""
Pure data pipeline behind a datatable view.

Records flow filters -> sorting -> pagination; each stage is a plain
function over in-memory sequences with no side effects.
"""

from dynamic_datatable.pipeline.filters import active_filters, apply_filters
from dynamic_datatable.pipeline.pagination import Page, paginate, total_pages_for
from dynamic_datatable.pipeline.sorting import SortState, apply_sort

__all__ = [
    "active_filters",
    "apply_filters",
    "apply_sort",
    "SortState",
    "Page",
    "paginate",
    "total_pages_for",
]
