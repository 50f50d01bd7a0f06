"""Filter, sort and paginate in-memory records behind a declarative column schema."""

from dynamic_datatable.exceptions import (
    DatatableError,
    SchemaConfigurationError,
    UnknownFilterFieldError,
)
from dynamic_datatable.schema import ActionDef, ColumnDef, FilterField
from dynamic_datatable.view_controller import ViewController, ViewResult, ViewState

__all__ = [
    "ActionDef",
    "ColumnDef",
    "FilterField",
    "ViewController",
    "ViewResult",
    "ViewState",
    "DatatableError",
    "SchemaConfigurationError",
    "UnknownFilterFieldError",
]
