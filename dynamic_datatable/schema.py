"""
Schema definitions for dynamic datatables.

Columns, filter fields and actions are plain data. Records may be mappings or
arbitrary objects; field access goes through ``get_field`` so both work.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from dynamic_datatable.constants import FILTER_TYPES, ID_FIELD
from dynamic_datatable.exceptions import SchemaConfigurationError


def has_field(record: Any, key: str) -> bool:
    """Return True if the record structurally carries ``key``."""
    if isinstance(record, Mapping):
        return key in record
    return hasattr(record, key)


def get_field(record: Any, key: str) -> Any:
    """Read ``key`` from a record, returning None when it is absent."""
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def plain_text(value: Any, placeholder: str = "") -> str:
    """Return the plain string form of a cell value.

    • None            → ``placeholder``
    • True / False    → "true" / "false"
    • 4.0             → "4"   (integral floats drop their fraction)
    Everything else goes through ``str``.
    """
    if value is None:
        return placeholder
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ColumnDef:
    """One displayed column."""

    key: str
    header: str
    type: str = "text"
    format_fn: Optional[Callable[[Any], Any]] = None
    show_on_mobile: bool = True

    @property
    def reads_record(self) -> bool:
        # actions columns render controls, their key is never looked up
        return self.type != "actions"


@dataclass
class FilterField:
    """One user-adjustable filter control."""

    key: str
    label: str
    type: str = "text"
    options: Optional[List[str]] = None

    def __post_init__(self):
        if self.type not in FILTER_TYPES:
            raise SchemaConfigurationError(
                f"Filter field '{self.key}' has unknown type '{self.type}'. "
                f"Expected one of: {', '.join(FILTER_TYPES)}"
            )
        if self.type != "select" and self.options is not None:
            logging.warning(
                f"Ignoring options on non-select filter field '{self.key}'"
            )
            self.options = None
        elif self.options is not None:
            self.options = [str(option) for option in self.options]

    @property
    def choices(self) -> List[str]:
        """Options offered by a select control (empty when none were given)."""
        return list(self.options or [])


@dataclass
class ActionDef:
    """A per-row action rendered into ``actions`` columns."""

    label: str
    on_click: Callable[[Any], None] = field(repr=False)


def validate_records(
    records: Sequence[Any],
    columns: Sequence[ColumnDef],
    filter_fields: Sequence[FilterField],
) -> None:
    """Check that every record carries an id and every schema key.

    Raises:
        SchemaConfigurationError: on the first record that violates the schema
    """
    keys = [col.key for col in columns if col.reads_record]
    keys.extend(f.key for f in filter_fields)
    # dedupe, keep declaration order for stable error messages
    keys = list(dict.fromkeys(keys))

    seen_ids = set()
    for index, record in enumerate(records):
        if not has_field(record, ID_FIELD):
            raise SchemaConfigurationError(
                f"Record at position {index} has no '{ID_FIELD}' field"
            )
        record_id = get_field(record, ID_FIELD)
        for key in keys:
            if not has_field(record, key):
                raise SchemaConfigurationError(
                    f"Key '{key}' is not present on record with id {record_id!r}"
                )
        try:
            if record_id in seen_ids:
                logging.warning(f"Duplicate record id {record_id!r} in datatable input")
            seen_ids.add(record_id)
        except TypeError:
            logging.warning(f"Unhashable record id {record_id!r} in datatable input")
