"""Case-insensitive substring filtering over record fields."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from dynamic_datatable.schema import FilterField, get_field, plain_text


def active_filters(
    filters: Optional[Dict[str, str]], fields: Sequence[FilterField]
) -> List[Tuple[str, str]]:
    """Return (key, lowercased needle) for every filter field with a value.

    Order follows the filter field declarations. Keys in ``filters`` that
    have no filter field are ignored.
    """
    if not filters:
        return []
    active = []
    for f in fields:
        value = filters.get(f.key)
        if value:
            active.append((f.key, str(value).lower()))
    return active


def apply_filters(
    records: Sequence[Any],
    filters: Optional[Dict[str, str]],
    fields: Sequence[FilterField],
) -> List[Any]:
    """Keep the records matching every active filter, in input order.

    Every filter type (text, number, select) matches when the record's value,
    stringified and lowercased, contains the filter value lowercased. Missing
    fields stringify to the empty string.
    """
    predicates = active_filters(filters, fields)
    if not predicates:
        return list(records)

    return [
        record
        for record in records
        if all(
            needle in plain_text(get_field(record, key)).lower()
            for key, needle in predicates
        )
    ]
