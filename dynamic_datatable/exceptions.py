"""Exceptions raised at the datatable API boundary."""


class DatatableError(Exception):
    """Base class for datatable errors."""


class SchemaConfigurationError(DatatableError):
    """Column or filter schema does not match the supplied records."""


class UnknownFilterFieldError(DatatableError):
    """A filter value was set for a key that has no filter field."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No filter field defined for key '{key}'")
