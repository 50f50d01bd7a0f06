"""
View modules for drawing a datatable.

Each view module contains a View class that implements the BaseView interface
and registers itself with the view_registry under one or more layout names.
"""

# Import all view modules to ensure they register with the view registry
from . import datatable  # noqa: F401
from . import cards  # noqa: F401
from . import filters  # noqa: F401
