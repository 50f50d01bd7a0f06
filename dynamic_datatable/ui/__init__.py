# convenience imports in ui namespace
from . import format_utils  # noqa: F401
from . import styles  # noqa: F401

# Import views to register them with the view_registry
import dynamic_datatable.ui.views.datatable  # noqa: F401
import dynamic_datatable.ui.views.cards  # noqa: F401
import dynamic_datatable.ui.views.filters  # noqa: F401
