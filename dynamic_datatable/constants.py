"""Application-wide constants."""

# Rows per page when neither the caller nor the config says otherwise
DEFAULT_PAGE_SIZE = 10

# Column type tags understood by the default cell renderers.
# Unknown tags are accepted and rendered as plain text.
COLUMN_TYPES = (
    "text",
    "number",
    "money",
    "badge",
    "icon",
    "image",
    "actions",
)

# Filter control kinds. All of them filter by case-insensitive substring.
FILTER_TYPES = ("text", "number", "select")

SORT_ASC = "asc"
SORT_DESC = "desc"

# Field every record must carry
ID_FIELD = "id"
