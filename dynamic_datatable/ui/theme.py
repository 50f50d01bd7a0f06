"""Rich style names shared by the datatable views."""

TABLE_TITLE_STYLE = "bold cyan"
HEADER_STYLE = "bold"
ACTIVE_SORT_HEADER_STYLE = "bold magenta"
WARNING_STYLE = "yellow"
MUTED_STYLE = "dim"
BADGE_STYLE = "black on grey70"
ACTION_STYLE = "bold blue"
LINK_STYLE = "underline cyan"
CARD_BORDER = "grey50"

SORT_ASC_INDICATOR = "▲"
SORT_DESC_INDICATOR = "▼"
