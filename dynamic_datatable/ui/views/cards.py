"""Mobile card layout: one panel per record."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dynamic_datatable.ui.table_formatter import to_cell
from dynamic_datatable.ui.view_base import BaseView, PagerFooterMixin
from dynamic_datatable.ui.theme import CARD_BORDER, TABLE_TITLE_STYLE, WARNING_STYLE


class CardListView(BaseView, PagerFooterMixin):
    def render(self, controller):
        result = controller.result

        if controller.title:
            self.console.print(Text(controller.title, style=TABLE_TITLE_STYLE))

        if not result.rows:
            self.console.print(
                f"[{WARNING_STYLE}]No matching entries.[/{WARNING_STYLE}]"
            )

        for record in result.rows:
            grid = Table.grid(padding=(0, 1), expand=True)
            grid.add_column(style="bold", no_wrap=True)
            grid.add_column(justify="right")
            # only columns flagged show_on_mobile make it onto a card
            for column, cell in controller.render_row(record, mobile=True):
                grid.add_row(Text(f"{column.header}:"), to_cell(cell))
            self.console.print(Panel(grid, border_style=CARD_BORDER))

        self._render_footer(controller)


from dynamic_datatable.ui import view_registry  # noqa: E402

view_registry.register_view("cards", CardListView)
view_registry.register_view("mobile", CardListView)
