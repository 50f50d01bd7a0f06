"""Desktop table layout for a datatable view."""

from __future__ import annotations

from dynamic_datatable.ui.view_base import BaseView, PagerFooterMixin
from dynamic_datatable.ui.theme import TABLE_TITLE_STYLE, WARNING_STYLE
from dynamic_datatable.ui.styles import column_justify, header_label, header_style


class DatatableView(BaseView, PagerFooterMixin):
    def render(self, controller):
        """
        Render the current page as a table.

        Every column is shown; the active sort column gets an arrow in its
        header. The footer shows the entry range and page indicator.
        """
        from dynamic_datatable.ui.table_formatter import display_table

        result = controller.result
        columns = controller.visible_columns()
        sort = controller.sort

        # positional keys, column keys are not required to be unique
        keys = [f"col_{i}" for i in range(len(columns))]
        headers = [
            header_label(col.header, col.key, sort.column, sort.direction)
            for col in columns
        ]

        rows = []
        for record in result.rows:
            cells = controller.render_row(record)
            rows.append({key: cell for key, (_, cell) in zip(keys, cells)})

        alignments = {}
        for header, col in zip(headers, columns):
            justify = column_justify(col.type)
            if justify:
                alignments[header] = justify

        display_table(
            console=self.console,
            data=rows,
            columns=keys,
            headers=headers,
            title=controller.title or None,
            column_alignments=alignments,
            header_styles={
                key: header_style(col.key, sort.column)
                for key, col in zip(keys, columns)
            },
            title_style=TABLE_TITLE_STYLE,
            show_lines=False,
        )

        if not result.rows:
            self.console.print(
                f"[{WARNING_STYLE}]No matching entries.[/{WARNING_STYLE}]"
            )

        self._render_footer(controller)


# auto-register
from dynamic_datatable.ui import view_registry  # noqa: E402

view_registry.register_view("table", DatatableView)
view_registry.register_view("desktop", DatatableView)
