"""View listing the filter controls and their current values."""

from __future__ import annotations

from dynamic_datatable.ui.view_base import BaseView
from dynamic_datatable.ui.theme import TABLE_TITLE_STYLE, WARNING_STYLE


class FilterPanelView(BaseView):
    columns = ["label", "type", "value", "choices"]
    headers = ["Filter", "Type", "Value", "Choices"]

    def render(self, controller):
        from dynamic_datatable.ui.table_formatter import display_table

        fields = controller.filter_fields
        current = controller.filters

        if not fields:
            self.console.print(
                f"[{WARNING_STYLE}]No filters available.[/{WARNING_STYLE}]"
            )
            return

        rows = []
        for field in fields:
            rows.append(
                {
                    "label": field.label,
                    "type": field.type,
                    "value": current.get(field.key, ""),
                    # a select without options simply offers nothing
                    "choices": ", ".join(field.choices) if field.type == "select" else "",
                }
            )

        style_map = {"value": lambda v: "bold green" if v else "dim"}

        display_table(
            console=self.console,
            data=rows,
            columns=self.columns,
            headers=self.headers,
            title="Filters",
            style_map=style_map,
            title_style=TABLE_TITLE_STYLE,
            show_lines=False,
        )


from dynamic_datatable.ui import view_registry  # noqa: E402

view_registry.register_view("filters", FilterPanelView)
