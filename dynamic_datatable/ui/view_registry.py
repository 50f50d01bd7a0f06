"""Global registry for mapping layout names to View classes."""

from __future__ import annotations

from typing import Dict, Type

from dynamic_datatable.ui.view_base import BaseView

_VIEW_REGISTRY: Dict[str, Type[BaseView]] = {}


def register_view(layout_name: str, view_cls: Type[BaseView]):
    """Register or overwrite the View class for a layout name."""
    # Overwrite silently; caller may warn if desired.
    _VIEW_REGISTRY[layout_name] = view_cls


def get_view(layout_name: str) -> Type[BaseView] | None:
    return _VIEW_REGISTRY.get(layout_name)


def registered_layouts() -> list[str]:
    return sorted(_VIEW_REGISTRY)
