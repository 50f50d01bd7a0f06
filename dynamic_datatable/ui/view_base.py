"""Minimal base classes for the datatable presentation layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rich.console import Console

from dynamic_datatable.ui.theme import MUTED_STYLE

if TYPE_CHECKING:
    from dynamic_datatable.view_controller import ViewController

__all__ = ["BaseView", "PagerFooterMixin"]


class BaseView(ABC):
    """Abstract base class for all views."""

    def __init__(self, console: Console):
        self.console = console

    @abstractmethod
    def render(self, controller: "ViewController"):
        """Draw the controller's current page to the console."""
        raise NotImplementedError


class PagerFooterMixin:
    """Mixin that prints the 'Showing X to Y' line and the page indicator."""

    console: Console

    def _render_footer(self, controller: "ViewController"):
        result = controller.result
        prev_hint = "◀" if result.has_previous else " "
        next_hint = "▶" if result.has_next else " "
        self.console.print(f"[{MUTED_STYLE}]{result.summary}[/{MUTED_STYLE}]")
        self.console.print(
            f"{prev_hint} Page {result.current_page} of {result.total_pages} {next_hint}"
        )
