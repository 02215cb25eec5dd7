"""Textual application previewing the forms of a Catppuccin colorscheme."""
from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header

from .forms import Form
from .logging_utils import get_logger
from .palette import Flavour
from .plugin import SchemeRegistry
from .themes import CUSTOM_THEMES, DEFAULT_THEME_NAME, build_theme

log = get_logger(__name__)

__all__ = ["SchemePreviewApp", "describe_form"]


def describe_form(form: Form) -> tuple[str, str, str]:
    """Return printable ``(fg, bg, attributes)`` cells for *form*."""

    return (
        form.fg or "-",
        form.bg or "-",
        ", ".join(form.attributes()) or "-",
    )


class SchemePreviewApp(App[None]):
    """Show every registered form rendered in its own style."""

    TITLE = "Catppuccin forms"
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "next_scheme", "Next scheme"),
        Binding("p", "previous_scheme", "Previous scheme"),
    ]

    def __init__(
        self,
        schemes: SchemeRegistry,
        *,
        scheme: Optional[str] = None,
        no_background: bool = False,
    ) -> None:
        super().__init__()
        self._schemes = schemes
        self._no_background = no_background
        self._register_custom_themes()
        self._scheme_name = self._resolve_requested_scheme(scheme)

    @property
    def scheme_name(self) -> str:
        return self._scheme_name

    def _register_custom_themes(self) -> None:
        if not self._no_background:
            themes = list(CUSTOM_THEMES.values())
        else:
            themes = [build_theme(flavour, no_background=True) for flavour in Flavour]
        for theme in themes:
            self.register_theme(theme)

    def _resolve_requested_scheme(self, requested: Optional[str]) -> str:
        preferred = requested or DEFAULT_THEME_NAME
        if preferred in self._schemes:
            return preferred
        if requested:
            log.warning(
                "Requested scheme '%s' is unavailable; falling back to %s",
                requested,
                DEFAULT_THEME_NAME,
            )
        return DEFAULT_THEME_NAME

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="forms", zebra_stripes=False, cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#forms", DataTable)
        table.add_columns("Form", "Foreground", "Background", "Attributes")
        self._show_scheme(self._scheme_name)

    def _show_scheme(self, name: str) -> None:
        self._schemes.apply(name)
        self._scheme_name = name
        if self.get_theme(name) is not None:
            log.debug("Applying theme %s", name)
            self.theme = name
        self.sub_title = name
        forms = self._schemes.forms
        table = self.query_one("#forms", DataTable)
        table.clear()
        for form_name, form in forms.items():
            fg, bg, attributes = describe_form(form)
            table.add_row(
                Text(form_name, style=forms.style(form_name)),
                fg,
                bg,
                attributes,
                key=form_name,
            )

    def _cycle(self, step: int) -> None:
        names = self._schemes.names()
        index = names.index(self._scheme_name) if self._scheme_name in names else 0
        self._show_scheme(names[(index + step) % len(names)])

    def action_next_scheme(self) -> None:
        self._cycle(1)

    def action_previous_scheme(self) -> None:
        self._cycle(-1)
