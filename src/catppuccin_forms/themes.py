"""Textual theme definitions for the Catppuccin flavours."""
from __future__ import annotations

from typing import Mapping

from textual.theme import Theme

from .palette import Flavour, lookup

__all__ = [
    "CUSTOM_THEMES",
    "DEFAULT_THEME_NAME",
    "build_theme",
]

# Textual colour that leaves the terminal's own background visible.
_TERMINAL_BACKGROUND = "ansi_default"


def build_theme(flavour: Flavour, no_background: bool = False) -> Theme:
    """Return a Textual theme named after the flavour's colorscheme."""

    c = lookup(flavour)
    return Theme(
        flavour.scheme_name,
        primary=c.blue,
        secondary=c.mauve,
        warning=c.yellow,
        error=c.red,
        success=c.green,
        accent=c.peach,
        foreground=c.text,
        background=_TERMINAL_BACKGROUND if no_background else c.base,
        surface=c.surface0,
        panel=c.mantle,
        boost=c.surface1,
        dark=flavour is not Flavour.LATTE,
    )


CUSTOM_THEMES: Mapping[str, Theme] = {
    flavour.scheme_name: build_theme(flavour) for flavour in Flavour
}
"""Themes bundled with the package keyed by their names."""

DEFAULT_THEME_NAME = Flavour.default().scheme_name
"""Default theme to apply when none is specified explicitly."""
