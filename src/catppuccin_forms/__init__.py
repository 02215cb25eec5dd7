"""Catppuccin colorschemes for a form-based terminal editor."""
from __future__ import annotations

from .forms import Form, FormRegistry
from .palette import FRAPPE, LATTE, MACCHIATO, MOCHA, PALETTES, Flavour, Palette, lookup
from .plugin import SCHEME_NAMES, Catppuccin, SchemeRegistry, UnknownSchemeError, plug
from .scheme import ColorScheme, SchemeConfig, build_forms, resolve_and_register

__version__ = "0.1.0"

__all__ = [
    "FRAPPE",
    "LATTE",
    "MACCHIATO",
    "MOCHA",
    "PALETTES",
    "SCHEME_NAMES",
    "Catppuccin",
    "ColorScheme",
    "Flavour",
    "Form",
    "FormRegistry",
    "Palette",
    "SchemeConfig",
    "SchemeRegistry",
    "UnknownSchemeError",
    "__version__",
    "build_forms",
    "lookup",
    "plug",
    "resolve_and_register",
]
