"""Resolve a Catppuccin flavour into registered forms."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from .forms import Form, FormRegistry
from .logging_utils import get_logger
from .palette import Flavour, Palette, lookup

__all__ = [
    "ColorScheme",
    "Modifications",
    "SchemeConfig",
    "build_forms",
    "no_modifications",
    "resolve_and_register",
]

log = get_logger(__name__)

Modifications = Callable[[Palette], object]
"""Callback run with the active palette once the base forms are registered."""


def no_modifications(palette: Palette) -> None:
    """Default callback that leaves the base forms untouched."""


@dataclass(frozen=True, slots=True)
class SchemeConfig:
    """Options for resolving one flavour."""

    flavour: Flavour = Flavour.MOCHA
    no_background: bool = False
    modifications: Modifications = no_modifications


def _default_form(c: Palette, no_background: bool) -> Form:
    if no_background:
        return Form.with_(c.text)
    return Form.with_(c.text).on(c.base)


def build_forms(c: Palette, no_background: bool = False) -> list[tuple[str, Form]]:
    """Return every base form for palette *c*, in registration order.

    ``no_background`` only drops the background of ``Default``; ``Frame``
    keeps its own background.
    """

    return [
        ("Default", _default_form(c, no_background)),
        # Base editor forms
        ("DefaultOk", Form.with_(c.sapphire)),
        ("AccentOk", Form.with_(c.sky).bolded()),
        ("DefaultErr", Form.with_(c.maroon)),
        ("AccentErr", Form.with_(c.red).bolded()),
        ("DefaultHint", Form.with_(c.text)),
        ("AccentHint", Form.with_(c.subtext0).bolded()),
        ("MainCursor", Form.reverse_video()),
        ("ExtraCursor", Form.reverse_video()),
        ("MainSelection", Form.with_(c.base).on(c.overlay1)),
        ("ExtraSelection", Form.with_(c.base).on(c.overlay0)),
        ("Inactive", Form.with_(c.overlay2)),
        # Gutter and status line
        ("LineNum", Form.with_(c.overlay2)),
        ("MainLineNum", Form.with_(c.yellow)),
        ("WrappedLineNum", Form.with_(c.teal)),
        ("File", Form.with_(c.yellow)),
        ("Selections", Form.with_(c.blue)),
        ("Coord", Form.with_(c.peach)),
        ("Separator", Form.with_(c.teal)),
        ("Mode", Form.with_(c.green)),
        # Syntax highlighting
        ("type", Form.with_(c.yellow).italicized()),
        ("type.builtin", Form.with_(c.yellow).reset_attrs()),
        ("function", Form.with_(c.blue).reset_attrs()),
        ("comment", Form.with_(c.overlay1)),
        ("comment.documentation", Form.with_(c.overlay1).bolded()),
        ("punctuation.bracket", Form.with_(c.subtext0)),
        ("punctuation.delimiter", Form.with_(c.subtext0)),
        ("constant", Form.with_(c.overlay1)),
        ("constant.builtin", Form.with_(c.peach)),
        ("character", Form.with_(c.peach)),
        ("number", Form.with_(c.peach)),
        ("variable.parameter", Form.italic_only()),
        ("variable.builtin", Form.with_(c.peach)),
        ("label", Form.with_(c.green)),
        ("keyword", Form.with_(c.mauve)),
        ("string", Form.with_(c.green)),
        ("escape", Form.with_(c.peach)),
        ("attribute", Form.with_(c.mauve)),
        ("operator", Form.with_(c.sapphire)),
        ("constructor", Form.with_(c.peach)),
        ("module", Form.with_(c.blue).italicized()),
        # Markup
        ("markup", Form.new()),
        ("markup.strong", Form.with_(c.maroon).bolded()),
        ("markup.italic", Form.with_(c.maroon).italicized()),
        ("markup.strikethrough", Form.new().crossed()),
        ("markup.underline", Form.underlined_only()),
        ("markup.heading", Form.with_(c.blue).bolded()),
        ("markup.math", Form.with_(c.yellow)),
        ("markup.quote", Form.with_(c.maroon).bolded()),
        ("markup.environment", Form.with_(c.pink)),
        ("markup.environment.name", Form.with_(c.blue)),
        ("markup.link", Form.with_(c.lavender).underlined()),
        ("markup.raw", Form.with_(c.teal)),
        ("markup.list", Form.with_(c.yellow)),
        ("markup.list.checked", Form.with_(c.green)),
        ("markup.list.unchecked", Form.with_(c.overlay1)),
        # Plugin and UI chrome
        ("VertRule", Form.with_(c.subtext0)),
        ("Frame", Form.with_(c.subtext0).on(c.base)),
    ]


def resolve_and_register(
    registry: FormRegistry,
    flavour: Flavour = Flavour.MOCHA,
    no_background: bool = False,
    modifications: Optional[Modifications] = None,
) -> Palette:
    """Register the forms of *flavour* in *registry* and run *modifications*.

    The callback runs exactly once, after every base form is registered, so
    anything it sets replaces the base definition. Errors raised by the
    registry or the callback propagate to the caller.
    """

    palette = lookup(flavour)
    default, *rest = build_forms(palette, no_background)
    registry.set(*default)
    registry.set_many(rest)
    log.debug(
        "Registered %d base forms for %s (no_background=%s)",
        len(rest) + 1,
        flavour.scheme_name,
        no_background,
    )
    (modifications or no_modifications)(palette)
    return palette


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """One Catppuccin flavour, as exposed to the scheme registry."""

    forms: FormRegistry
    config: SchemeConfig

    def name(self) -> str:
        return self.config.flavour.scheme_name

    def apply(self) -> Palette:
        log.info("Applying colorscheme %s", self.name())
        return resolve_and_register(
            self.forms,
            self.config.flavour,
            self.config.no_background,
            self.config.modifications,
        )

    def no_bg(self, no_background: bool) -> "ColorScheme":
        """Return a copy with the ``Default`` background toggled off or on."""

        return replace(self, config=replace(self.config, no_background=no_background))

    @classmethod
    def for_flavour(
        cls,
        flavour: Flavour,
        forms: FormRegistry,
        modifications: Modifications = no_modifications,
    ) -> "ColorScheme":
        return cls(forms, SchemeConfig(flavour=flavour, modifications=modifications))

    @classmethod
    def latte(cls, forms: FormRegistry, modifications: Modifications = no_modifications) -> "ColorScheme":
        """Return the scheme in the Latte flavour."""

        return cls.for_flavour(Flavour.LATTE, forms, modifications)

    @classmethod
    def frappe(cls, forms: FormRegistry, modifications: Modifications = no_modifications) -> "ColorScheme":
        """Return the scheme in the Frappe flavour."""

        return cls.for_flavour(Flavour.FRAPPE, forms, modifications)

    @classmethod
    def macchiato(cls, forms: FormRegistry, modifications: Modifications = no_modifications) -> "ColorScheme":
        """Return the scheme in the Macchiato flavour."""

        return cls.for_flavour(Flavour.MACCHIATO, forms, modifications)

    @classmethod
    def mocha(cls, forms: FormRegistry, modifications: Modifications = no_modifications) -> "ColorScheme":
        """Return the scheme in the Mocha flavour."""

        return cls.for_flavour(Flavour.MOCHA, forms, modifications)
