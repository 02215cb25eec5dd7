"""Plugin entry point that adds the four Catppuccin colorschemes.

Plugging :class:`Catppuccin` into a :class:`SchemeRegistry` adds:

* ``catppuccin-latte``
* ``catppuccin-frappe``
* ``catppuccin-macchiato``
* ``catppuccin-mocha``

The palette of the active scheme can be used to modify other forms, and the
``Default`` background can be turned off, for example to keep a transparent
terminal::

    plugin = Catppuccin().with_no_background().modify(
        lambda colors: forms.set("punctuation.delimiter", colors.red)
    )
    plugin.plug(schemes)
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Protocol

from .forms import FormRegistry
from .logging_utils import get_logger
from .palette import Flavour
from .scheme import ColorScheme, Modifications, no_modifications

__all__ = [
    "SCHEME_NAMES",
    "Catppuccin",
    "SchemeLike",
    "SchemeRegistry",
    "UnknownSchemeError",
    "plug",
]

log = get_logger(__name__)

SCHEME_NAMES: tuple[str, ...] = tuple(flavour.scheme_name for flavour in Flavour)


class SchemeLike(Protocol):
    def name(self) -> str: ...

    def apply(self) -> object: ...


class UnknownSchemeError(KeyError):
    """Raised when a colorscheme name has not been registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.available = available

    def __str__(self) -> str:
        choices = ", ".join(self.available) or "none"
        return f"Unknown colorscheme: {self.name}. Available: {choices}"


class SchemeRegistry:
    """Colorschemes known to the host, keyed by name."""

    def __init__(self, forms: Optional[FormRegistry] = None) -> None:
        self.forms = forms if forms is not None else FormRegistry()
        self._schemes: dict[str, SchemeLike] = {}
        self.active: Optional[str] = None

    def add_colorscheme(self, scheme: SchemeLike) -> None:
        name = scheme.name()
        if name in self._schemes:
            log.debug("Replacing colorscheme %s", name)
        self._schemes[name] = scheme
        log.debug("Added colorscheme %s", name)

    def names(self) -> list[str]:
        return list(self._schemes)

    def get(self, name: str) -> SchemeLike:
        try:
            return self._schemes[name]
        except KeyError:
            raise UnknownSchemeError(name, self.names()) from None

    def apply(self, name: str) -> object:
        """Apply the scheme called *name* and mark it as active."""

        scheme = self.get(name)
        result = scheme.apply()
        self.active = name
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._schemes

    def __len__(self) -> int:
        return len(self._schemes)


@dataclass(frozen=True)
class Catppuccin:
    """Options shared by every Catppuccin flavour."""

    no_background: bool = False
    modifications: Modifications = no_modifications

    def with_no_background(self) -> "Catppuccin":
        """Disable the ``Default`` background, e.g. for transparent terminals."""

        return replace(self, no_background=True)

    def modify(self, modifications: Modifications) -> "Catppuccin":
        """Run *modifications* with the active palette after the base forms.

        For red delimiters::

            Catppuccin().modify(
                lambda colors: forms.set("punctuation.delimiter", colors.red)
            )
        """

        return replace(self, modifications=modifications)

    def schemes(self, forms: FormRegistry) -> list[ColorScheme]:
        """Return the four colorschemes, Latte first."""

        return [
            ColorScheme.latte(forms, self.modifications).no_bg(self.no_background),
            ColorScheme.frappe(forms, self.modifications).no_bg(self.no_background),
            ColorScheme.macchiato(forms, self.modifications).no_bg(self.no_background),
            ColorScheme.mocha(forms, self.modifications).no_bg(self.no_background),
        ]

    def plug(self, registry: SchemeRegistry) -> None:
        """Add the Latte, Frappe, Macchiato and Mocha colorschemes to *registry*."""

        for scheme in self.schemes(registry.forms):
            registry.add_colorscheme(scheme)
        log.info(
            "Added %d Catppuccin colorschemes (no_background=%s)",
            len(SCHEME_NAMES),
            self.no_background,
        )


def plug(registry: SchemeRegistry, options: Optional[Catppuccin] = None) -> None:
    """Plug the Catppuccin colorschemes into *registry* using *options*."""

    (options or Catppuccin()).plug(registry)
