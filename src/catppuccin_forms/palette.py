"""Catppuccin palette definitions for each flavour."""
from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, fields
from types import MappingProxyType
from typing import Mapping, assert_never

__all__ = [
    "FRAPPE",
    "LATTE",
    "MACCHIATO",
    "MOCHA",
    "PALETTES",
    "Flavour",
    "Palette",
    "lookup",
]

_SCHEME_PREFIX = "catppuccin-"


class Flavour(enum.Enum):
    """The four Catppuccin flavours, from lightest to darkest."""

    LATTE = "latte"
    FRAPPE = "frappe"
    MACCHIATO = "macchiato"
    MOCHA = "mocha"

    @classmethod
    def default(cls) -> "Flavour":
        return cls.MOCHA

    @property
    def scheme_name(self) -> str:
        """Name under which the flavour's colorscheme is exposed to the host."""

        return f"{_SCHEME_PREFIX}{self.value}"

    @classmethod
    def from_name(cls, name: str) -> "Flavour":
        """Return the flavour matching *name*.

        Both bare flavour names (``"mocha"``) and scheme names
        (``"catppuccin-mocha"``) are accepted, case-insensitively.
        """

        normalized = name.strip().lower()
        if normalized.startswith(_SCHEME_PREFIX):
            normalized = normalized[len(_SCHEME_PREFIX):]
        for flavour in cls:
            if flavour.value == normalized:
                return flavour
        choices = ", ".join(flavour.value for flavour in cls)
        raise ValueError(f"Unknown Catppuccin flavour {name!r} (expected one of: {choices})")


@dataclass(frozen=True, slots=True)
class Palette:
    """The 26 named colours of one Catppuccin flavour."""

    rosewater: str
    flamingo: str
    pink: str
    mauve: str
    red: str
    maroon: str
    peach: str
    yellow: str
    green: str
    teal: str
    sky: str
    sapphire: str
    blue: str
    lavender: str
    text: str
    subtext1: str
    subtext0: str
    overlay2: str
    overlay1: str
    overlay0: str
    surface2: str
    surface1: str
    surface0: str
    base: str
    mantle: str
    crust: str

    @classmethod
    def slot_names(cls) -> tuple[str, ...]:
        return tuple(field.name for field in fields(cls))

    def get(self, slot: str) -> str:
        """Return the colour stored in *slot*, raising :class:`KeyError` if unknown."""

        if slot not in self.slot_names():
            raise KeyError(f"Unknown palette slot: {slot}")
        return getattr(self, slot)

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


LATTE = Palette(
    rosewater="#dc8a78",
    flamingo="#dd7878",
    pink="#ea76cb",
    mauve="#8839ef",
    red="#d20f39",
    maroon="#e64553",
    peach="#fe640b",
    yellow="#df8e1d",
    green="#40a02b",
    teal="#179299",
    sky="#04a5e5",
    sapphire="#209fb5",
    blue="#1e66f5",
    lavender="#7287fd",
    text="#4c4f69",
    subtext1="#5c5f77",
    subtext0="#6c6f85",
    overlay2="#7c7f93",
    overlay1="#8c8fa1",
    overlay0="#9ca0b0",
    surface2="#acb0be",
    surface1="#bcc0cc",
    surface0="#ccd0da",
    base="#eff1f5",
    mantle="#e6e9ef",
    crust="#dce0e8",
)

FRAPPE = Palette(
    rosewater="#f2d5cf",
    flamingo="#eebebe",
    pink="#f4b8e4",
    mauve="#ca9ee6",
    red="#e78284",
    maroon="#ea999c",
    peach="#ef9f76",
    yellow="#e5c890",
    green="#a6d189",
    teal="#81c8be",
    sky="#99d1db",
    sapphire="#85c1dc",
    blue="#8caaee",
    lavender="#babbf1",
    text="#c6d0f5",
    subtext1="#b5bfe2",
    subtext0="#a5adce",
    overlay2="#949cbb",
    overlay1="#838ba7",
    overlay0="#737994",
    surface2="#626880",
    surface1="#51576d",
    surface0="#414559",
    base="#303446",
    mantle="#292c3c",
    crust="#232634",
)

MACCHIATO = Palette(
    rosewater="#f4dbd6",
    flamingo="#f0c6c6",
    pink="#f5bde6",
    mauve="#c6a0f6",
    red="#ed8796",
    maroon="#ee99a0",
    peach="#f5a97f",
    yellow="#eed49f",
    green="#a6da95",
    teal="#8bd5ca",
    sky="#91d7e3",
    sapphire="#7dc4e4",
    blue="#8aadf4",
    lavender="#b7bdf8",
    text="#cad3f5",
    subtext1="#b8c0e0",
    subtext0="#a5adcb",
    overlay2="#939ab7",
    overlay1="#8087a2",
    overlay0="#6e738d",
    surface2="#5b6078",
    surface1="#494d64",
    surface0="#363a4f",
    base="#24273a",
    mantle="#1e2030",
    crust="#181926",
)

MOCHA = Palette(
    rosewater="#f5e0dc",
    flamingo="#f2cdcd",
    pink="#f5c2e7",
    mauve="#cba6f7",
    red="#f38ba8",
    maroon="#eba0ac",
    peach="#fab387",
    yellow="#f9e2af",
    green="#a6e3a1",
    teal="#94e2d5",
    sky="#89dceb",
    sapphire="#74c7ec",
    blue="#89b4fa",
    lavender="#b4befe",
    text="#cdd6f4",
    subtext1="#bac2de",
    subtext0="#a6adc8",
    overlay2="#9399b2",
    overlay1="#7f849c",
    overlay0="#6c7086",
    surface2="#585b70",
    surface1="#45475a",
    surface0="#313244",
    base="#1e1e2e",
    mantle="#181825",
    crust="#11111b",
)


def lookup(flavour: Flavour) -> Palette:
    """Return the palette for *flavour*."""

    match flavour:
        case Flavour.LATTE:
            return LATTE
        case Flavour.FRAPPE:
            return FRAPPE
        case Flavour.MACCHIATO:
            return MACCHIATO
        case Flavour.MOCHA:
            return MOCHA
        case _:
            assert_never(flavour)


PALETTES: Mapping[Flavour, Palette] = MappingProxyType(
    {flavour: lookup(flavour) for flavour in Flavour}
)
"""Every palette keyed by its flavour, in Latte to Mocha order."""
