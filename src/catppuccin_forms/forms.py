"""Form definitions and the registry the colorschemes write into.

A :class:`Form` is the editor's unit of styling: an optional foreground, an
optional background and a handful of text attributes. Forms are converted to
:class:`rich.style.Style` objects when they are registered, which is also
where malformed colours are rejected.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Union

from rich.style import Style
from rich.theme import Theme as RichTheme

from .logging_utils import get_logger

__all__ = ["Form", "FormLike", "FormRegistry", "coerce_form"]

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Form:
    """Colours and attributes applied to a named piece of the interface."""

    fg: Optional[str] = None
    bg: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    reverse: bool = False
    crossed_out: bool = False
    reset: bool = False

    @classmethod
    def new(cls) -> "Form":
        """Return a form that changes nothing."""

        return cls()

    @classmethod
    def with_(cls, colour: str) -> "Form":
        """Return a form with *colour* as its foreground."""

        return cls(fg=colour)

    @classmethod
    def reverse_video(cls) -> "Form":
        return cls(reverse=True)

    @classmethod
    def italic_only(cls) -> "Form":
        return cls(italic=True)

    @classmethod
    def underlined_only(cls) -> "Form":
        return cls(underline=True)

    def on(self, colour: str) -> "Form":
        """Return a copy with *colour* as the background."""

        return replace(self, bg=colour)

    def bolded(self) -> "Form":
        return replace(self, bold=True)

    def italicized(self) -> "Form":
        return replace(self, italic=True)

    def underlined(self) -> "Form":
        return replace(self, underline=True)

    def reversed(self) -> "Form":
        return replace(self, reverse=True)

    def crossed(self) -> "Form":
        return replace(self, crossed_out=True)

    def reset_attrs(self) -> "Form":
        """Return a copy that clears every attribute it doesn't set itself."""

        return replace(self, reset=True)

    def attributes(self) -> tuple[str, ...]:
        """Return the names of the enabled attributes, in a stable order."""

        flags = (
            ("bold", self.bold),
            ("italic", self.italic),
            ("underline", self.underline),
            ("reverse", self.reverse),
            ("crossed_out", self.crossed_out),
            ("reset", self.reset),
        )
        return tuple(name for name, enabled in flags if enabled)

    def to_style(self) -> Style:
        """Convert the form to a :class:`rich.style.Style`.

        Raises :class:`rich.color.ColorParseError` when a colour is malformed.
        """

        unset = False if self.reset else None
        return Style(
            color=self.fg,
            bgcolor=self.bg,
            bold=True if self.bold else unset,
            italic=True if self.italic else unset,
            underline=True if self.underline else unset,
            reverse=True if self.reverse else unset,
            strike=True if self.crossed_out else unset,
        )


FormLike = Union[Form, str]
"""A form, or a bare colour string used as a foreground."""


def coerce_form(value: FormLike) -> Form:
    """Return *value* as a :class:`Form`."""

    if isinstance(value, Form):
        return value
    if isinstance(value, str):
        return Form.with_(value)
    raise TypeError(f"Cannot build a form from {type(value).__name__}")


class FormRegistry:
    """Named forms keyed by name, with upsert semantics.

    Registering a name that already exists replaces its definition in place,
    so the original registration order is kept.
    """

    def __init__(self) -> None:
        self._forms: dict[str, Form] = {}
        self._styles: dict[str, Style] = {}

    def set(self, name: str, form: FormLike) -> None:
        """Register *form* under *name*, replacing any existing definition."""

        if not name:
            raise ValueError("Form names cannot be empty")
        resolved = coerce_form(form)
        style = resolved.to_style()
        self._forms[name] = resolved
        self._styles[name] = style
        log.debug("Set form %s to %s", name, style)

    def set_many(self, pairs: Iterable[tuple[str, FormLike]]) -> None:
        """Register each ``(name, form)`` pair in order."""

        for name, form in pairs:
            self.set(name, form)

    def get(self, name: str) -> Form:
        return self._forms[name]

    def style(self, name: str) -> Style:
        """Return the rich style registered for *name*."""

        return self._styles[name]

    def names(self) -> list[str]:
        return list(self._forms)

    def items(self) -> Iterator[tuple[str, Form]]:
        return iter(list(self._forms.items()))

    def to_rich_theme(self) -> RichTheme:
        """Return a rich theme holding every registered style."""

        return RichTheme(dict(self._styles), inherit=True)

    def __contains__(self, name: object) -> bool:
        return name in self._forms

    def __len__(self) -> int:
        return len(self._forms)
