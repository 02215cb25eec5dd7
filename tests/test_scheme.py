"""Tests for :mod:`catppuccin_forms.scheme`."""
from __future__ import annotations

import pytest

from catppuccin_forms.forms import Form, FormLike, FormRegistry
from catppuccin_forms.palette import LATTE, MOCHA, Flavour, Palette, lookup
from catppuccin_forms.scheme import (
    ColorScheme,
    SchemeConfig,
    build_forms,
    no_modifications,
    resolve_and_register,
)

_BOTH = pytest.mark.parametrize("no_background", [False, True])
_FLAVOURS = pytest.mark.parametrize("flavour", list(Flavour))


def _resolve(flavour: Flavour, **kwargs) -> FormRegistry:
    registry = FormRegistry()
    resolve_and_register(registry, flavour, **kwargs)
    return registry


def test_base_forms_are_unique_and_ordered() -> None:
    pairs = build_forms(MOCHA)
    names = [name for name, _ in pairs]
    assert len(names) == 58
    assert len(set(names)) == len(names)
    assert names[0] == "Default"
    assert names[1:4] == ["DefaultOk", "AccentOk", "DefaultErr"]
    assert names[-2:] == ["VertRule", "Frame"]


def test_base_forms_only_use_palette_colours() -> None:
    colours = set(MOCHA.as_dict().values())
    for name, form in build_forms(MOCHA):
        for colour in (form.fg, form.bg):
            assert colour is None or colour in colours, name


@_FLAVOURS
@_BOTH
def test_default_background_follows_flag(flavour: Flavour, no_background: bool) -> None:
    pairs = build_forms(lookup(flavour), no_background)
    defaults = [form for name, form in pairs if name == "Default"]
    assert len(defaults) == 1
    assert (defaults[0].bg is None) is no_background

    registry = _resolve(flavour, no_background=no_background)
    assert (registry.get("Default").bg is None) is no_background
    assert (registry.style("Default").bgcolor is None) is no_background


@_BOTH
def test_form_names_are_identical_across_flavours(no_background: bool) -> None:
    names = {tuple(_resolve(flavour, no_background=no_background).names()) for flavour in Flavour}
    assert len(names) == 1


@_FLAVOURS
def test_resolution_is_idempotent(flavour: Flavour) -> None:
    registry = FormRegistry()
    resolve_and_register(registry, flavour)
    first = list(registry.items())
    resolve_and_register(registry, flavour)
    assert list(registry.items()) == first
    assert list(_resolve(flavour).items()) == first


def test_mocha_with_background() -> None:
    registry = _resolve(Flavour.MOCHA, no_background=False)
    assert registry.get("Default") == Form(fg="#cdd6f4", bg="#1e1e2e")
    assert registry.get("keyword") == Form(fg="#cba6f7")
    assert registry.get("keyword").bg is None


def test_latte_without_background_keeps_frame_background() -> None:
    registry = _resolve(Flavour.LATTE, no_background=True)
    assert registry.get("Default") == Form(fg="#4c4f69")
    assert registry.get("Frame") == Form(fg=LATTE.subtext0, bg="#eff1f5")


def test_override_replaces_default() -> None:
    replacement = Form.with_("#000000").on("#ffffff").bolded()
    registry = FormRegistry()

    def override(palette: Palette) -> None:
        registry.set("Default", replacement)

    resolve_and_register(registry, Flavour.MOCHA, modifications=override)
    assert registry.get("Default") == replacement
    assert registry.names().count("Default") == 1


def test_override_only_touches_named_forms() -> None:
    registry = FormRegistry()
    resolve_and_register(
        registry,
        Flavour.MOCHA,
        modifications=lambda colors: registry.set("punctuation.delimiter", colors.red),
    )
    assert registry.get("punctuation.delimiter") == Form(fg="#f38ba8")
    assert registry.get("punctuation.bracket") == Form(fg="#a6adc8")


def test_modifications_run_once_after_base_forms() -> None:
    registry = FormRegistry()
    calls: list[tuple[Palette, int]] = []

    def record(palette: Palette) -> None:
        calls.append((palette, len(registry)))

    palette = resolve_and_register(registry, Flavour.FRAPPE, modifications=record)
    assert calls == [(palette, 58)]
    assert palette.text == "#c6d0f5"


def test_specific_mappings() -> None:
    registry = _resolve(Flavour.MOCHA)
    assert registry.get("MainCursor") == Form(reverse=True)
    assert registry.get("MainSelection") == Form(fg=MOCHA.base, bg=MOCHA.overlay1)
    assert registry.get("ExtraSelection") == Form(fg=MOCHA.base, bg=MOCHA.overlay0)
    assert registry.get("type") == Form(fg=MOCHA.yellow, italic=True)
    assert registry.get("type.builtin") == Form(fg=MOCHA.yellow, reset=True)
    assert registry.get("function") == Form(fg=MOCHA.blue, reset=True)
    assert registry.get("variable.parameter") == Form(italic=True)
    assert registry.get("markup") == Form()
    assert registry.get("markup.strikethrough") == Form(crossed_out=True)
    assert registry.get("markup.underline") == Form(underline=True)
    assert registry.get("markup.link") == Form(fg=MOCHA.lavender, underline=True)
    assert registry.get("comment.documentation") == Form(fg=MOCHA.overlay1, bold=True)


def _expected_forms(p: Palette, no_background: bool) -> list[tuple[str, Form]]:
    def form(fg: str | None = None, bg: str | None = None, **attrs: bool) -> Form:
        return Form(
            fg=p.get(fg) if fg else None,
            bg=p.get(bg) if bg else None,
            **attrs,
        )

    return [
        ("Default", form("text") if no_background else form("text", "base")),
        ("DefaultOk", form("sapphire")),
        ("AccentOk", form("sky", bold=True)),
        ("DefaultErr", form("maroon")),
        ("AccentErr", form("red", bold=True)),
        ("DefaultHint", form("text")),
        ("AccentHint", form("subtext0", bold=True)),
        ("MainCursor", form(reverse=True)),
        ("ExtraCursor", form(reverse=True)),
        ("MainSelection", form("base", "overlay1")),
        ("ExtraSelection", form("base", "overlay0")),
        ("Inactive", form("overlay2")),
        ("LineNum", form("overlay2")),
        ("MainLineNum", form("yellow")),
        ("WrappedLineNum", form("teal")),
        ("File", form("yellow")),
        ("Selections", form("blue")),
        ("Coord", form("peach")),
        ("Separator", form("teal")),
        ("Mode", form("green")),
        ("type", form("yellow", italic=True)),
        ("type.builtin", form("yellow", reset=True)),
        ("function", form("blue", reset=True)),
        ("comment", form("overlay1")),
        ("comment.documentation", form("overlay1", bold=True)),
        ("punctuation.bracket", form("subtext0")),
        ("punctuation.delimiter", form("subtext0")),
        ("constant", form("overlay1")),
        ("constant.builtin", form("peach")),
        ("character", form("peach")),
        ("number", form("peach")),
        ("variable.parameter", form(italic=True)),
        ("variable.builtin", form("peach")),
        ("label", form("green")),
        ("keyword", form("mauve")),
        ("string", form("green")),
        ("escape", form("peach")),
        ("attribute", form("mauve")),
        ("operator", form("sapphire")),
        ("constructor", form("peach")),
        ("module", form("blue", italic=True)),
        ("markup", form()),
        ("markup.strong", form("maroon", bold=True)),
        ("markup.italic", form("maroon", italic=True)),
        ("markup.strikethrough", form(crossed_out=True)),
        ("markup.underline", form(underline=True)),
        ("markup.heading", form("blue", bold=True)),
        ("markup.math", form("yellow")),
        ("markup.quote", form("maroon", bold=True)),
        ("markup.environment", form("pink")),
        ("markup.environment.name", form("blue")),
        ("markup.link", form("lavender", underline=True)),
        ("markup.raw", form("teal")),
        ("markup.list", form("yellow")),
        ("markup.list.checked", form("green")),
        ("markup.list.unchecked", form("overlay1")),
        ("VertRule", form("subtext0")),
        ("Frame", form("subtext0", "base")),
    ]


@_FLAVOURS
@_BOTH
def test_base_forms_match_the_full_table(flavour: Flavour, no_background: bool) -> None:
    palette = lookup(flavour)
    assert build_forms(palette, no_background) == _expected_forms(palette, no_background)


@_FLAVOURS
def test_registered_forms_follow_the_full_table(flavour: Flavour) -> None:
    registry = _resolve(flavour)
    assert list(registry.items()) == _expected_forms(lookup(flavour), False)


class _RejectingRegistry(FormRegistry):
    def set(self, name: str, form: FormLike) -> None:
        if name == "keyword":
            raise RuntimeError("registry rejected keyword")
        super().set(name, form)


def test_registry_errors_propagate() -> None:
    registry = _RejectingRegistry()
    calls: list[Palette] = []
    with pytest.raises(RuntimeError, match="rejected keyword"):
        resolve_and_register(registry, Flavour.MOCHA, modifications=calls.append)
    assert calls == []
    assert "Default" in registry
    assert "keyword" not in registry


def test_modification_errors_propagate() -> None:
    def broken(palette: Palette) -> None:
        raise ValueError("bad override")

    with pytest.raises(ValueError, match="bad override"):
        resolve_and_register(FormRegistry(), Flavour.LATTE, modifications=broken)


def test_color_scheme_applies_its_flavour() -> None:
    registry = FormRegistry()
    scheme = ColorScheme.macchiato(registry).no_bg(True)
    assert scheme.name() == "catppuccin-macchiato"
    assert scheme.config == SchemeConfig(Flavour.MACCHIATO, True, no_modifications)
    scheme.apply()
    assert registry.get("Default").bg is None
    assert registry.get("Default").fg == "#cad3f5"


def test_color_scheme_constructors() -> None:
    registry = FormRegistry()
    assert [
        ColorScheme.latte(registry).name(),
        ColorScheme.frappe(registry).name(),
        ColorScheme.macchiato(registry).name(),
        ColorScheme.mocha(registry).name(),
    ] == [flavour.scheme_name for flavour in Flavour]
    assert ColorScheme.mocha(registry).config.no_background is False
