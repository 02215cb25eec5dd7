"""Configuration management for the Catppuccin plugin options."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .forms import Form, FormRegistry
from .logging_utils import get_logger
from .palette import Flavour, Palette
from .plugin import Catppuccin

CONFIG_PATH = Path.home() / ".config" / "catppuccin_forms" / "config.yaml"
ENV_NO_BACKGROUND = "CATPPUCCIN_FORMS_NO_BACKGROUND"

log = get_logger(__name__)

_ATTRIBUTE_KEYS = ("bold", "italic", "underline", "reverse", "crossed_out", "reset")


@dataclass(slots=True)
class FormOverride:
    """A form the user wants set after the base Catppuccin forms.

    ``fg`` and ``bg`` may name a palette slot (``"red"``) or hold a literal
    colour (``"#ff0000"``).
    """

    name: str
    fg: Optional[str] = None
    bg: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    reverse: bool = False
    crossed_out: bool = False
    reset: bool = False

    def to_form(self, palette: Palette) -> Form:
        """Return the override as a form, resolving slot names with *palette*."""

        return Form(
            fg=_resolve_colour(self.fg, palette),
            bg=_resolve_colour(self.bg, palette),
            bold=self.bold,
            italic=self.italic,
            underline=self.underline,
            reverse=self.reverse,
            crossed_out=self.crossed_out,
            reset=self.reset,
        )


@dataclass(slots=True)
class PluginConfig:
    """Top level plugin configuration."""

    flavour: Flavour = Flavour.MOCHA
    no_background: bool = False
    overrides: list[FormOverride] = field(default_factory=list)

    @property
    def scheme_name(self) -> str:
        return self.flavour.scheme_name

    def to_plugin(self, forms: FormRegistry) -> Catppuccin:
        """Return plugin options that apply the overrides to *forms*."""

        plugin = Catppuccin(no_background=self.no_background)
        if not self.overrides:
            return plugin
        overrides = tuple(self.overrides)

        def apply_overrides(palette: Palette) -> None:
            for override in overrides:
                forms.set(override.name, override.to_form(palette))

        return plugin.modify(apply_overrides)


def _resolve_colour(value: Optional[str], palette: Palette) -> Optional[str]:
    if value is None:
        return None
    if value in Palette.slot_names():
        return palette.get(value)
    return value


def _clean_scalar(value: str) -> str:
    value = value.strip()
    if value.startswith(("'", '"')) and value.endswith(("'", '"')):
        value = value[1:-1]
    return value


def _parse_bool(value: object, *, default: bool = False) -> bool:
    """Coerce *value* into a boolean flag."""

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"true", "yes", "on", "1"}:
            return True
        if normalized in {"false", "no", "off", "0"}:
            return False
    return default


def _parse_config(raw: str) -> dict[str, object]:
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    result: dict[str, object] = {}
    current_list: Optional[list[dict[str, str]]] = None
    current_item: Optional[dict[str, str]] = None
    for line in raw.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        if not line.startswith(" "):
            key, _, remainder = line.partition(":")
            key = key.strip()
            value = remainder.strip()
            if value and value != "[]":
                result[key] = _clean_scalar(value)
                current_list = None
            else:
                current_list = []
                result[key] = current_list
            current_item = None
            continue
        if line.strip().startswith("-"):
            current_item = {}
            if current_list is not None:
                current_list.append(current_item)
            remainder = line.strip()[1:].strip()
            if remainder and current_item is not None:
                key, _, value = remainder.partition(":")
                current_item[key.strip()] = _clean_scalar(value)
            continue
        if current_item is not None:
            key, _, value = line.strip().partition(":")
            current_item[key.strip()] = _clean_scalar(value)
    return result


def _parse_override(entry: dict[str, object]) -> Optional[FormOverride]:
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        log.warning("Skipping form override without a name: %s", entry)
        return None

    def colour(key: str) -> Optional[str]:
        raw = entry.get(key)
        if isinstance(raw, str) and raw.strip():
            return raw.strip()
        return None

    flags = {key: _parse_bool(entry.get(key)) for key in _ATTRIBUTE_KEYS}
    return FormOverride(name=name.strip(), fg=colour("fg"), bg=colour("bg"), **flags)


def load_config(path: Optional[Path] = None) -> PluginConfig:
    """Load configuration from *path* or return the default configuration."""

    config_path = path or CONFIG_PATH
    env_no_background = _parse_bool(os.getenv(ENV_NO_BACKGROUND))
    if not config_path.exists():
        log.info("Configuration file missing at %s; using defaults", config_path)
        return PluginConfig(no_background=env_no_background)
    log.debug("Loading configuration from %s", config_path)
    data = _parse_config(config_path.read_text(encoding="utf8"))
    if not isinstance(data, dict):
        log.warning("Ignoring malformed configuration at %s", config_path)
        return PluginConfig(no_background=env_no_background)

    flavour = Flavour.default()
    flavour_raw = data.get("flavour")
    if isinstance(flavour_raw, str) and flavour_raw.strip():
        try:
            flavour = Flavour.from_name(flavour_raw)
        except ValueError:
            log.warning(
                "Unknown flavour %r in %s; using %s", flavour_raw, config_path, flavour.value
            )

    overrides: list[FormOverride] = []
    overrides_raw = data.get("overrides", [])
    for entry in overrides_raw if isinstance(overrides_raw, list) else []:
        if not isinstance(entry, dict):  # pragma: no cover - invalid config guard
            continue
        override = _parse_override(entry)
        if override is not None:
            overrides.append(override)

    no_background = env_no_background or _parse_bool(data.get("no_background"))
    log.info(
        "Loaded %s with %d form override(s) from %s",
        flavour.scheme_name,
        len(overrides),
        config_path,
    )
    return PluginConfig(flavour=flavour, no_background=no_background, overrides=overrides)


__all__ = [
    "CONFIG_PATH",
    "ENV_NO_BACKGROUND",
    "FormOverride",
    "PluginConfig",
    "load_config",
]
