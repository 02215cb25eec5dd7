"""Command line entry point for the Catppuccin colorschemes."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import CONFIG_PATH, load_config
from .logging_utils import configure_logging, get_logger
from .palette import Flavour
from .plugin import SCHEME_NAMES, SchemeRegistry, UnknownSchemeError
from .preview import SchemePreviewApp, describe_form

log = get_logger(__name__)

_USAGE_ERROR = 2


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    epilog = "Colorschemes:\n" + "\n".join(f"  {name}" for name in SCHEME_NAMES)
    parser = argparse.ArgumentParser(
        description="Preview the Catppuccin colorschemes",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_PATH,
        help="Path to configuration file (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override CATPPUCCIN_FORMS_LOG_LEVEL for this invocation",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to this file instead of CATPPUCCIN_FORMS_LOG_FILE",
    )
    parser.add_argument(
        "--scheme",
        default=None,
        help=(
            "Colorscheme or flavour to apply, e.g. catppuccin-latte or latte"
            " (default: the configured flavour)"
        ),
    )
    parser.add_argument(
        "--no-background",
        action="store_true",
        help="Leave the Default form without a background colour.",
    )
    parser.add_argument(
        "--list-schemes",
        action="store_true",
        help="List available colorschemes and exit.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the resolved forms as a table instead of opening the preview.",
    )
    return parser.parse_args(argv)


def _normalize_scheme(name: str) -> str:
    """Return the scheme name for *name*, which may be a bare flavour name."""

    try:
        return Flavour.from_name(name).scheme_name
    except ValueError:
        return name


def build_forms_table(schemes: SchemeRegistry, scheme_name: str) -> Table:
    """Return a rich table listing every registered form of *scheme_name*.

    Form names are styled by name, so the table must be printed with the
    registry's rich theme in use.
    """

    table = Table(title=scheme_name)
    table.add_column("Form")
    table.add_column("Foreground")
    table.add_column("Background")
    table.add_column("Attributes")
    for name, form in schemes.forms.items():
        table.add_row(Text(name, style=name), *describe_form(form))
    return table


def main(argv: Iterable[str] | None = None, console: Optional[Console] = None) -> None:
    args = parse_args(argv)
    if args.list_schemes:
        for scheme_name in SCHEME_NAMES:
            print(scheme_name)
        return
    configure_logging(
        level=args.log_level,
        log_file=str(args.log_file) if args.log_file is not None else None,
    )
    log.info("CLI invoked with config=%s", args.config)
    config = load_config(args.config)
    if args.no_background:
        config.no_background = True

    schemes = SchemeRegistry()
    config.to_plugin(schemes.forms).plug(schemes)
    scheme_name = _normalize_scheme(args.scheme) if args.scheme else config.scheme_name

    if args.show:
        try:
            schemes.apply(scheme_name)
        except UnknownSchemeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(_USAGE_ERROR) from None
        console = console or Console()
        with console.use_theme(schemes.forms.to_rich_theme()):
            console.print(build_forms_table(schemes, scheme_name))
        return

    app = SchemePreviewApp(
        schemes,
        scheme=scheme_name,
        no_background=config.no_background,
    )
    log.info("Launching preview application")
    try:
        app.run()
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received; exiting application")
        if app.is_running:
            app.exit()
        raise SystemExit(130) from None


if __name__ == "__main__":  # pragma: no cover
    main()
