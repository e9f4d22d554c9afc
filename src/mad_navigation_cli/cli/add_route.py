import logging
from typing import Annotated

import typer
from rich.console import Console

from mad_navigation_cli.core.add_route import run_add_route
from mad_navigation_cli.core.config import DEFAULT_CONFIG_PATH, load_config
from mad_navigation_cli.core.route_meta import resolve_route_meta
from mad_navigation_cli.exceptions import AddRouteError, ConfigError

logger = logging.getLogger(__name__)
console = Console()

_KIND_FLAGS = "--page, --bottomSheet, --dialog, --tabHolder"


def _selected_kind(page: bool, bottom_sheet: bool, dialog: bool, tab_holder: bool) -> str:
    selected = [
        kind
        for kind, flag in (
            ("page", page),
            ("bottomSheet", bottom_sheet),
            ("dialog", dialog),
            ("tabHolder", tab_holder),
        )
        if flag
    ]
    if not selected:
        console.print(f"[red]Need route type. Choose one: {_KIND_FLAGS}[/red]")
        raise typer.Exit(1)
    if len(selected) > 1:
        console.print(f"[red]Select only one route type, got: {', '.join(selected)}[/red]")
        raise typer.Exit(1)
    return selected[0]


def add_route(
    name: Annotated[str, typer.Option("--name", "-n", help="Route name in PascalCase (e.g. Settings).")],
    page: Annotated[bool, typer.Option("--page", help="Add a page route.")] = False,
    bottom_sheet: Annotated[
        bool, typer.Option("--bottomSheet", "--bottom-sheet", help="Add a bottom sheet route.")
    ] = False,
    dialog: Annotated[bool, typer.Option("--dialog", help="Add a dialog route.")] = False,
    tab_holder: Annotated[bool, typer.Option("--tabHolder", "--tab-holder", help="Add a tab holder route.")] = False,
    ui_component: Annotated[
        str | None,
        typer.Option(
            "--uiComponent",
            "--ui-component",
            help="Widget expression built by the route (e.g. 'SettingsPage()').",
        ),
    ] = None,
    generic: Annotated[
        str | None, typer.Option(help="Result type returned by the route (e.g. bool). Defaults to Never.")
    ] = None,
    config: Annotated[str, typer.Option("--config", "-c", help="Path to the JSON config file.")] = DEFAULT_CONFIG_PATH,
) -> None:
    """Add a route class, its mapper entry and (optionally) navigation service methods."""
    logger.debug("Page Route: %s", page)
    logger.debug("BottomSheet Route: %s", bottom_sheet)
    logger.debug("Dialog Route: %s", dialog)
    logger.debug("Tab Holder Route: %s", tab_holder)
    kind = _selected_kind(page, bottom_sheet, dialog, tab_holder)
    meta = resolve_route_meta(kind, generic)

    try:
        loaded = load_config(config)
        run_add_route(loaded, meta, name, ui_component)
    except (ConfigError, OSError) as exc:
        console.print(str(exc), style="red", markup=False)
        raise typer.Exit(1) from exc
    except AddRouteError as exc:
        console.print(f"{type(exc).__name__}: {exc}", style="red", markup=False)
        raise typer.Exit(1) from exc

    console.print(f"[green]Added[/green] {meta.type_name}{name} ({meta.route_identifier(name)})")
