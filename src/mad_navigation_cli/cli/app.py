import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from mad_navigation_cli import __version__
from mad_navigation_cli.cli.add_route import add_route

app = typer.Typer(
    name="mad-navigation",
    help="Mad Navigation CLI: generate routes, mappers and navigation service methods.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("add-route")(add_route)
app.command("add_route", hidden=True)(add_route)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug output.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, show_time=False)],
        force=True,
    )
    logging.getLogger(__name__).info("mad-navigation-cli %s", __version__)


def main() -> None:
    app()
