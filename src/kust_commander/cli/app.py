"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

from kust_commander.config.settings import settings
from kust_commander.utils.log import configure_logging

app = typer.Typer(
    name="kcom",
    help="Kustomize Commander - Edit kustomization files from the command line.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging("DEBUG" if verbose else settings.log_level)


def _register_commands() -> None:
    from kust_commander.cli.commands.set_cmd import app as set_app

    app.add_typer(set_app, name="set", help="Set values in the kustomization file")


_register_commands()


def main() -> None:
    app()
