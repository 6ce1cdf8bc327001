"""CLI de mle-cli (Typer).

- `mle <subcommand> [args]`: forma script, un solo disparo. `mle register`
  registra el comando en un shell nuevo y lo abre.
- `mle-shell`: shell interactivo con el built-in `script <name> ...`.

Los argumentos se pasan tal cual al dispatcher, sin opciones de Typer: se
toman de la lista cruda antes de que click los procese (click descarta `--`).
"""

from __future__ import annotations

import logging

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from adapters.shell import Shell
from cli.ui_components import print_banner
from core.config import AppSettings, load_settings
from core.services.dispatcher import run as run_tokens

app = typer.Typer(add_completion=False, help="Install MLE modules from a URL or a file.")
shell_app = typer.Typer(add_completion=False, help="Interactive shell with the `script` command.")

_console = Console()

_PASSTHROUGH = {"ignore_unknown_options": True, "allow_extra_args": True, "help_option_names": []}


class RawArgsCommand(TyperCommand):
    """Guarda los argumentos sin procesar en `ctx.meta["raw_args"]`."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


def _setup_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command(cls=RawArgsCommand, context_settings=_PASSTHROUGH)
def mle(
    ctx: typer.Context,
    args: list[str] = typer.Argument(  # noqa: B008
        None,
        help="Subcommand (install, register, help, version) and its arguments.",
    ),
) -> None:
    """Run one subcommand, or open the shell with `mle` registered."""

    settings = load_settings()
    _setup_logging(settings)
    tokens = [settings.script_name, *ctx.meta.get("raw_args", args or [])]

    shell = Shell.create(console=_console, settings=settings)
    served = run_tokens(tokens, shell.ctx)
    if len(tokens) >= 2 and tokens[1].lower() == "register":
        print_banner(_console, settings)
        shell.loop()
        return
    if not served:
        raise typer.Exit(code=2)


@shell_app.command()
def shell() -> None:
    """Open the interactive shell."""

    settings = load_settings()
    _setup_logging(settings)
    print_banner(_console, settings)
    Shell.create(console=_console, settings=settings).loop()


def run() -> None:
    app()


def run_shell() -> None:
    shell_app()
