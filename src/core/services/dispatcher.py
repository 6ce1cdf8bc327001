"""Despacho de subcomandos.

`run` es la entrada de la forma `script <name> ...`: atiende `register` antes
de llegar al dispatcher. El listener registrado llama a `dispatch`
directamente, así que `<keyword> register` es un subcomando desconocido.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from adapters.installer import install
from core.services.usage import print_usage, print_version, write
from core.services.validator import validate

if TYPE_CHECKING:
    from adapters.shell import ShellContext

logger = logging.getLogger(__name__)


def dispatch(tokens: Sequence[str], ctx: ShellContext) -> bool:
    """Atiende `help`, `version` o `install`.

    Devuelve `False` si los argumentos no eran válidos (diagnóstico y usage
    ya escritos).
    """

    settings = ctx.settings
    as_command = bool(tokens) and tokens[0].lower() == settings.keyword.lower()
    subcommand = tokens[1].lower() if len(tokens) == 2 else None

    write(ctx.console, "\n")
    if subcommand == "help":
        print_usage(ctx.console, as_command=as_command, keyword=settings.keyword, script_name=settings.script_name)
        return True
    if subcommand == "version":
        print_version(ctx.console)
        return True

    outcome = validate(tokens, resolve=ctx.resolver, console=ctx.console)
    if not outcome.valid or outcome.request is None:
        print_usage(ctx.console, as_command=as_command, keyword=settings.keyword, script_name=settings.script_name)
        return False
    install(outcome.request, ctx.session)
    return True


def run(tokens: Sequence[str], ctx: ShellContext) -> bool:
    """Entrada de la forma script: `register` o `dispatch`."""

    if len(tokens) >= 2 and tokens[1].lower() == "register":
        from core.services.registrar import register  # noqa: PLC0415

        register(ctx.registry)
        write(ctx.console, f"\n{ctx.settings.keyword} registered as shell command.\n\n")
        return True
    return dispatch(tokens, ctx)
