"""Validación de argumentos de `install`.

Comprobaciones en orden; la primera que falla gana y escribe un único
diagnóstico:

1) menos de 2 tokens              -> "missing mandatory subcommand."
2) token[1] distinto de `install` -> "unknown subcommand '<token1>'."
3) menos de 3 tokens              -> "missing mandatory <moduleName>."
4) menos de 4 tokens              -> "missing mandatory <url> or <fileName>."
5) contenido de token[3]          -> "cannot get content of '<token3>'."
6) 5 tokens                       -> version = token[4]
7) más de 5 tokens                -> "too many parameters passed."

"too many parameters" solo se informa si el contenido se resolvió.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from rich.console import Console

from core.domain.errors import ResolutionError, UsageError
from core.domain.models import InstallationRequest, ValidationOutcome
from core.services.usage import write

logger = logging.getLogger(__name__)

Resolver = Callable[[str], str]


def _check(tokens: Sequence[str], resolve: Resolver) -> InstallationRequest:
    if len(tokens) < 2:
        raise UsageError("missing mandatory subcommand.")
    if tokens[1].lower() != "install":
        raise UsageError(f"unknown subcommand '{tokens[1]}'.")
    if len(tokens) < 3 or not tokens[2]:
        raise UsageError("missing mandatory <moduleName>.")
    module_name = tokens[2]
    if len(tokens) < 4:
        raise UsageError("missing mandatory <url> or <fileName>.")

    location = tokens[3]
    content = resolve(location)
    if not content:
        raise ResolutionError(location)

    version = tokens[4] if len(tokens) == 5 else None
    if len(tokens) > 5:
        raise UsageError("too many parameters passed.")
    return InstallationRequest(module_name=module_name, content=content, version=version)


def validate(tokens: Sequence[str], *, resolve: Resolver, console: Console) -> ValidationOutcome:
    """Valida `tokens` y devuelve la petición o un resultado inválido.

    El diagnóstico (si lo hay) ya está escrito en `console` al volver.
    """

    try:
        request = _check(tokens, resolve)
    except UsageError as exc:
        logger.debug("invalid arguments %r: %s", list(tokens), exc)
        write(console, f"{exc}\n\n")
        return ValidationOutcome.invalid()
    return ValidationOutcome.of(request)
