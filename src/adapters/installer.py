"""Instalación de módulos MLE.

Convierte una `InstallationRequest` en un script DDL y lo entrega a la sesión
activa. El contenido del módulo se inserta literal; la versión va como
literal SQL con las comillas simples duplicadas.
"""

from __future__ import annotations

import logging

from core.domain.models import InstallationRequest
from core.interfaces.session import Session

logger = logging.getLogger(__name__)


def quote_literal(value: str) -> str:
    """Literal SQL entre comillas simples."""

    return "'" + value.replace("'", "''") + "'"


def build_install_script(request: InstallationRequest) -> str:
    """Script `create or replace mle module ...` terminado en `/`."""

    script = "set scan off\n" f"create or replace mle module {request.module_name} language javascript"
    if request.version is not None:
        script += f" version {quote_literal(request.version)}"
    return script + " as \n" + request.content + "\n/\n"


def install(request: InstallationRequest, session: Session) -> None:
    script = build_install_script(request)
    logger.info(
        "installing mle module %s (version=%s, %d characters)",
        request.module_name,
        request.version,
        len(request.content),
    )
    session.run(script)
