"""Sesiones incluidas.

La conexión real a la base de datos la aporta el shell anfitrión; aquí solo
vive `DryRunSession`, que escribe el script en el canal de salida.
"""

from __future__ import annotations

import logging

from rich.console import Console

logger = logging.getLogger(__name__)


class DryRunSession:
    """Sesión que muestra los scripts en lugar de ejecutarlos."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def run(self, script: str) -> None:
        logger.debug("dry-run session received %d characters", len(script))
        self._console.print(script, end="", markup=False, highlight=False, soft_wrap=True)
