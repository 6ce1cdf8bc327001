"""Errores del dominio.

Taxonomía:
- `UsageError`: invocación incompleta o mal formada. Se recupera localmente
  (un diagnóstico + usage), nunca es fatal.
- `ResolutionError`: el contenido no se pudo obtener ni por URL ni por fichero.
"""

from __future__ import annotations


class MleError(Exception):
    """Base de los errores de mle-cli."""


class UsageError(MleError):
    """Invocación mal formada; el mensaje es el diagnóstico para el usuario."""


class ResolutionError(UsageError):
    """No se pudo obtener el contenido de `location`."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"cannot get content of '{location}'.")
