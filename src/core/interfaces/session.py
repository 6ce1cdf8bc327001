"""Contrato de sesión de base de datos."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Session(Protocol):
    """Sesión activa sobre la que se ejecutan scripts.

    La conexión y la autenticación pertenecen al shell anfitrión.
    """

    def run(self, script: str) -> None:
        """Ejecuta `script` (una o varias sentencias, terminadas en `/`)."""

        ...
