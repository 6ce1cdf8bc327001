"""Contratos del registro de listeners del shell.

El shell anfitrión mantiene una tabla compartida de observadores de
sentencias, indexada por categoría. Cada sentencia escrita pasa por los
listeners de `StatementCategory.ALL_STATEMENTS` antes de ejecutarse.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.models import Statement

if TYPE_CHECKING:
    from adapters.shell import ShellContext


class StatementCategory(str, Enum):
    """Categorías de sentencias del registro."""

    ALL_STATEMENTS = "all_statements"


@runtime_checkable
class CommandListener(Protocol):
    """Observador de sentencias.

    Reglas:
    - `handle_event` devuelve `True` si la sentencia queda atendida; el shell
      deja de consultar listeners y no ejecuta la sentencia.
    - `identity` es el marcador con el que un listener se reconoce a sí mismo
      entre los registrados.
    """

    identity: str

    def begin_event(self, ctx: ShellContext, statement: Statement) -> None: ...

    def handle_event(self, ctx: ShellContext, statement: Statement) -> bool: ...

    def end_event(self, ctx: ShellContext, statement: Statement) -> None: ...


# Clases, no callables: el registro vuelve a dar de alta un listener por su
# clase (`type(listener)`), así que la clase debe construirse sin argumentos.
ListenerFactory = type[CommandListener]


@runtime_checkable
class ListenerRegistry(Protocol):
    """Las cuatro operaciones del registro de las que depende el Core."""

    def get_listeners(self, category: StatementCategory) -> list[CommandListener]: ...

    def remove_listeners(self, category: StatementCategory) -> None: ...

    def add_listener(self, category: StatementCategory, factory: ListenerFactory) -> None: ...

    def clear_caches(self) -> None: ...
