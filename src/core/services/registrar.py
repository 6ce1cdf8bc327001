"""Registro de `mle` como comando persistente del shell.

`register` es idempotente: tras llamarlo, el registro contiene exactamente
un `MleListener` y el resto de listeners previos se conservan.

Pasos:
1) snapshot de los listeners de `ALL_STATEMENTS`
2) borrado masivo de la categoría + limpieza de cachés
3) re-alta de cada listener del snapshot, salvo los que se identifican como
   `MleListener` y los cuya clase sigue presente tras el borrado (el registro
   conserva sus listeners integrados)
4) alta de un `MleListener` nuevo
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.domain.models import Statement
from core.interfaces.listener import ListenerRegistry, StatementCategory
from core.services.dispatcher import dispatch
from core.services.tokenizer import tokenize

if TYPE_CHECKING:
    from adapters.shell import ShellContext

logger = logging.getLogger(__name__)

LISTENER_IDENTITY = "Mle"


class MleListener:
    """Intercepta las sentencias que empiezan por la palabra clave."""

    identity = LISTENER_IDENTITY

    def begin_event(self, ctx: ShellContext, statement: Statement) -> None:
        pass

    def handle_event(self, ctx: ShellContext, statement: Statement) -> bool:
        tokens = tokenize(statement.sql)
        if not tokens or tokens[0].lower() != ctx.settings.keyword.lower():
            return False
        dispatch(tokens, ctx)
        return True

    def end_event(self, ctx: ShellContext, statement: Statement) -> None:
        pass

    def __str__(self) -> str:
        return self.identity


def unregister(
    registry: ListenerRegistry,
    category: StatementCategory = StatementCategory.ALL_STATEMENTS,
) -> None:
    """Quita cualquier `MleListener` sin tocar los demás listeners."""

    listeners = registry.get_listeners(category)
    registry.remove_listeners(category)
    registry.clear_caches()
    remaining = {type(listener) for listener in registry.get_listeners(category)}

    for listener in listeners:
        if getattr(listener, "identity", None) == LISTENER_IDENTITY:
            continue
        if type(listener) in remaining:
            continue
        registry.add_listener(category, type(listener))
    logger.debug(
        "cleared %d listener(s) from %s, %d kept by the registry",
        len(listeners),
        category.value,
        len(remaining),
    )


def register(
    registry: ListenerRegistry,
    category: StatementCategory = StatementCategory.ALL_STATEMENTS,
) -> None:
    unregister(registry, category)
    registry.add_listener(category, MleListener)
    logger.info("registered %s listener for %s", LISTENER_IDENTITY, category.value)
