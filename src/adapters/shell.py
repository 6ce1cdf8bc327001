"""Shell anfitrión en proceso.

Implementa las piezas del shell de las que depende el Core:
- `CommandRegistry`: tabla de listeners por categoría, con caché de
  instancias y listeners integrados que sobreviven al borrado masivo.
- `ScriptCommand`: listener integrado que atiende `script <name> ...`.
- `Shell`: pasa cada sentencia por los listeners y, si nadie la atiende, la
  ejecuta en la sesión.

Un solo hilo: el registro no usa locks.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable

from rich.console import Console
from rich.markup import escape

from adapters.content_resolver import ContentResolver
from adapters.session import DryRunSession
from core.config import AppSettings, load_settings
from core.domain.models import Statement
from core.interfaces.listener import CommandListener, ListenerFactory, StatementCategory
from core.interfaces.session import Session
from core.services.dispatcher import run
from core.services.tokenizer import tokenize
from core.services.usage import write

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit"})


class CommandRegistry:
    """Registro de listeners por categoría.

    Reglas:
    - `get_listeners` instancia las factorías una vez y cachea las instancias.
    - `remove_listeners` quita las factorías añadidas con `add_listener`; los
      integrados se conservan. Las instancias cacheadas siguen vivas hasta
      `clear_caches`.
    - `add_listener` solo acepta clases (`type(listener)` debe poder
      reconstruirlas) e invalida la caché de su categoría.
    """

    def __init__(self, builtins: dict[StatementCategory, list[ListenerFactory]] | None = None) -> None:
        self._builtins: dict[StatementCategory, list[ListenerFactory]] = defaultdict(list)
        for category, factories in (builtins or {}).items():
            self._builtins[category].extend(factories)
        self._factories: dict[StatementCategory, list[ListenerFactory]] = defaultdict(list)
        self._cache: dict[StatementCategory, list[CommandListener]] = {}

    def get_listeners(self, category: StatementCategory) -> list[CommandListener]:
        if category not in self._cache:
            factories = [*self._builtins[category], *self._factories[category]]
            self._cache[category] = [factory() for factory in factories]
        return list(self._cache[category])

    def remove_listeners(self, category: StatementCategory) -> None:
        self._factories.pop(category, None)

    def add_listener(self, category: StatementCategory, factory: ListenerFactory) -> None:
        if not isinstance(factory, type):
            raise TypeError(f"listener factory must be a class, got {factory!r}")
        self._factories[category].append(factory)
        self._cache.pop(category, None)

    def clear_caches(self) -> None:
        self._cache.clear()


class ScriptCommand:
    """Listener integrado: `script <script_name> [args]`."""

    identity = "Script"

    def begin_event(self, ctx: ShellContext, statement: Statement) -> None:
        pass

    def handle_event(self, ctx: ShellContext, statement: Statement) -> bool:
        tokens = tokenize(statement.sql)
        if not tokens or tokens[0].lower() != "script":
            return False
        if len(tokens) < 2:
            write(ctx.console, "missing script name.\n\n")
            return True
        if tokens[1].lower() != ctx.settings.script_name.lower():
            write(ctx.console, f"unknown script '{tokens[1]}'.\n\n")
            return True
        run(tokens[1:], ctx)
        return True

    def end_event(self, ctx: ShellContext, statement: Statement) -> None:
        pass


def default_registry() -> CommandRegistry:
    return CommandRegistry(builtins={StatementCategory.ALL_STATEMENTS: [ScriptCommand]})


@dataclass
class ShellContext:
    """Estado compartido que el shell entrega a cada listener."""

    console: Console
    session: Session
    settings: AppSettings = field(default_factory=load_settings)
    registry: CommandRegistry = field(default_factory=default_registry)
    resolver: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if self.resolver is None:
            self.resolver = ContentResolver(self.settings)


class Shell:
    """Bucle de sentencias sobre un `ShellContext`."""

    def __init__(self, ctx: ShellContext) -> None:
        self.ctx = ctx

    @classmethod
    def create(cls, console: Console | None = None, settings: AppSettings | None = None) -> "Shell":
        console = console or Console()
        settings = settings or load_settings()
        return cls(ShellContext(console=console, session=DryRunSession(console), settings=settings))

    def execute(self, sql: str) -> bool:
        """Ejecuta una sentencia. Devuelve `True` si la atendió un listener."""

        statement = Statement(sql=sql)
        listeners = self.ctx.registry.get_listeners(StatementCategory.ALL_STATEMENTS)
        for listener in listeners:
            listener.begin_event(self.ctx, statement)
        handled = False
        try:
            for listener in listeners:
                if listener.handle_event(self.ctx, statement):
                    logger.debug("statement handled by %s", getattr(listener, "identity", listener))
                    handled = True
                    break
        finally:
            for listener in listeners:
                listener.end_event(self.ctx, statement)
        if not handled:
            self.ctx.session.run(sql)
        return handled

    def loop(self) -> None:
        """Lee sentencias hasta `exit`, `quit` o EOF."""

        console = self.ctx.console
        while True:
            try:
                line = console.input(self.ctx.settings.prompt)
            except (EOFError, KeyboardInterrupt):
                console.print()
                return
            sql = line.strip()
            if not sql:
                continue
            if sql.rstrip(";").lower() in EXIT_COMMANDS:
                return
            try:
                self.execute(sql)
            except Exception as exc:
                logger.debug("statement failed: %s", sql, exc_info=True)
                console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
