from __future__ import annotations

import functools

import pytest

from adapters.shell import CommandRegistry, ScriptCommand
from core.interfaces.listener import StatementCategory
from core.services.registrar import LISTENER_IDENTITY, MleListener, register, unregister

ALL = StatementCategory.ALL_STATEMENTS


class AuditListener:
    identity = "Audit"

    def __init__(self) -> None:
        self.seen: list[str] = []

    def begin_event(self, ctx, statement) -> None:
        pass

    def handle_event(self, ctx, statement) -> bool:
        self.seen.append(statement.sql)
        return False

    def end_event(self, ctx, statement) -> None:
        pass


class FormatListener(AuditListener):
    identity = "Format"


def _identities(registry: CommandRegistry) -> list[str]:
    return [listener.identity for listener in registry.get_listeners(ALL)]


def test_register_adds_one_listener(registry):
    register(registry)
    assert _identities(registry) == ["Script", LISTENER_IDENTITY]
    assert isinstance(registry.get_listeners(ALL)[-1], MleListener)


def test_register_twice_keeps_exactly_one_listener(registry):
    registry.add_listener(ALL, AuditListener)
    registry.add_listener(ALL, FormatListener)
    registry.add_listener(ALL, AuditListener)
    before = _identities(registry)

    register(registry)
    register(registry)

    after = _identities(registry)
    assert after.count(LISTENER_IDENTITY) == 1
    for identity in set(before):
        assert after.count(identity) == before.count(identity)


def test_builtin_listener_is_not_duplicated(registry):
    register(registry)
    register(registry)
    listeners = registry.get_listeners(ALL)
    assert sum(isinstance(listener, ScriptCommand) for listener in listeners) == 1


def test_register_creates_fresh_instance(registry):
    register(registry)
    first = registry.get_listeners(ALL)[-1]
    register(registry)
    second = registry.get_listeners(ALL)[-1]
    assert isinstance(second, MleListener)
    assert second is not first


def test_unregister_removes_only_own_listener(registry):
    registry.add_listener(ALL, AuditListener)
    register(registry)

    unregister(registry)

    assert _identities(registry) == ["Script", "Audit"]


def test_register_on_registry_without_builtins():
    registry = CommandRegistry()
    registry.add_listener(ALL, AuditListener)
    register(registry)
    assert _identities(registry) == ["Audit", LISTENER_IDENTITY]


def test_listener_ignores_other_statements(ctx):
    from core.domain.models import Statement

    listener = MleListener()
    assert listener.handle_event(ctx, Statement(sql="select * from dual")) is False
    assert listener.handle_event(ctx, Statement(sql="")) is False
    assert str(listener) == LISTENER_IDENTITY


class PrefixListener(AuditListener):
    identity = "Prefix"

    def __init__(self, prefix: str) -> None:
        super().__init__()
        self.prefix = prefix


def test_registry_rejects_non_class_factories(registry):
    registry.add_listener(ALL, AuditListener)

    with pytest.raises(TypeError):
        registry.add_listener(ALL, functools.partial(PrefixListener, "--"))
    with pytest.raises(TypeError):
        registry.add_listener(ALL, lambda: PrefixListener("--"))

    register(registry)
    assert _identities(registry) == ["Script", "Audit", LISTENER_IDENTITY]


def test_shell_keeps_working_after_rejected_factory(shell, session):
    with pytest.raises(TypeError):
        shell.ctx.registry.add_listener(ALL, functools.partial(PrefixListener, "--"))

    shell.execute("script mle.py register")
    assert shell.execute("select 1 from dual") is False
    assert session.scripts == ["select 1 from dual"]
