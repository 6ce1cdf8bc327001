from __future__ import annotations

import io

import pytest
from rich.console import Console

from adapters.shell import CommandRegistry, Shell, ShellContext, default_registry
from core.config import AppSettings


class RecordingSession:
    def __init__(self) -> None:
        self.scripts: list[str] = []

    def run(self, script: str) -> None:
        self.scripts.append(script)


class Output:
    """rich Console writing into a buffer."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        self.console = Console(file=self.buffer, width=200, force_terminal=False, color_system=None)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


def fake_resolver(files: dict[str, str]):
    from core.domain.errors import ResolutionError

    def resolve(location: str) -> str:
        if location not in files:
            raise ResolutionError(location)
        return files[location]

    return resolve


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def output() -> Output:
    return Output()


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()


@pytest.fixture
def registry() -> CommandRegistry:
    return default_registry()


@pytest.fixture
def ctx(output: Output, session: RecordingSession, settings: AppSettings, registry: CommandRegistry) -> ShellContext:
    return ShellContext(
        console=output.console,
        session=session,
        settings=settings,
        registry=registry,
        resolver=fake_resolver({"util.js": "export function f() {}"}),
    )


@pytest.fixture
def shell(ctx: ShellContext) -> Shell:
    return Shell(ctx)
