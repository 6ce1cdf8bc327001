"""Componentes de UI para CLI (Rich)."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.config import AppSettings
from core.services.usage import get_version


def print_banner(console: Console, settings: AppSettings) -> None:
    """Banner del shell interactivo."""

    title = Text(f"MLE shell {get_version()}", style="bold cyan")
    subtitle = Text(
        f"script {settings.script_name} help  •  {settings.keyword} help (after register)  •  exit",
        style="dim",
    )
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))
