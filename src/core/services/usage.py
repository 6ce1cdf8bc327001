"""Textos de ayuda y versión.

Todo se escribe como texto plano en el canal de salida (rich `Console`),
sin interpretar markup: los diagnósticos contienen `<...>` y `'[...]'`.
"""

from __future__ import annotations

from rich.console import Console

from core import __version__


def write(console: Console, text: str) -> None:
    """Escribe `text` tal cual, sin salto de línea añadido."""

    console.print(text, end="", markup=False, highlight=False, soft_wrap=True)


def get_version() -> str:
    return __version__


def print_version(console: Console) -> None:
    write(console, f"MLE version {get_version()}\n\n")


def print_usage(console: Console, *, as_command: bool, keyword: str, script_name: str) -> None:
    """Pantalla de ayuda.

    En la forma de comando registrado (`as_command=True`) no aparece
    `register`: el comando ya está registrado.
    """

    print_version(console)
    if as_command:
        write(console, f"usage: {keyword} {{subcommand}} [options]\n\n")
    else:
        write(console, f"usage: script {script_name} {{subcommand}} [options]\n\n")
    write(console, "Valid subcommands and options are:\n\n")
    write(console, "- install <moduleName> {<url>|<fileName>} [<version>]\n")
    write(console, "  Installs an MLE module from a file or URL.\n\n")
    if not as_command:
        write(console, "- register\n")
        write(console, f"  Registers '{keyword}' as a shell command.\n\n")
    write(console, "- help\n")
    write(console, "  Shows this screen.\n\n")
    write(console, "- version\n")
    write(console, "  Print version and exit.\n\n")
