"""Tokenizer de líneas de comando.

Reglas:
- `"..."` es un único token, sin comillas.
- Cualquier otra secuencia de caracteres que no sean espacio en blanco
  (espacio, tabulador, salto de línea) es un token.
- No hay escapes: la primera comilla de cierre termina el token. Una comilla
  sin cerrar forma parte de un token normal.
"""

from __future__ import annotations

import re

_TOKEN_RE = re.compile(r'("([^"]*)")|(\S+)')


def tokenize(line: str) -> list[str]:
    """Divide `line` en tokens, respetando el orden de aparición."""

    tokens: list[str] = []
    for match in _TOKEN_RE.finditer(line.strip()):
        plain = match.group(3)
        tokens.append(plain if plain is not None else match.group(2))
    return tokens
