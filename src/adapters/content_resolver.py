"""Resolución del contenido de un módulo: URL primero, fichero después.

Orden (estricto):
1) `location` como URL absoluta (`http`, `https` o `file`). Cualquier fallo
   (URL mal formada, esquema no soportado, red, status no 2xx) se descarta
   en silencio y se pasa al paso 2.
2) `location` como ruta local, leída como UTF-8.
3) Si ambos fallan: `ResolutionError(location)`.

Un texto que parece URL pero no resuelve se sigue intentando como ruta (p.ej.
una ruta relativa con `:`).
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from adapters.http_client import build_client
from core.config import AppSettings, load_settings
from core.domain.errors import ResolutionError

logger = logging.getLogger(__name__)

_HTTP_SCHEMES = frozenset({"http", "https"})


class ContentResolver:
    """Obtiene el texto de un módulo desde una URL o un fichero local."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._transport = transport

    def __call__(self, location: str) -> str:
        return self.resolve(location)

    def resolve(self, location: str) -> str:
        try:
            return self._read_url(location)
        except Exception as exc:
            logger.debug("'%s' is not a readable URL (%s), trying as file", location, exc)

        try:
            return self._read_file(Path(location))
        except Exception as exc:
            logger.debug("'%s' is not a readable file (%s)", location, exc)

        raise ResolutionError(location)

    def _read_url(self, location: str) -> str:
        url = httpx.URL(location)
        if url.scheme == "file":
            return self._read_file(Path(url.path))
        if url.scheme not in _HTTP_SCHEMES or not url.host:
            raise ValueError(f"not an absolute http(s) URL: {location!r}")

        with build_client(self._settings, transport=self._transport) as client:
            response = client.get(url)
            response.raise_for_status()
        logger.info("fetched %d bytes from %s", len(response.content), url)
        return response.content.decode("utf-8", errors="replace")

    @staticmethod
    def _read_file(path: Path) -> str:
        text = path.read_text(encoding="utf-8")
        logger.info("read %d characters from %s", len(text), path)
        return text
