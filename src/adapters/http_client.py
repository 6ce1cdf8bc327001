"""Wrapper de httpx.

Estandariza timeouts, headers y redirects de todas las descargas de módulos.
Acepta un `transport` para sustituir la red en tests (`httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros."""

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/javascript,text/javascript,text/plain;q=0.9,*/*;q=0.8",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
