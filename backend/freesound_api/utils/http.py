from __future__ import annotations

import httpx

from ..core.config import settings


def create_async_client(timeout_s: float | None = None) -> httpx.AsyncClient:
    resolved = settings.http_timeout_s if timeout_s is None else timeout_s
    return httpx.AsyncClient(timeout=httpx.Timeout(resolved))
