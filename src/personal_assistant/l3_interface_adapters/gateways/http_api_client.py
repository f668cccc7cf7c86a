"""Gateway: httpx client for the backend API — implements AssistantApi port."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from personal_assistant.l1_entities.errors import ApiUnavailableError

log = logging.getLogger('pa.client')

DEFAULT_API_URL = 'http://localhost:3001/api'


class HttpAssistantApi:
    """Talks to the ``/api`` endpoints. Transport failures and non-JSON replies become ApiUnavailableError."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout, transport=self._transport)
        return self._http

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client().request(method, path, **kwargs)
        except httpx.TransportError as e:
            log.warning('%s %s failed: %s', method, path, e)
            raise ApiUnavailableError(f'Cannot reach {self._base_url}: {e}') from e

    async def _json(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        resp = await self._request(method, path, **kwargs)
        return _decode(resp, method, path)

    async def status(self) -> dict[str, Any]:
        resp = await self._request('GET', '/status')
        if resp.status_code != 200:
            raise ApiUnavailableError(f'Status check failed with HTTP {resp.status_code}')
        return _decode(resp, 'GET', '/status')

    async def history(self) -> dict[str, Any]:
        return await self._json('GET', '/history')

    async def clear_history(self) -> dict[str, Any]:
        return await self._json('DELETE', '/history')

    async def settings(self) -> dict[str, Any]:
        return await self._json('GET', '/settings')

    async def update_settings(self, partial: dict[str, Any]) -> dict[str, Any]:
        return await self._json('PUT', '/settings', json=partial)

    async def send(self, message: str) -> dict[str, Any]:
        return await self._json('POST', '/chat', json={'message': message})

    async def export(self, destination: Path) -> Path:
        resp = await self._request('GET', '/export')
        if resp.status_code != 200:
            raise ApiUnavailableError(f'Export failed with HTTP {resp.status_code}')
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(resp.content)
        return destination


def _decode(resp: httpx.Response, method: str, path: str) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError as e:
        raise ApiUnavailableError(f'{method} {path} returned HTTP {resp.status_code} without JSON') from e
    if not isinstance(data, dict):
        raise ApiUnavailableError(f'{method} {path} returned unexpected payload')
    return data
