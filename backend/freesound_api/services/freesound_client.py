from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import httpx

from ..core.config import settings
from ..core.errors import FreesoundApiError, FreesoundAuthError, FreesoundTransportError
from ..schemas.freesound import SearchResponse, Sound
from ..utils.http import create_async_client
from .query_builder import QueryPairs, as_names, render_flag
from .response_mapper import decode_search_response, decode_sound


logger = logging.getLogger(__name__)

# Known public sound used to check that a key is accepted.
PROBE_SOUND_ID = 794253


def _error_detail(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict) and isinstance(data.get("detail"), str):
        return data["detail"]
    return resp.text


def _raise_for_status(resp: httpx.Response) -> None:
    if resp.is_success:
        return
    body = resp.text
    logger.warning("Freesound request failed: status=%s url=%s", resp.status_code, resp.request.url.path)
    raise FreesoundApiError(
        f"API request failed: {resp.status_code} - {_error_detail(resp)}",
        status_code=resp.status_code,
        body=body,
    )


class FreesoundClient:
    """Async client for the Freesound APIv2.

    The API key is sent as the ``token`` query parameter on every request.
    Each call is a single round trip; nothing is retried or cached.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        resolved_key = (api_key or "").strip() or settings.freesound_token
        if not resolved_key:
            raise FreesoundAuthError("FREESOUND_TOKEN is not configured.")
        self._api_key = resolved_key
        self._base_url = (base_url or settings.freesound_base_url).rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client or create_async_client()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> FreesoundClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: Sequence[tuple[str, str]] | None = None,
    ) -> httpx.Response:
        url = f"{self._base_url}/{path.lstrip('/')}"
        query: QueryPairs = [("token", self._api_key), *(params or [])]
        logger.debug("Freesound %s %s params=%s", method, url, [k for k, _ in query[1:]])
        try:
            return await self._http.request(method, url, params=query)
        except httpx.RequestError as e:
            logger.warning("Freesound network error on %s %s: %s", method, url, e)
            raise FreesoundTransportError(f"HTTP request failed: {e}") from e

    async def test_api_key(self) -> None:
        """Raise unless the configured key is accepted by the server."""
        resp = await self.request("GET", f"sounds/{PROBE_SOUND_ID}/")

        if resp.status_code == httpx.codes.UNAUTHORIZED:
            logger.warning("Freesound rejected the API key")
            raise FreesoundAuthError("Invalid API key")
        _raise_for_status(resp)

        body = resp.text
        try:
            data = resp.json()
        except ValueError as e:
            raise FreesoundApiError(
                f"Invalid JSON response: {e} - {body}", status_code=resp.status_code, body=body
            ) from e
        if not isinstance(data, dict) or data.get("id") is None:
            raise FreesoundApiError(
                f"Response missing sound ID: {body}", status_code=resp.status_code, body=body
            )

    async def search(self, query: Sequence[tuple[str, str]]) -> SearchResponse:
        """Run a text search with pairs rendered by ``SearchQueryBuilder.build``."""
        resp = await self.request("GET", "search/text/", query)
        _raise_for_status(resp)
        return decode_search_response(resp.content)

    async def get_sound(
        self,
        sound_id: int,
        descriptors: str | Iterable[str] | None = None,
        normalized: bool | None = None,
    ) -> Sound:
        params: QueryPairs = []
        names = as_names(descriptors)
        if names is not None:
            params.append(("descriptors", ",".join(names)))
        if normalized is not None:
            params.append(("normalized", render_flag(normalized)))

        resp = await self.request("GET", f"sounds/{int(sound_id)}/", params)
        _raise_for_status(resp)
        return decode_sound(resp.content)
