import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ..config import Settings

logger = logging.getLogger(__name__)


def build_tmdb_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """
    Create the HTTP client shared by every request to TMDB.
    Base URL, bearer token and timeout are fixed for the life of the process.
    Redirects are followed, only the final response is checked.

    :param settings: Application settings holding the TMDB configuration.
    :param transport: Optional transport, the network is used when omitted.
    :return: Configured httpx.AsyncClient
    """
    return httpx.AsyncClient(
        base_url=settings.TMDB_BASE_URL,
        timeout=settings.TMDB_TIMEOUT,
        follow_redirects=True,
        transport=transport,
        headers={
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'Authorization': f"Bearer {settings.TMDB_ACCESS_TOKEN}",
        },
    )


def clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Drop unset query parameters so they are not sent upstream."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}


class TMDBClient:
    """Thin wrapper performing authenticated GET calls against TMDB."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        GET a TMDB path and return the decoded JSON body.

        :param path: Path relative to the base URL, e.g. '/3/movie/550'
        :param params: Query parameters, None values are dropped
        :return: Decoded JSON body of a 2xx response, None when the body is empty
        :raises httpx.HTTPStatusError: upstream answered with an error status
        :raises httpx.TransportError: no response was received
        """
        logger.debug("GET %s", path)
        resp = await self._http.get(path, params=clean_params(params))
        resp.raise_for_status()
        if not resp.content:
            return None
        return resp.json()

    async def aclose(self) -> None:
        await self._http.aclose()
