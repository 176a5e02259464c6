"""HTTP client for the title backend."""

from typing import Protocol

import httpx

from titlecache.utils.logging import get_logger

logger = get_logger(__name__)

NEXT_TITLE_PATH = "/next_title.json"


class MainNetwork(Protocol):
    """Anything that can fetch the next title."""

    async def fetch_next_title(self) -> str: ...


class TitleNetworkClient:
    """Client for fetching titles from the backend over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "TitleNetworkClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def fetch_next_title(self) -> str:
        """Fetch the next title from the backend.

        Returns:
            The title text.

        Raises:
            httpx.HTTPError: If the request fails or returns an error status.
        """
        logger.debug("Fetching next title")
        response = await self._client.get(NEXT_TITLE_PATH)
        response.raise_for_status()
        title = self._parse_title(response)
        logger.info("Fetched next title", title=title)
        return title

    @staticmethod
    def _parse_title(response: httpx.Response) -> str:
        """Read the title from a JSON string body or a plain text body."""
        if "json" in response.headers.get("content-type", ""):
            data = response.json()
            if not isinstance(data, str):
                raise ValueError(f"Expected a JSON string title, got {type(data).__name__}")
            return data
        return response.text
