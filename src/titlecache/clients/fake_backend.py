"""Offline transport that answers title requests without a server."""

import random

import httpx

from titlecache.utils.logging import get_logger

logger = get_logger(__name__)

FAKE_TITLES = [
    "Hello, network!",
    "Did you know?",
    "Hey, here's a title!",
    "Why did the chicken cross the road?",
    "Bees knees",
]


class SkipNetworkTransport(httpx.AsyncBaseTransport):
    """httpx transport that serves canned titles instead of real requests.

    Titles are returned in order and wrap around. With a non-zero
    error_rate some requests fail with HTTP 500 instead.
    """

    def __init__(
        self,
        titles: list[str] | None = None,
        error_rate: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= error_rate <= 1.0:
            raise ValueError(f"error_rate must be between 0 and 1, got {error_rate}")
        self._titles = list(titles or FAKE_TITLES)
        if not self._titles:
            raise ValueError("titles must not be empty")
        self._error_rate = error_rate
        self._rng = rng or random.Random()
        self._index = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if self._error_rate and self._rng.random() < self._error_rate:
            logger.info("Fake backend returning error", url=str(request.url))
            return httpx.Response(500, text="Error", request=request)

        title = self._titles[self._index % len(self._titles)]
        self._index += 1
        return httpx.Response(200, json=title, request=request)
