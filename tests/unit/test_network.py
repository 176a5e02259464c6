"""Unit tests for the title network client."""

import httpx
import pytest
import respx
from httpx import Response

from titlecache.clients.fake_backend import SkipNetworkTransport
from titlecache.clients.network import TitleNetworkClient

BASE_URL = "https://titles.example.com"


class TestTitleNetworkClient:
    """Tests for TitleNetworkClient."""

    @pytest.fixture
    def client(self) -> TitleNetworkClient:
        """Create a test client."""
        return TitleNetworkClient(base_url=BASE_URL)

    @respx.mock
    async def test_fetch_json_title(self, client: TitleNetworkClient) -> None:
        """Should decode a JSON string body."""
        respx.get(f"{BASE_URL}/next_title.json").mock(
            return_value=Response(200, json="Next title")
        )

        title = await client.fetch_next_title()
        assert title == "Next title"
        await client.close()

    @respx.mock
    async def test_fetch_plain_text_title(self, client: TitleNetworkClient) -> None:
        """Should return a plain text body unchanged."""
        respx.get(f"{BASE_URL}/next_title.json").mock(
            return_value=Response(200, text="Plain title")
        )

        title = await client.fetch_next_title()
        assert title == "Plain title"
        await client.close()

    @respx.mock
    async def test_fetch_error_status_raises(self, client: TitleNetworkClient) -> None:
        """Should raise on an HTTP error status."""
        respx.get(f"{BASE_URL}/next_title.json").mock(return_value=Response(500, text="Error"))

        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_next_title()
        await client.close()

    @respx.mock
    async def test_fetch_connection_error_raises(self, client: TitleNetworkClient) -> None:
        """Should let transport errors through."""
        respx.get(f"{BASE_URL}/next_title.json").mock(
            side_effect=httpx.ConnectError("refused")
        )

        with pytest.raises(httpx.ConnectError):
            await client.fetch_next_title()
        await client.close()

    @respx.mock
    async def test_fetch_non_string_json_raises(self, client: TitleNetworkClient) -> None:
        """Should reject a JSON body that is not a string."""
        respx.get(f"{BASE_URL}/next_title.json").mock(
            return_value=Response(
                200, content=b"null", headers={"content-type": "application/json"}
            )
        )

        with pytest.raises(ValueError, match="NoneType"):
            await client.fetch_next_title()
        await client.close()

    async def test_fetch_through_fake_transport(self) -> None:
        """Should work against the offline transport."""
        transport = SkipNetworkTransport(titles=["one", "two"])
        async with TitleNetworkClient(base_url="http://localhost", transport=transport) as client:
            assert await client.fetch_next_title() == "one"
            assert await client.fetch_next_title() == "two"
