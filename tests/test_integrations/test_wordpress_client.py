"""Tests for the WordPress REST client."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from genesis.errors import ConfigurationError, NetworkError
from genesis.integrations.wordpress_client import (
    PostReference,
    WordPressClient,
    markdown_to_html,
)

POSTS_JSON = [
    {"id": 42, "title": {"rendered": "Moagem ideal"}, "link": "https://blog.exemplo.com/moagem"},
    {"id": 7, "title": {"rendered": "Métodos"}, "link": "https://blog.exemplo.com/metodos"},
    {"id": 9, "title": "sem rendered", "link": "https://blog.exemplo.com/x"},
]


def _response(payload, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.is_error = status_code >= 400
    response.json = Mock(return_value=payload)
    return response


@pytest.fixture
def client() -> WordPressClient:
    return WordPressClient("https://blog.exemplo.com/", "editor", "abcd efgh ijkl", cache_ttl=300)


class TestConfiguration:
    def test_normalizes_site_and_password(self, client):
        assert client.site_url == "https://blog.exemplo.com"
        assert client.app_password == "abcdefghijkl"
        assert client.posts_url == "https://blog.exemplo.com/wp-json/wp/v2/posts"
        assert client.is_configured

    def test_missing_credentials_not_configured(self):
        assert not WordPressClient(None, None, None).is_configured
        assert not WordPressClient("https://b", "editor", None).is_configured

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("WP_SITE_URL", "https://blog.exemplo.com")
        monkeypatch.setenv("WP_USERNAME", "editor")
        monkeypatch.setenv("WP_APP_PASSWORD", "abcd efgh")
        monkeypatch.setenv("WP_POSTS_CACHE_TTL", "60")

        client = WordPressClient.from_settings()

        assert client.is_configured
        assert client.app_password == "abcdefgh"
        assert client.cache_ttl == 60.0

    @pytest.mark.asyncio
    async def test_list_posts_requires_configuration(self):
        with pytest.raises(ConfigurationError, match="WordPress is not configured"):
            await WordPressClient(None, None, None).list_posts()


class TestListPosts:
    @pytest.mark.asyncio
    async def test_maps_posts_and_skips_malformed(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(return_value=_response(POSTS_JSON))

            posts = await client.list_posts()

            assert posts == (
                PostReference(42, "Moagem ideal", "https://blog.exemplo.com/moagem"),
                PostReference(7, "Métodos", "https://blog.exemplo.com/metodos"),
            )

    @pytest.mark.asyncio
    async def test_request_uses_basic_auth_and_page_size(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(return_value=_response(POSTS_JSON))

            await client.list_posts()

            args, kwargs = mock_instance.get.call_args
            assert args[0] == "https://blog.exemplo.com/wp-json/wp/v2/posts"
            assert kwargs["params"] == {"per_page": 50}
            assert isinstance(kwargs["auth"], httpx.BasicAuth)

    @pytest.mark.asyncio
    async def test_second_call_uses_cache(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(return_value=_response(POSTS_JSON))

            first = await client.list_posts()
            second = await client.list_posts()

            assert second == first
            assert mock_instance.get.await_count == 1

    @pytest.mark.asyncio
    async def test_force_refresh_bypasses_cache(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(return_value=_response(POSTS_JSON))

            await client.list_posts()
            await client.list_posts(force_refresh=True)

            assert mock_instance.get.await_count == 2

    @pytest.mark.asyncio
    async def test_expired_cache_refetches(self, client):
        client.cache_ttl = 0

        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(return_value=_response(POSTS_JSON))

            await client.list_posts()
            await client.list_posts()

            assert mock_instance.get.await_count == 2

    @pytest.mark.asyncio
    async def test_http_error_status(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(return_value=_response({}, status_code=401))

            with pytest.raises(NetworkError) as exc_info:
                await client.list_posts()

            assert exc_info.value.status_code == 401
            assert exc_info.value.api_name == "wordpress"

    @pytest.mark.asyncio
    async def test_transport_error(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(side_effect=httpx.ConnectError("refused"))

            with pytest.raises(NetworkError, match="Could not reach WordPress"):
                await client.list_posts()

    @pytest.mark.asyncio
    async def test_html_body_raises_network_error(self, client):
        response = _response(None)
        response.json = Mock(side_effect=ValueError("Expecting value: line 1 column 1 (char 0)"))

        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(return_value=response)

            with pytest.raises(NetworkError, match="non-JSON post list") as exc_info:
                await client.list_posts()

            assert exc_info.value.status_code == 200
            assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_non_list_payload_raises_network_error(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.get = AsyncMock(
                return_value=_response({"code": "rest_disabled", "message": "REST API disabled"})
            )

            with pytest.raises(NetworkError, match="not a JSON array"):
                await client.list_posts()


class TestPublishPost:
    @pytest.mark.asyncio
    async def test_posts_html_content(self, client):
        created = {"id": 101, "link": "https://blog.exemplo.com/?p=101"}

        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.post = AsyncMock(return_value=_response(created, status_code=201))

            post = await client.publish_post("Café especial", "# Título\n\nTexto", status="draft")

            assert post == created
            payload = mock_instance.post.call_args.kwargs["json"]
            assert payload["title"] == "Café especial"
            assert payload["status"] == "draft"
            assert "<h1>Título</h1>" in payload["content"]
            assert "<p>Texto</p>" in payload["content"]

    @pytest.mark.asyncio
    async def test_invalid_status_rejected(self, client):
        with pytest.raises(ValueError, match="status"):
            await client.publish_post("Título", "Texto", status="scheduled")

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, client):
        with pytest.raises(ValueError, match="content"):
            await client.publish_post("Título", "  ")

    @pytest.mark.asyncio
    async def test_error_status(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_instance = mock_client.return_value.__aenter__.return_value
            mock_instance.post = AsyncMock(return_value=_response({}, status_code=500))

            with pytest.raises(NetworkError) as exc_info:
                await client.publish_post("Título", "Texto")

            assert exc_info.value.status_code == 500


class TestMarkdownToHtml:
    def test_anchors_survive_conversion(self):
        html = markdown_to_html(
            'Veja <a href="https://b/m" class="internal-link" target="_blank">Moagem</a>.'
        )

        assert 'class="internal-link"' in html

    def test_tables_are_rendered(self):
        html = markdown_to_html("| A | B |\n|---|---|\n| 1 | 2 |")

        assert "<table>" in html
