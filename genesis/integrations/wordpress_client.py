"""WordPress REST API client.

Lists existing posts (the registry used for internal links) and publishes
generated articles. Authentication uses an application password over HTTP
basic auth.

Example:
    >>> client = WordPressClient.from_settings()
    >>> posts = await client.list_posts()
    >>> await client.publish_post("Título", "# Artigo", status="draft")
"""

import logging
import time
from dataclasses import dataclass

import httpx
import markdown

from genesis.errors import ConfigurationError, NetworkError
from genesis.utils.config import get_settings

logger = logging.getLogger(__name__)

API_NAME = "wordpress"
POSTS_PER_PAGE = 50
PUBLISH_STATUSES = ("draft", "publish", "pending", "private")


@dataclass(frozen=True)
class PostReference:
    """An existing post that internal links can point to."""

    id: int
    title: str
    link: str


def markdown_to_html(content: str) -> str:
    """Render article Markdown to the HTML WordPress stores."""
    return markdown.markdown(content, extensions=["extra", "sane_lists"])


class WordPressClient:
    """Client for one WordPress site.

    The post list is cached per site URL for ``cache_ttl`` seconds so repeated
    generation runs do not refetch it.
    """

    def __init__(
        self,
        site_url: str | None,
        username: str | None,
        app_password: str | None,
        *,
        timeout: float = 30.0,
        cache_ttl: float = 300.0,
    ):
        self.site_url = (site_url or "").strip().rstrip("/")
        self.username = username or ""
        # WordPress displays application passwords in space-separated groups
        self.app_password = "".join((app_password or "").split())
        self.timeout = timeout
        self.cache_ttl = cache_ttl

        self._posts: tuple[PostReference, ...] = ()
        self._fetched_at: float | None = None
        self._cached_site: str = ""

    @classmethod
    def from_settings(cls) -> "WordPressClient":
        """Build a client from WP_* settings."""
        settings = get_settings()
        return cls(
            settings.WP_SITE_URL,
            settings.WP_USERNAME,
            settings.get_wp_app_password(),
            timeout=float(settings.API_TIMEOUT),
            cache_ttl=float(settings.WP_POSTS_CACHE_TTL),
        )

    @property
    def is_configured(self) -> bool:
        """True when site URL, username and password are all present."""
        return bool(self.site_url and self.username and self.app_password)

    @property
    def posts_url(self) -> str:
        return f"{self.site_url}/wp-json/wp/v2/posts"

    def _require_configuration(self) -> None:
        if not self.is_configured:
            raise ConfigurationError(
                "WordPress is not configured (WP_SITE_URL, WP_USERNAME, WP_APP_PASSWORD)",
                setting="WP_SITE_URL",
            )

    def _auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.username, self.app_password)

    def _cache_is_fresh(self) -> bool:
        if not self._posts or self._fetched_at is None:
            return False
        if self._cached_site != self.site_url:
            return False
        return (time.monotonic() - self._fetched_at) < self.cache_ttl

    async def list_posts(self, *, force_refresh: bool = False) -> tuple[PostReference, ...]:
        """Fetch the latest posts as link targets.

        Args:
            force_refresh: Ignore the cached list

        Returns:
            Tuple of PostReference, newest first (WordPress default order)

        Raises:
            ConfigurationError: If credentials are missing
            NetworkError: On transport failure, non-2xx status or a body that
                is not a JSON list
        """
        self._require_configuration()

        if not force_refresh and self._cache_is_fresh():
            logger.debug("Using cached WordPress posts for %s", self.site_url)
            return self._posts

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.posts_url,
                    params={"per_page": POSTS_PER_PAGE},
                    auth=self._auth(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise NetworkError(f"Could not reach WordPress: {e}", API_NAME) from e

        if response.is_error:
            raise NetworkError(
                f"WordPress returned HTTP {response.status_code} listing posts",
                API_NAME,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise NetworkError(
                "WordPress returned a non-JSON post list",
                API_NAME,
                status_code=response.status_code,
            ) from e

        if not isinstance(data, list):
            raise NetworkError(
                "WordPress post list is not a JSON array",
                API_NAME,
                status_code=response.status_code,
            )

        posts = []
        for raw in data:
            try:
                posts.append(
                    PostReference(
                        id=int(raw["id"]),
                        title=raw["title"]["rendered"],
                        link=raw["link"],
                    )
                )
            except (KeyError, TypeError, ValueError):
                # Skip entries missing id/title/link
                continue

        self._posts = tuple(posts)
        self._fetched_at = time.monotonic()
        self._cached_site = self.site_url

        logger.info(
            "Fetched %d WordPress posts",
            len(self._posts),
            extra={"extra_fields": {"site_url": self.site_url}},
        )
        return self._posts

    async def publish_post(self, title: str, content: str, *, status: str = "draft") -> dict:
        """Publish a Markdown article.

        Args:
            title: Post title
            content: Article body in Markdown (inline HTML anchors are kept)
            status: WordPress post status

        Returns:
            The created post object returned by WordPress

        Raises:
            ValueError: If title/content are empty or status is unknown
            ConfigurationError: If credentials are missing
            NetworkError: On transport failure or non-2xx status
        """
        if not title or not title.strip():
            raise ValueError("title cannot be empty")

        if not content or not content.strip():
            raise ValueError("content cannot be empty")

        if status not in PUBLISH_STATUSES:
            raise ValueError(f"status must be one of {PUBLISH_STATUSES}, got '{status}'")

        self._require_configuration()

        payload = {
            "title": title.strip(),
            "content": markdown_to_html(content),
            "status": status,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.posts_url,
                    json=payload,
                    auth=self._auth(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise NetworkError(f"Could not reach WordPress: {e}", API_NAME) from e

        if response.is_error:
            raise NetworkError(
                f"WordPress returned HTTP {response.status_code} publishing post",
                API_NAME,
                status_code=response.status_code,
            )

        post = response.json()
        logger.info(
            "Published WordPress post",
            extra={"extra_fields": {"post_id": post.get("id"), "status": status}},
        )
        return post
