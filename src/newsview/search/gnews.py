"""GNews API client."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from newsview.data import ArticleRecord, Category, CategoryIntent, QueryIntent, SearchIntent
from newsview.errors import HttpError, MalformedResponseError, NetworkError
from newsview.search.base import LoadingIndicator

logger = logging.getLogger(__name__)

GNEWS_API_URL = "https://gnews.io/api/v4"


@contextmanager
def _loading(indicator: LoadingIndicator | None) -> Iterator[None]:
    if indicator is None:
        yield
        return
    indicator.show_loading()
    try:
        yield
    finally:
        indicator.hide_loading()


class GNewsClient:
    """Fetch top headlines and search results from the GNews API.

    Args:
        api_key: GNews API token (defaults to GNEWS_API_KEY env var).
        base_url: API root, without trailing slash.
        lang: Language code for results (default: "en").
        country: Country code for results (default: "us").
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = GNEWS_API_URL,
        lang: str = "en",
        country: str = "us",
    ) -> None:
        self._api_key = api_key or os.environ.get("GNEWS_API_KEY")
        if not self._api_key:
            raise ValueError("GNews API key required. Pass api_key or set GNEWS_API_KEY env var.")
        self._base_url = base_url.rstrip("/")
        self._lang = lang
        self._country = country

    def build_request(self, intent: QueryIntent) -> tuple[str, dict[str, str]]:
        """Build the endpoint URL and query parameters for an intent.

        Non-empty search text produces a ``search`` request. Anything else
        produces a ``top-headlines`` request, defaulting to the general topic.

        Returns:
            Tuple of (url, params).
        """
        text = intent.text.strip() if isinstance(intent, SearchIntent) else ""
        if text:
            return (
                f"{self._base_url}/search",
                {
                    "q": text,
                    "lang": self._lang,
                    "country": self._country,
                    "token": self._api_key,  # type: ignore[dict-item]
                },
            )

        topic = intent.category.strip().lower() if isinstance(intent, CategoryIntent) else ""
        return (
            f"{self._base_url}/top-headlines",
            {
                "lang": self._lang,
                "country": self._country,
                "topic": topic or Category.GENERAL.value,
                "token": self._api_key,  # type: ignore[dict-item]
            },
        )

    async def fetch_news(
        self,
        intent: QueryIntent,
        *,
        loading: LoadingIndicator | None = None,
    ) -> list[ArticleRecord]:
        """Fetch the articles for a single intent.

        Args:
            intent: Category or search text to query.
            loading: Optional indicator, shown before the request and hidden
                afterwards on every exit path.

        Returns:
            The raw article records in API order.

        Raises:
            NetworkError: Transport failure or undecodable success body.
            HttpError: Non-success status.
            MalformedResponseError: Success body without an ``articles`` list.
        """
        url, params = self.build_request(intent)
        logger.debug("GET %s (%s)", url, {k: v for k, v in params.items() if k != "token"})

        with _loading(loading):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, params=params)
            except httpx.HTTPError as e:
                logger.warning("Error fetching news. Error: %s", e)
                raise NetworkError(str(e) or type(e).__name__) from e

            if not response.is_success:
                error = HttpError(_error_message(response), response.status_code)
                logger.warning("GNews returned %s: %s", response.status_code, error)
                raise error

            try:
                data = response.json()
            except ValueError as e:
                logger.warning("Could not decode GNews response. Error: %s", e)
                raise NetworkError(str(e)) from e

        articles = data.get("articles") if isinstance(data, dict) else None
        if not isinstance(articles, list):
            logger.warning("Unexpected GNews response format: %r", type(articles).__name__)
            raise MalformedResponseError()
        return articles


def _error_message(response: httpx.Response) -> str:
    """Join the messages of an error body, or describe the status."""
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        body: Any = response.json()
    except ValueError:
        return fallback

    errors = body.get("errors") if isinstance(body, dict) else None
    if not isinstance(errors, list):
        return fallback

    messages: list[str] = []
    for err in errors:
        if isinstance(err, dict):
            message = err.get("message")
            if message:
                messages.append(str(message))
        elif err:
            messages.append(str(err))
    return ", ".join(messages) or fallback
