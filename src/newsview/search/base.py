from typing import Protocol

from newsview.data import ArticleRecord, QueryIntent


class LoadingIndicator(Protocol):
    """Anything that can show and hide a loading state."""

    def show_loading(self) -> None: ...

    def hide_loading(self) -> None: ...


class NewsFetcher(Protocol):
    """Interface for fetching raw article records for a query intent."""

    async def fetch_news(
        self,
        intent: QueryIntent,
        *,
        loading: LoadingIndicator | None = None,
    ) -> list[ArticleRecord]:
        """Fetch articles matching the intent.

        Args:
            intent: Category or search text to query.
            loading: Optional indicator toggled around the request.

        Returns:
            The raw article records in API order.

        Raises:
            FetchError: If the request fails or the response is malformed.
        """
        ...
