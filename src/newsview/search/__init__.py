"""News fetchers."""

from newsview.search.base import LoadingIndicator, NewsFetcher
from newsview.search.gnews import GNewsClient

__all__ = ["GNewsClient", "LoadingIndicator", "NewsFetcher"]
