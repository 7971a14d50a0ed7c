"""newsview: browse GNews headlines by category or search."""

from newsview.config import NewsViewConfig, create_from_config, load_config
from newsview.controller import CycleResult, NewsController, ViewState
from newsview.data import (
    ArticleRecord,
    Category,
    CategoryIntent,
    DisplayArticle,
    EmptyResults,
    QueryIntent,
    SearchIntent,
)
from newsview.errors import FetchError, HttpError, MalformedResponseError, NetworkError
from newsview.render import (
    ArticleRenderer,
    ConsoleTarget,
    HtmlPage,
    RenderTarget,
    StatusDisplay,
    format_date,
    placeholder_image_url,
)
from newsview.search import GNewsClient, LoadingIndicator, NewsFetcher

__all__ = [
    # Models
    "ArticleRecord",
    "Category",
    "CategoryIntent",
    "DisplayArticle",
    "EmptyResults",
    "QueryIntent",
    "SearchIntent",
    # Errors
    "FetchError",
    "HttpError",
    "MalformedResponseError",
    "NetworkError",
    # Protocols
    "LoadingIndicator",
    "NewsFetcher",
    "RenderTarget",
    "StatusDisplay",
    # Fetching
    "GNewsClient",
    # Rendering
    "ArticleRenderer",
    "ConsoleTarget",
    "HtmlPage",
    "format_date",
    "placeholder_image_url",
    # Interaction
    "CycleResult",
    "NewsController",
    "ViewState",
    # Config
    "NewsViewConfig",
    "create_from_config",
    "load_config",
]
