"""Render targets and the article renderer."""

from newsview.render.base import RenderTarget, StatusDisplay
from newsview.render.console import ConsoleTarget
from newsview.render.html import HtmlPage
from newsview.render.renderer import ArticleRenderer, format_date, placeholder_image_url

__all__ = [
    "ArticleRenderer",
    "ConsoleTarget",
    "HtmlPage",
    "RenderTarget",
    "StatusDisplay",
    "format_date",
    "placeholder_image_url",
]
