"""Pydantic configuration models for newsview components."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

from newsview.data import Category
from newsview.search.gnews import GNEWS_API_URL

# ============================================================
# Client Config
# ============================================================


class GNewsConfig(BaseModel):
    """Configuration for GNewsClient."""

    base_url: str = GNEWS_API_URL
    lang: str = "en"
    country: str = "us"
    api_key: str | None = None

    model_config = {"frozen": True}


# ============================================================
# Rendering Config
# ============================================================


class PlaceholderConfig(BaseModel):
    """Size of the generated placeholder image."""

    width: int = Field(default=600, gt=0)
    height: int = Field(default=400, gt=0)

    model_config = {"frozen": True}


class ViewerConfig(BaseModel):
    """Behaviour of the interaction layer."""

    default_category: str = Category.GENERAL.value
    drop_stale_responses: bool = True

    model_config = {"frozen": True}

    @field_validator("default_category")
    @classmethod
    def category_must_be_known(cls, v: str) -> str:
        return Category.parse(v).value


# ============================================================
# Output Configs
# ============================================================


class ConsoleOutputConfig(BaseModel):
    """Print articles to stdout."""

    type: Literal["console"] = "console"

    model_config = {"frozen": True}


class HtmlOutputConfig(BaseModel):
    """Write articles to a static HTML page."""

    type: Literal["html"] = "html"
    path: Path = Path("news.html")

    model_config = {"frozen": True}


OutputConfig = Annotated[
    ConsoleOutputConfig | HtmlOutputConfig,
    Field(discriminator="type"),
]


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Diagnostic logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


# ============================================================
# Root Config
# ============================================================


class NewsViewConfig(BaseModel):
    """Root configuration for newsview."""

    gnews: GNewsConfig = Field(default_factory=GNewsConfig)
    placeholder: PlaceholderConfig = Field(default_factory=PlaceholderConfig)
    viewer: ViewerConfig = Field(default_factory=ViewerConfig)
    output: ConsoleOutputConfig | HtmlOutputConfig = Field(
        default_factory=ConsoleOutputConfig, discriminator="type"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
