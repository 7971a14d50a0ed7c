"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from newsview.config import (
    ConsoleOutputConfig,
    GNewsConfig,
    HtmlOutputConfig,
    NewsViewConfig,
    PlaceholderConfig,
    ViewerConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from newsview.config.factory import create_client, create_renderer, create_target
from newsview.controller import NewsController
from newsview.data import CategoryIntent
from newsview.render.console import ConsoleTarget
from newsview.render.html import HtmlPage
from newsview.render.renderer import placeholder_image_url
from newsview.search.gnews import GNewsClient


def _load(yaml_content: str) -> NewsViewConfig:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(yaml_content)
        f.flush()
        return load_config(Path(f.name))


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_gnews_config_defaults(self) -> None:
        config = GNewsConfig()
        assert config.base_url == "https://gnews.io/api/v4"
        assert config.lang == "en"
        assert config.country == "us"
        assert config.api_key is None

    def test_viewer_config_defaults(self) -> None:
        config = ViewerConfig()
        assert config.default_category == "general"
        assert config.drop_stale_responses is True

    def test_viewer_config_normalizes_category(self) -> None:
        assert ViewerConfig(default_category="Sports").default_category == "sports"

    def test_viewer_config_rejects_unknown_category(self) -> None:
        with pytest.raises(ValidationError):
            ViewerConfig(default_category="weather")

    def test_placeholder_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PlaceholderConfig(width=0)

    def test_root_defaults(self) -> None:
        config = NewsViewConfig()
        assert isinstance(config.output, ConsoleOutputConfig)
        assert config.placeholder.width == 600
        assert config.logging.level == "INFO"

    def test_configs_are_frozen(self) -> None:
        config = GNewsConfig()
        with pytest.raises(ValidationError):
            config.lang = "de"  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config_full(self) -> None:
        config = _load(
            """
gnews:
  lang: de
  country: de
  api_key: from-file
placeholder:
  width: 300
  height: 200
viewer:
  default_category: Technology
  drop_stale_responses: false
output:
  type: html
  path: out/news.html
logging:
  level: debug
"""
        )
        assert config.gnews.lang == "de"
        assert config.gnews.api_key == "from-file"
        assert config.placeholder.height == 200
        assert config.viewer.default_category == "technology"
        assert config.viewer.drop_stale_responses is False
        assert isinstance(config.output, HtmlOutputConfig)
        assert config.output.path == Path("out/news.html")
        assert config.logging.level == "DEBUG"

    def test_load_empty_file_gives_defaults(self) -> None:
        assert _load("") == NewsViewConfig()

    def test_load_unknown_output_type(self) -> None:
        with pytest.raises(ValidationError):
            _load("output:\n  type: pdf\n")

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_default_config_loads(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        config = load_config(path)
        assert isinstance(config.output, ConsoleOutputConfig)
        assert config.viewer.default_category == "general"


class TestFactory:
    """Tests for factory functions."""

    def test_create_client(self) -> None:
        client = create_client(GNewsConfig(api_key="k", lang="fr", country="ca"))
        assert isinstance(client, GNewsClient)
        _, params = client.build_request(CategoryIntent("sports"))
        assert params["lang"] == "fr"
        assert params["country"] == "ca"
        assert params["token"] == "k"

    def test_create_client_without_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GNEWS_API_KEY", raising=False)
        with pytest.raises(ValueError, match="API key required"):
            create_client(GNewsConfig())

    def test_create_console_target(self) -> None:
        assert isinstance(create_target(ConsoleOutputConfig(), PlaceholderConfig()), ConsoleTarget)

    def test_create_html_target(self, tmp_path: Path) -> None:
        target = create_target(HtmlOutputConfig(path=tmp_path / "n.html"), PlaceholderConfig())
        assert isinstance(target, HtmlPage)
        assert target.path == tmp_path / "n.html"

    def test_create_renderer_uses_placeholder_size(self) -> None:
        renderer = create_renderer(ConsoleTarget(), PlaceholderConfig(width=100, height=50))
        assert renderer.placeholder_url == placeholder_image_url(100, 50)

    def test_create_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GNEWS_API_KEY", "env-key")
        controller, target = create_from_config(
            NewsViewConfig(viewer=ViewerConfig(default_category="health"))
        )
        assert isinstance(controller, NewsController)
        assert isinstance(target, ConsoleTarget)
        assert controller.state.active_category == "health"

    def test_create_from_config_html_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GNEWS_API_KEY", "env-key")
        _, target = create_from_config(NewsViewConfig(), html_override=str(tmp_path / "p.html"))
        assert isinstance(target, HtmlPage)
        assert target.path == tmp_path / "p.html"
