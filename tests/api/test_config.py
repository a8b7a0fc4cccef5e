"""Unit tests for ApiConfig."""

import pytest

from artwork_browser.api import API_BASE_ENV_VAR, DEFAULT_API_BASE, ApiConfig


class TestApiConfig:

    def test_init_when_defaults_then_public_endpoint(self):
        config = ApiConfig()
        assert config.base_url == DEFAULT_API_BASE
        assert config.page_size == 12
        assert config.timeout > 0

    @pytest.mark.parametrize("url", ["", "ftp://example.org", "example.org/artworks"])
    def test_init_when_not_http_url_then_raises(self, url):
        with pytest.raises(ValueError, match="base_url"):
            ApiConfig(base_url=url)

    def test_init_when_timeout_not_positive_then_raises(self):
        with pytest.raises(ValueError, match="timeout"):
            ApiConfig(timeout=0)

    def test_init_when_page_size_zero_then_raises(self):
        with pytest.raises(ValueError, match="page_size"):
            ApiConfig(page_size=0)

    def test_from_env_when_unset_then_default(self):
        assert ApiConfig.from_env({}) == ApiConfig()

    def test_from_env_when_blank_then_default(self):
        assert ApiConfig.from_env({API_BASE_ENV_VAR: "   "}).base_url == DEFAULT_API_BASE

    def test_from_env_when_set_then_trailing_slash_stripped(self):
        config = ApiConfig.from_env({API_BASE_ENV_VAR: "https://mirror.example.org/artworks/"})
        assert config.base_url == "https://mirror.example.org/artworks"

    def test_from_env_when_invalid_url_then_raises(self):
        with pytest.raises(ValueError):
            ApiConfig.from_env({API_BASE_ENV_VAR: "not-a-url"})
