"""Tests for environment settings."""

import pytest

from reelcompose.config import Settings, load_settings


class TestLoadSettings:
    def test_reads_variables(self):
        settings = load_settings({
            "SHOTSTACK_HOST": "https://api.shotstack.io/stage/",
            "SHOTSTACK_API_KEY": "render-key",
            "PEXELS_API_KEY": "search-key",
            "REELCOMPOSE_LOG_LEVEL": "debug",
        })
        assert settings.shotstack_host == "https://api.shotstack.io/stage/"
        assert settings.shotstack_api_key == "render-key"
        assert settings.pexels_api_key == "search-key"
        assert settings.log_level == "DEBUG"

    def test_blank_values_are_unset(self):
        settings = load_settings({"PEXELS_API_KEY": "  "})
        assert settings.pexels_api_key is None
        assert settings.log_level == "INFO"

    def test_assets_url_becomes_path_variable(self):
        settings = load_settings({"SHOTSTACK_ASSETS_URL": "https://cdn.example.com/"})
        assert settings.template_paths() == {"assets": "https://cdn.example.com/"}

    def test_no_assets_url(self):
        assert load_settings({}).template_paths() == {}


class TestRequire:
    def test_missing_names_env_var(self):
        with pytest.raises(ValueError, match="SHOTSTACK_API_KEY"):
            Settings(shotstack_host="h").require("shotstack_host", "shotstack_api_key")

    def test_present(self):
        Settings(pexels_api_key="k").require("pexels_api_key")
