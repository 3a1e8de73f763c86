"""Tests for configuration loading."""
import json

import pytest

from book_extractor.config import Config
from book_extractor.errors import ConfigError


@pytest.fixture
def config(monkeypatch):
    """Config with no API URL in the environment."""
    monkeypatch.setattr(Config, "BOOKS_API_URL", None)
    return Config()


def test_env_url_wins(monkeypatch, tmp_path):
    """Test that BOOKS_API_URL takes precedence over the settings file."""
    monkeypatch.setattr(Config, "BOOKS_API_URL", "https://env.example.com/books")
    settings = tmp_path / "appsettings.json"
    settings.write_text(json.dumps({"ApiSettings": {"ApiUrl": "https://file.example.com/books"}}))

    assert Config().load_api_url(str(settings)) == "https://env.example.com/books"


def test_url_from_settings_file(config, tmp_path):
    """Test reading ApiSettings.ApiUrl from the settings file."""
    settings = tmp_path / "appsettings.json"
    settings.write_text(json.dumps({"ApiSettings": {"ApiUrl": "https://file.example.com/books"}}))

    assert config.load_api_url(str(settings)) == "https://file.example.com/books"


def test_missing_settings_file(config, tmp_path):
    """Test that a missing settings file raises ConfigError."""
    with pytest.raises(ConfigError):
        config.load_api_url(str(tmp_path / "nope.json"))


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps([]),
    json.dumps({"ApiSettings": {}}),
    json.dumps({"ApiSettings": {"ApiUrl": ""}}),
    json.dumps({"Other": {"ApiUrl": "https://example.com"}}),
])
def test_invalid_settings_file(config, tmp_path, content):
    """Test that malformed settings raise ConfigError."""
    settings = tmp_path / "appsettings.json"
    settings.write_text(content)

    with pytest.raises(ConfigError):
        config.load_api_url(str(settings))
