"""Configuration management."""
import json
import os
from typing import Optional

from dotenv import load_dotenv

from book_extractor.errors import ConfigError

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""

    # API
    BOOKS_API_URL = os.getenv("BOOKS_API_URL")
    SETTINGS_FILE = os.getenv("BOOKS_SETTINGS_FILE", "appsettings.json")

    # Output
    OUTPUT_FILE = os.getenv("BOOKS_OUTPUT_FILE", "result.txt")

    # Defaults
    DEFAULT_TIMEOUT = int(os.getenv("DEFAULT_TIMEOUT", "10"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    def load_api_url(self, settings_file: Optional[str] = None) -> str:
        """
        Resolve the books API URL.

        The BOOKS_API_URL environment variable wins; otherwise the URL is
        read from ApiSettings.ApiUrl in the JSON settings file.

        Args:
            settings_file: Settings file path (defaults to SETTINGS_FILE)

        Returns:
            API URL

        Raises:
            ConfigError: If no URL can be found
        """
        if self.BOOKS_API_URL:
            return self.BOOKS_API_URL

        path = settings_file or self.SETTINGS_FILE
        try:
            with open(path, encoding="utf-8") as f:
                settings = json.load(f)
        except FileNotFoundError:
            raise ConfigError(
                f"BOOKS_API_URL is not set and settings file '{path}' was not found"
            )
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to read settings file '{path}': {e}") from e

        api_settings = settings.get("ApiSettings") if isinstance(settings, dict) else None
        api_url = api_settings.get("ApiUrl") if isinstance(api_settings, dict) else None
        if not isinstance(api_url, str) or not api_url:
            raise ConfigError(f"ApiSettings.ApiUrl is missing in settings file '{path}'")

        return api_url
