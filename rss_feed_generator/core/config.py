"""
Configuration loading for the RSS Feed Generator.

Settings start from the defaults in ``FeedConfig``, are overlaid by an
optional JSON file, and finally by environment variables (a ``.env`` file
is honoured through python-dotenv).
"""

import json
import logging
import os
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .types import FeedConfig

logger = logging.getLogger(__name__)

# environment variable -> FeedConfig field
ENV_OVERRIDES = {
    "RSS_FEED_URL": "url",
    "RSS_FEED_OUTPUT": "output_path",
    "RSS_FEED_TITLE": "channel_title",
    "RSS_FEED_TIMEOUT": "timeout",
}


class ConfigLoader:
    """Build a FeedConfig from a JSON file and the environment."""

    def load_config_file(self, config_file: str) -> dict[str, Any]:
        """Load raw settings from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Config file not found: {config_file}")

        with open(config_file, "r", encoding="utf-8") as f:
            settings = json.load(f)
        logger.info("Loaded %d settings from %s", len(settings), config_file)
        return settings

    def load_env_overrides(self) -> dict[str, Any]:
        load_dotenv(find_dotenv(usecwd=True))
        return {
            field: os.environ[name]
            for name, field in ENV_OVERRIDES.items()
            if os.environ.get(name)
        }

    def load(self, config_file: str | None = None) -> FeedConfig:
        """Return the effective configuration.

        Raises:
            pydantic.ValidationError: If a setting has an invalid value.
        """
        settings: dict[str, Any] = {}
        if config_file:
            settings.update(self.load_config_file(config_file))
        settings.update(self.load_env_overrides())
        return FeedConfig.model_validate(settings)


def load_config(config_file: str | None = None) -> FeedConfig:
    """Shortcut for ``ConfigLoader().load``."""
    return ConfigLoader().load(config_file)
