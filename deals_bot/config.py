"""Configuration management for the deals bot.

Handles all application configuration including environment variables, the
YAML store configuration and default settings. Provides structured
configuration classes for the bot runtime and for the storefront pipeline.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import Store


class StoresConfig(BaseSettings):
    """Storefront selection settings.

    Attributes:
        active: Stores queried for every deal command, in dispatch order.
        priority: Stores consulted, in order, to pick the canonical game name.
        nuuvem_zero_price_without_discount: Show a zero price for Nuuvem
            listings without an active discount instead of their real price.
    """

    model_config = SettingsConfigDict(env_prefix="STORES_")

    active: list[Store] = Field(default_factory=lambda: [Store.STEAM, Store.NUUVEM])
    priority: list[Store] = Field(default_factory=lambda: [Store.STEAM, Store.NUUVEM])
    nuuvem_zero_price_without_discount: bool = False


class BotConfig(BaseSettings):
    """Main Telegram bot configuration.

    Attributes:
        bot_token: Telegram bot API token from environment.
        port: Server port for webhook mode.
        railway_domain: Railway public domain for webhooks.
        railway_url: Railway URL for webhooks (fallback).
        listen_host: Interface the webhook server binds to.
        timeout: HTTP request timeout in seconds for storefront requests.
        command_timeout: Upper bound in seconds for one deal comparison.
        command_prefix: Text prefix for chat commands ("!ds deal <game>").
        blocked_user_ids: Telegram user IDs whose commands are ignored.
        log_level: Root logging level name.
    """

    bot_token: str = Field(default="", validation_alias="BOT_TOKEN")
    port: int = Field(default=8000, validation_alias="PORT")
    railway_domain: str | None = Field(default=None, validation_alias="RAILWAY_PUBLIC_DOMAIN")
    railway_url: str | None = Field(default=None, validation_alias="RAILWAY_URL")
    listen_host: str = Field(default="127.0.0.1", validation_alias="BOT_LISTEN_HOST")
    timeout: int = 20
    command_timeout: float = Field(default=45.0, validation_alias="COMMAND_TIMEOUT")
    command_prefix: str = Field(default="!ds ", validation_alias="COMMAND_PREFIX")
    blocked_user_ids: list[int] = Field(default_factory=list, validation_alias="BLOCKED_USER_IDS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def webhook_domain(self) -> str | None:
        """Get webhook domain for Railway deployment.

        Returns:
            Domain string if available, None for polling mode.
        """
        return self.railway_domain or self.railway_url

    @property
    def use_webhook(self) -> bool:
        """Determine if webhook mode should be used."""
        return bool(self.webhook_domain)


class Config:
    """Application configuration manager.

    Centralizes loading of environment variables and the stores YAML file.
    Provides typed access to the bot and store configuration sections.
    """

    def __init__(self, config_dir: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory, defaults to deals_bot/config.

        Raises:
            ConfigurationError: If the stores file names an unknown store.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = Path(config_dir)

        self.bot = BotConfig()
        self.stores = self._load_stores()

    def _load_stores(self) -> StoresConfig:
        """Load store selection from stores.yml, defaults if the file is absent."""
        stores_path = self.config_dir / "stores.yml"
        if not stores_path.exists():
            return StoresConfig()

        with open(stores_path) as f:
            data = yaml.safe_load(f) or {}

        stores_data: dict[str, Any] = data.get("stores", {})
        try:
            return StoresConfig(**stores_data)
        except ValueError as e:
            raise ConfigurationError(f"Invalid store configuration in {stores_path}: {e}") from e

    def as_dict(self) -> dict[str, Any]:
        """Configuration tree consumed by the DI container."""
        return {
            "bot": self.bot.model_dump(),
            "stores": self.stores.model_dump(),
        }


# Global configuration instance
config = Config()
