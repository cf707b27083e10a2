"""Tests for configuration loading and dependency wiring."""

import pytest

from deals_bot.bot.aggregator import DealAggregator
from deals_bot.config import BotConfig, Config, StoresConfig
from deals_bot.core.container import create_container
from deals_bot.exceptions import ConfigurationError
from deals_bot.models import Store


def test_stores_config_defaults_leave_epic_inactive():
    stores = StoresConfig()

    assert stores.active == [Store.STEAM, Store.NUUVEM]
    assert stores.priority == [Store.STEAM, Store.NUUVEM]
    assert stores.nuuvem_zero_price_without_discount is False


def test_bundled_stores_file_matches_defaults():
    assert Config().stores == StoresConfig()


def test_config_loads_stores_yaml(tmp_path):
    (tmp_path / "stores.yml").write_text(
        "stores:\n"
        "  active: [steam, epic, nuuvem]\n"
        "  priority: [nuuvem, steam]\n"
        "  nuuvem_zero_price_without_discount: true\n"
    )

    stores = Config(config_dir=tmp_path).stores

    assert stores.active == [Store.STEAM, Store.EPIC, Store.NUUVEM]
    assert stores.priority == [Store.NUUVEM, Store.STEAM]
    assert stores.nuuvem_zero_price_without_discount is True


def test_config_without_stores_file_uses_defaults(tmp_path):
    assert Config(config_dir=tmp_path).stores == StoresConfig()


def test_config_rejects_unknown_store(tmp_path):
    (tmp_path / "stores.yml").write_text("stores:\n  active: [steam, gog]\n")

    with pytest.raises(ConfigurationError):
        Config(config_dir=tmp_path)


def test_bot_config_env_overrides(monkeypatch):
    monkeypatch.setenv("BOT_LISTEN_HOST", "0.0.0.0")
    monkeypatch.setenv("COMMAND_PREFIX", "!deals ")
    monkeypatch.setenv("BLOCKED_USER_IDS", "[123456789]")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    bot_config = BotConfig()

    assert bot_config.listen_host == "0.0.0.0"
    assert bot_config.command_prefix == "!deals "
    assert bot_config.blocked_user_ids == [123456789]
    assert bot_config.log_level == "DEBUG"


def test_bot_config_webhook_mode(monkeypatch):
    monkeypatch.delenv("RAILWAY_URL", raising=False)
    monkeypatch.delenv("RAILWAY_PUBLIC_DOMAIN", raising=False)
    assert BotConfig().use_webhook is False

    monkeypatch.setenv("RAILWAY_PUBLIC_DOMAIN", "deals.up.railway.app")
    assert BotConfig().webhook_domain == "deals.up.railway.app"
    assert BotConfig().use_webhook is True


def test_container_wires_active_stores_and_priority():
    container = create_container(
        {
            "stores": {
                "active": ["steam", "epic", "nuuvem"],
                "priority": ["nuuvem", "steam"],
                "nuuvem_zero_price_without_discount": True,
            }
        }
    )

    aggregator = container.aggregator()

    assert isinstance(aggregator, DealAggregator)
    assert aggregator is container.aggregator()
    assert aggregator.priority == [Store.NUUVEM, Store.STEAM]
    assert aggregator.registry.get_all_stores() == [Store.STEAM, Store.EPIC, Store.NUUVEM]
    assert aggregator.registry.get_scraper(Store.NUUVEM).zero_price_without_discount is True


def test_container_from_application_config():
    container = create_container(Config().as_dict())

    assert container.scraper_registry().get_all_stores() == [Store.STEAM, Store.NUUVEM]
