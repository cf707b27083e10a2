"""Application entry point.

Main module that initializes and runs the Telegram bot application. Handles both
webhook mode (for production deployment on Railway) and polling mode (for local
development). Configures logging, builds the dependency container and the
shared HTTP session, and registers bot handlers for the deal commands.
"""

import logging

from telegram.ext import Application, CommandHandler, MessageHandler, filters

from .bot.handlers import (
    CONTAINER_KEY,
    SESSION_KEY,
    deal,
    handle_prefixed_command,
    ping,
    start,
)
from .bot.utils import create_session
from .config import config
from .core.container import create_container

# Logging
logging.basicConfig(
    format="%(asctime)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.bot.log_level, logging.INFO),
)
logger = logging.getLogger(__name__)


async def initialize_resources(application: Application) -> None:
    """Create the shared HTTP session and the component container."""
    container = create_container(config.as_dict())
    registry = container.scraper_registry()
    logger.info(f"Active stores: {[store.value for store in registry.get_all_stores()]}")

    application.bot_data[CONTAINER_KEY] = container
    application.bot_data[SESSION_KEY] = create_session()
    logger.info("HTTP session created")


async def cleanup_resources(application: Application) -> None:
    """Close the shared HTTP session."""
    session = application.bot_data.pop(SESSION_KEY, None)
    if session is not None:
        await session.close()
        logger.info("HTTP session closed")


def main() -> None:
    """Main application entry point.

    Initializes the Telegram bot application with proper configuration,
    registers command and message handlers, and starts the bot in either
    webhook mode (production) or polling mode (development).

    Raises:
        RuntimeError: If BOT_TOKEN environment variable is not set.
    """
    if not config.bot.bot_token:
        raise RuntimeError("Set BOT_TOKEN environment variable")

    app = (
        Application.builder()
        .token(config.bot.bot_token)
        .post_init(initialize_resources)
        .post_shutdown(cleanup_resources)
        .build()
    )

    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("deal", deal))
    app.add_handler(CommandHandler("ping", ping))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_prefixed_command))

    # Run in webhook or polling mode
    if config.bot.use_webhook:
        path = f"/{config.bot.bot_token}"
        webhook_url = f"https://{config.bot.webhook_domain}{path}"
        logger.info(f"Starting webhook at {webhook_url}")

        app.run_webhook(
            listen=config.bot.listen_host,
            port=config.bot.port,
            url_path=path,
            webhook_url=webhook_url,
        )
    else:
        logger.warning("No public domain found; falling back to long-polling")
        app.run_polling()


if __name__ == "__main__":
    main()
