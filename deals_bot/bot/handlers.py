"""Telegram bot handlers for deal comparisons.

Thin handlers that read the query from the chat, delegate to the deal
aggregator and reply with the formatted comparison. Components and the
shared HTTP session are taken from ``application.bot_data``, where they are
placed at startup.
"""

import asyncio
import logging
from datetime import datetime

import aiohttp
from telegram import Update
from telegram.ext import ContextTypes

from ..config import config
from ..models import ComparisonResult
from .aggregator import DealAggregator
from .messages import (
    ERROR_DEAL_FAILED,
    ERROR_DEAL_TIMEOUT,
    LOADING_MESSAGE,
    PING_MESSAGE,
    START_MESSAGE,
    USAGE_MESSAGE,
)
from .utils import split_prefixed_command

logger = logging.getLogger(__name__)

CONTAINER_KEY = "container"
SESSION_KEY = "http_session"


def is_blocked(user_id: int) -> bool:
    """Check whether a user is barred from running commands."""
    return user_id in config.bot.blocked_user_ids


async def handle_deal_command(
    query: str,
    session: aiohttp.ClientSession,
    aggregator: DealAggregator,
    timeout: float | None = None,
) -> ComparisonResult:
    """Run one deal comparison, bounded by an overall timeout.

    On timeout every in-flight store request is cancelled and
    asyncio.TimeoutError is raised; nothing partial is returned.

    Args:
        query: Free-text game title.
        session: Shared HTTP session.
        aggregator: Deal aggregator over the active stores.
        timeout: Overall limit in seconds, None for no limit.

    Returns:
        Comparison result for the query.
    """
    start_time = datetime.now()
    try:
        return await asyncio.wait_for(aggregator.compare(query, session), timeout)
    finally:
        elapsed = datetime.now() - start_time
        logger.info(f"Time elapsed in deal command is: {elapsed.total_seconds():.3f}s")


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command.

    Args:
        update: Telegram update object containing message data.
        context: Bot context for accessing application instance.
    """
    if update.message:
        await update.message.reply_text(
            START_MESSAGE.format(prefix=config.bot.command_prefix),
            disable_web_page_preview=True,
        )


async def ping(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /ping liveness check."""
    user = update.effective_user
    message = update.message
    if user is None or message is None:
        return

    if is_blocked(user.id):
        logger.info(f"Ignoring ping command from blocked user {user.id}")
        return

    logger.info(f"Executing ping command for user {user.id}")
    await message.reply_text(PING_MESSAGE)


async def deal(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /deal <game> command."""
    if not update.effective_user or not update.message:
        return

    query = " ".join(context.args or []).strip()
    await _reply_with_deal(update, context, query)


async def handle_prefixed_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle text commands such as "!ds deal Half-Life" and "!ds ping"."""
    if not update.effective_user or not update.message:
        return

    command = split_prefixed_command(update.message.text or "", config.bot.command_prefix)
    if command is None:
        return

    name, args = command
    if name == "deal":
        await _reply_with_deal(update, context, args)
    elif name == "ping":
        await ping(update, context)


async def _reply_with_deal(
    update: Update, context: ContextTypes.DEFAULT_TYPE, query: str
) -> None:
    """Look up deals for query and reply with the comparison."""
    user = update.effective_user
    message = update.message
    if user is None or message is None:
        return

    if is_blocked(user.id):
        logger.info(f"Ignoring deal command from blocked user {user.id}")
        return

    if not query:
        await message.reply_text(USAGE_MESSAGE)
        return

    logger.info(f"Executing deal command for user {user.id}: {query!r}")

    container = context.bot_data[CONTAINER_KEY]
    session = context.bot_data[SESSION_KEY]
    aggregator = container.aggregator()
    formatter = container.response_formatter()

    loading_message = await message.reply_text(LOADING_MESSAGE.format(query=query))

    try:
        comparison = await handle_deal_command(
            query, session, aggregator, timeout=config.bot.command_timeout
        )
    except asyncio.TimeoutError:
        logger.warning(f"Deal command timed out for {query!r}")
        await loading_message.edit_text(ERROR_DEAL_TIMEOUT)
        return
    except Exception as e:
        logger.error(f"Error in deal command for {query!r}: {e}", exc_info=True)
        await loading_message.edit_text(ERROR_DEAL_FAILED)
        return

    response = formatter.format_comparison(comparison)

    try:
        await loading_message.delete()
        if comparison.image_url:
            try:
                await message.reply_photo(photo=comparison.image_url, caption=response)
            except Exception as e:
                logger.warning(f"Failed to send image, sending text: {e}")
                await message.reply_text(response, disable_web_page_preview=True)
        else:
            await message.reply_text(response, disable_web_page_preview=True)
    except Exception as e:
        logger.error(f"Failed to send deal response: {e}")
        await message.reply_text(ERROR_DEAL_FAILED)

    logger.info(f"Executed deal command for user {user.id}")
