"""Bot utility functions.

Provides the shared HTTP session used for storefront requests and helpers
for reading deal queries out of chat messages.
"""

import aiohttp

from ..config import config


def create_session(timeout: int | None = None) -> aiohttp.ClientSession:
    """Create configured aiohttp session for storefront scraping.

    Sets up session with connection limits, timeouts, and browser-like headers.
    The session is shared by all stores and all commands for the lifetime of
    the application.

    Args:
        timeout: Total per-request timeout in seconds, defaults to config.

    Returns:
        aiohttp.ClientSession: Configured HTTP session for making requests.
    """
    connector = aiohttp.TCPConnector(limit=100, limit_per_host=30)
    client_timeout = aiohttp.ClientTimeout(total=timeout or config.bot.timeout)

    # Browser-like headers to avoid bot detection
    headers = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.5",
        "DNT": "1",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
    }

    return aiohttp.ClientSession(connector=connector, timeout=client_timeout, headers=headers)


def split_prefixed_command(text: str, prefix: str) -> tuple[str, str] | None:
    """Split a text-prefix command such as "!ds deal Half-Life".

    The command name is separated from its arguments by any whitespace,
    newlines included.

    Args:
        text: Raw message text.
        prefix: Command prefix including trailing space, e.g. "!ds ".

    Returns:
        Tuple of (lower-cased command name, argument text possibly empty),
        None if the message does not start with the prefix.
    """
    if not prefix or not text.startswith(prefix):
        return None

    parts = text[len(prefix):].split(None, 1)
    if not parts:
        return None

    name = parts[0].lower()
    args = parts[1].strip() if len(parts) > 1 else ""
    return name, args
