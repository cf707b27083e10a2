"""Exception types raised across the deals bot.

Per-store network failures are recovered by the aggregator; configuration
errors are raised while the store definitions are built and abort startup.
"""


class DealsBotError(Exception):
    """Base class for all deals bot errors."""


class ConfigurationError(DealsBotError):
    """Invalid static configuration such as a malformed CSS selector."""


class NetworkError(DealsBotError):
    """Transport failure, timeout or non-2xx response from a storefront.

    Attributes:
        store: Store identifier the request was made for.
        url: Requested URL.
        reason: Short description of the underlying failure.
    """

    def __init__(self, store: str, url: str, reason: str):
        super().__init__(f"{store} request to {url} failed: {reason}")
        self.store = store
        self.url = url
        self.reason = reason
