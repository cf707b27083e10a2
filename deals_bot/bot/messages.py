"""Telegram bot message templates and constants.

Contains all user-facing message templates for the deal comparison bot.
Centralizes message management for consistent responses across commands.
"""

# Bot commands and descriptions
START_MESSAGE = (
    "Send /deal <game> to compare prices across game stores.\n\n"
    "Example: /deal Half-Life\n"
    "You can also write: {prefix}deal Half-Life\n"
    "Send /ping to check that the bot is alive."
)

USAGE_MESSAGE = "Tell me which game to look for, e.g. /deal Half-Life"

PING_MESSAGE = "I'm alive!"

LOADING_MESSAGE = "🔍 Searching stores for “{query}”..."

# Comparison fields
PRICE_FIELD = "Price: {price}\nDiscount: {discount}"
NOT_FOUND_FIELD = "Not found!"
STORE_FIELD = "{store}\n{body}"

# Error messages
ERROR_DEAL_FAILED = "❌ Something went wrong while looking up deals. Please try again later."
ERROR_DEAL_TIMEOUT = "⌛ The stores took too long to answer. Please try again later."
