"""Telegram bot implementation package.

Contains the deal aggregation pipeline entry point, command handlers,
response formatting and message templates. Handles command parsing and the
reply flow for deal comparisons.
"""
