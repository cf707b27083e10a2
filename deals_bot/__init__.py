"""Game Deals Bot Application Package.

A Telegram bot that compares game prices across storefronts. Given a game
title it searches Steam, Nuuvem (and optionally the Epic Games Store)
concurrently, scrapes prices and discounts from their static HTML, settles on
one canonical game name and shows what each store charges for it.

The application follows a modular architecture with separate concerns for:
- Bot handlers and response formatting
- Selector-based HTML extraction and per-store scrapers
- Cross-store aggregation and name reconciliation
- Configuration and dependency wiring
"""
