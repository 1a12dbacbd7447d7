"""
Configuration module for the PUBG Rank Role Bot.

This module contains all configuration constants and environment variables.
"""

from config.settings import (
    # Environment variables
    DISCORD_TOKEN,
    PUBG_API_KEY,
    PUBG_API_BASE_URL,
    PUBG_API_TIMEOUT_SECONDS,
    DEFAULT_PLATFORM,
    ENABLE_MEMBERS_INTENT,
    DASHBOARD_PASSWORD,
    DASHBOARD_HOST,
    DASHBOARD_PORT,
    # Constants
    PLATFORMS,
    GAME_MODES,
    TIER_ROLE_PREFIX,
    TIER_DEFINITIONS,
    TIER_ROLES_MENTIONABLE,
)

__all__ = [
    "DISCORD_TOKEN",
    "PUBG_API_KEY",
    "PUBG_API_BASE_URL",
    "PUBG_API_TIMEOUT_SECONDS",
    "DEFAULT_PLATFORM",
    "ENABLE_MEMBERS_INTENT",
    "DASHBOARD_PASSWORD",
    "DASHBOARD_HOST",
    "DASHBOARD_PORT",
    "PLATFORMS",
    "GAME_MODES",
    "TIER_ROLE_PREFIX",
    "TIER_DEFINITIONS",
    "TIER_ROLES_MENTIONABLE",
]
