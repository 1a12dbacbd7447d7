"""
Configuration settings for the PUBG Rank Role Bot.

This module contains all configuration constants and environment variables.
Keep all bot configuration centralized here.

Note: The tier catalog is static. Every guild gets the same tier roles,
there is no per-guild configuration storage.
"""

import os
from dotenv import load_dotenv

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

# Load environment variables from .env file
load_dotenv()

# Discord bot token - NEVER hardcode this!
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")

# PUBG developer API key (https://developer.pubg.com)
PUBG_API_KEY = os.getenv("PUBG_API_KEY")
PUBG_API_BASE_URL = os.getenv("PUBG_API_BASE_URL", "https://api.pubg.com").rstrip("/")
PUBG_API_TIMEOUT_SECONDS = float(os.getenv("PUBG_API_TIMEOUT_SECONDS", "10"))

# Platform shard used when the command doesn't specify one
DEFAULT_PLATFORM = os.getenv("DEFAULT_PLATFORM", "steam")

# Privileged "Server Members" intent. Must also be enabled in the Discord
# developer portal, otherwise the gateway refuses the connection. Without it
# the member cache is nearly empty and the dashboard omits member counts.
ENABLE_MEMBERS_INTENT = os.getenv("ENABLE_MEMBERS_INTENT", "false").lower() in ("1", "true", "yes")

# Dashboard settings (admin-only web view)
DASHBOARD_PASSWORD = os.getenv("DASHBOARD_PASSWORD")
DASHBOARD_HOST = os.getenv("DASHBOARD_HOST", "127.0.0.1")
DASHBOARD_PORT = int(os.getenv("DASHBOARD_PORT", "8080"))

# =============================================================================
# PUBG API CONSTANTS
# =============================================================================

# Platform shards the bot can query, mapped to display names
PLATFORMS = {
    "steam": "Steam",
    "kakao": "Kakao",
    "xbox": "Xbox",
    "psn": "PlayStation",
}

# Game modes reported in a player's season stats
GAME_MODES = (
    "solo",
    "solo-fpp",
    "duo",
    "duo-fpp",
    "squad",
    "squad-fpp",
)

# =============================================================================
# TIER DEFINITIONS
# =============================================================================

# Every tier role is named PREFIX + tier name, e.g. "PUBG-Gold"
TIER_ROLE_PREFIX = "PUBG-"

# Ordered lowest to highest. A tier covers [min_points, next tier's min_points),
# the last tier has no upper bound.
TIER_DEFINITIONS = [
    {"name": "Bronze", "min_points": 0, "color": "CD7F32"},
    {"name": "Silver", "min_points": 1400, "color": "C0C0C0"},
    {"name": "Gold", "min_points": 1500, "color": "F2A900"},
    {"name": "Platinum", "min_points": 1600, "color": "5FB4C8"},
    {"name": "Diamond", "min_points": 1700, "color": "7FD6F5"},
    {"name": "Elite", "min_points": 1800, "color": "9B59B6"},
    {"name": "Master", "min_points": 1900, "color": "E67E22"},
    {"name": "GrandMaster", "min_points": 2000, "color": "E74C3C"},
]

# Tier roles can be pinged by everyone
TIER_ROLES_MENTIONABLE = True
