"""
Embed and message builders for the PUBG Rank Role Bot.

This module turns sync results and diagnostics into Discord embeds
and reply text.
"""

import platform as py_platform
from datetime import datetime
from typing import Optional

import discord

from config.settings import GAME_MODES, PLATFORMS
from models.season_stats import SeasonStatsSnapshot
from models.sync_result import SyncResult, SyncStatus
from services.rank_classifier import coerce_rank_points

# PUBG yellow
PUBG_COLOR = discord.Color(0xF2A900)
STATUS_COLOR = discord.Color(0x00AE86)

MODE_LABELS = {
    "solo": "Solo",
    "solo-fpp": "Solo FPP",
    "duo": "Duo",
    "duo-fpp": "Duo FPP",
    "squad": "Squad",
    "squad-fpp": "Squad FPP",
}


def platform_display_name(platform: str) -> str:
    return PLATFORMS.get(platform, platform)


def format_lookup_failure(username: str, platform: str, season: Optional[str]) -> str:
    """
    Reply used when the player or their season stats can't be found.
    """
    season_text = season or "current"
    return (
        f"Could not find **{username}** on the `{platform_display_name(platform)}` platform "
        f"for the `{season_text}` season. Double check the username, platform, "
        f"and ensure you've played this season."
    )


def format_sync_result(result: SyncResult, username: str, member_name: str) -> str:
    """
    Reply text for a finished sync.

    Args:
        result: What role_sync.sync() returned
        username: PUBG player name that was looked up
        member_name: Display name of the Discord member
    """
    if result.status == SyncStatus.NO_RANKED_DATA:
        return (
            f"ℹ️ **{username}** has no ranked games this season. "
            f"Roles for **{member_name}** were left as they are."
        )

    if result.status == SyncStatus.ROLE_NOT_FOUND:
        return (
            "❌ Could not complete: the tier role doesn't exist in this server and "
            "couldn't be created. Check that the bot has `Manage Roles` and try again."
        )

    tier_role = result.tier.role_name if result.tier else "—"
    if result.roles_changed:
        message = f"✅ Assigned **{tier_role}** to **{member_name}**"
    else:
        message = f"✅ **{member_name}** already has **{tier_role}**"

    if result.status == SyncStatus.PARTIAL_CATALOG_FAILURE:
        missing = ", ".join(tier.role_name for tier in result.failed_tiers)
        message += f"\n⚠️ Some tier roles could not be created: {missing}"

    return message


def build_sync_embed(
    result: SyncResult,
    snapshot: SeasonStatsSnapshot,
    member: discord.abc.User,
) -> discord.Embed:
    """
    Embed showing rank points per mode and the resulting tier.
    """
    color = discord.Color(result.tier.color_value) if result.tier else PUBG_COLOR
    embed = discord.Embed(
        title=f"🎖️ {snapshot.player_name or 'Player'} — Rank Role",
        description=format_sync_result(
            result, snapshot.player_name or "Player", member.display_name
        ),
        color=color,
        timestamp=datetime.now(),
    )

    lines = []
    for mode in GAME_MODES:
        label = MODE_LABELS.get(mode, mode)
        if mode in snapshot.rank_points:
            points = coerce_rank_points(snapshot.rank_points[mode])
            value = f"{points:.0f}" if points != float("-inf") else "?"
            lines.append(f"**{label}:** {value}")
        else:
            lines.append(f"**{label}:** —")

    embed.add_field(name="📊 Rank Points", value="\n".join(lines), inline=True)

    if snapshot.season_id:
        embed.set_footer(
            text=f"{platform_display_name(snapshot.platform or '')} • {snapshot.season_id}"
        )

    return embed


def build_status_embed(
    bot_latency_ms: float,
    api_latency_ms: Optional[float],
    avatar_url: Optional[str] = None,
) -> discord.Embed:
    """
    Embed for /ping.
    """
    embed = discord.Embed(title="PUBG Role Bot Status", color=STATUS_COLOR)
    if avatar_url:
        embed.set_thumbnail(url=avatar_url)

    embed.add_field(name="Bot", value=f"{bot_latency_ms:.0f}ms", inline=True)
    api_text = f"{api_latency_ms:.0f}ms" if api_latency_ms is not None else "❌ Unreachable"
    embed.add_field(name="PUBG API", value=api_text, inline=True)
    return embed


def build_info_embed(
    guild_count: int,
    user_count: int,
    channel_count: int,
    memory_mb: Optional[float] = None,
) -> discord.Embed:
    """
    Embed for /info.
    """
    embed = discord.Embed(
        title="PUBG Role Bot Information",
        color=PUBG_COLOR,
        timestamp=datetime.now(),
    )
    embed.add_field(name="Servers", value=f"{guild_count:,}", inline=True)
    embed.add_field(name="Users", value=f"{user_count:,}", inline=True)
    embed.add_field(name="Channels", value=f"{channel_count:,}", inline=True)
    if memory_mb is not None:
        embed.add_field(name="Mem Usage", value=f"{memory_mb:.2f} MB", inline=True)
    embed.add_field(name="discord.py", value=f"v{discord.__version__}", inline=True)
    embed.add_field(name="Python", value=f"v{py_platform.python_version()}", inline=True)
    return embed
