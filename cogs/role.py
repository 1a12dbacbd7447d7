"""
Role Cog for the PUBG Rank Role Bot.

This module contains the /role command, which looks up a player's season
stats and gives the invoking member the matching PUBG tier role.
"""

from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from config.settings import DEFAULT_PLATFORM, PLATFORMS
from event_logger import log_event
from services.embeds import build_sync_embed, format_lookup_failure
from services.membership import MemberUpdateFailedError
from services.pubg_api import StatsLookupFailedError
from services.role_sync import sync

MISSING_PERMISSION_MESSAGE = (
    "⚠️ Bot is missing the `General Permissions > Manage Roles` permission. "
    "Give permission so the bot can assign roles. ⚠️"
)


class RoleCog(commands.Cog):
    """
    Cog containing the tier role command.

    Commands:
    - /role: Assign your PUBG rank tier role
    """

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(
        name="role",
        description="Get the PUBG rank tier role that matches your season stats"
    )
    @app_commands.describe(
        username="Your PUBG player name (case sensitive)",
        platform="Platform you play on",
        season="Season id or suffix like 2018-10 (default: current season)",
    )
    @app_commands.choices(platform=[
        app_commands.Choice(name=display, value=key)
        for key, display in PLATFORMS.items()
    ])
    @app_commands.guild_only()
    async def role_command(
        self,
        interaction: discord.Interaction,
        username: str,
        platform: Optional[str] = None,
        season: Optional[str] = None,
    ):
        """
        Sync the invoking member's tier role.

        Usage:
        - /role username:shroud
        - /role username:shroud platform:kakao season:2018-10
        """
        guild = interaction.guild
        member = interaction.user
        platform = platform or DEFAULT_PLATFORM
        username = username.strip()

        log_event(
            "role_command_invoked",
            guild_id=interaction.guild_id,
            user_id=member.id,
            username=username,
            platform=platform,
            season=season,
        )

        if not guild.me.guild_permissions.manage_roles:
            await interaction.response.send_message(MISSING_PERMISSION_MESSAGE, ephemeral=True)
            return

        await interaction.response.defer(thinking=True)
        await interaction.edit_original_response(content=f"Getting data for **{username}** ...")

        try:
            snapshot = await self.bot.pubg_api.get_player_season_snapshot(username, platform, season)
        except StatsLookupFailedError as exc:
            log_event(
                "stats_lookup_failed",
                guild_id=interaction.guild_id,
                user_id=member.id,
                username=username,
                platform=platform,
                season=season,
                error=str(exc),
            )
            await interaction.edit_original_response(
                content=format_lookup_failure(username, platform, season)
            )
            return

        await interaction.edit_original_response(content="Updating roles ...")

        try:
            result = await sync(guild, member, snapshot)
        except MemberUpdateFailedError as exc:
            print(f"❌ Role update failed for {member} in guild {interaction.guild_id}: {exc}")
            log_event(
                "role_sync_failed",
                guild_id=interaction.guild_id,
                member_id=member.id,
                status="member_update_failed",
                error=str(exc),
            )
            await interaction.edit_original_response(
                content=(
                    f"❌ Could not complete: the role update failed ({exc}). "
                    "Make sure the bot's role is above the PUBG tier roles, then try again."
                )
            )
            return

        await interaction.edit_original_response(
            content=None,
            embed=build_sync_embed(result, snapshot, member),
        )


async def setup(bot: commands.Bot):
    """
    Setup function for loading the cog.

    Called by bot.load_extension().
    """
    await bot.add_cog(RoleCog(bot))
