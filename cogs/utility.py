"""
Utility Cog for the PUBG Rank Role Bot.

Read-only diagnostic commands: /ping and /info.
"""

import resource
import sys

import discord
from discord import app_commands
from discord.ext import commands

from event_logger import log_event
from services.embeds import build_info_embed, build_status_embed


def get_memory_usage_mb() -> float:
    """
    Peak resident memory of the bot process in MB.

    ru_maxrss is reported in bytes on macOS and in kilobytes elsewhere.
    """
    usage = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        return usage / 1024 / 1024
    return usage / 1024


class UtilityCog(commands.Cog):
    """
    Cog containing diagnostic commands.

    Commands:
    - /ping: Bot and PUBG API latency
    - /info: Details about the bot
    """

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(
        name="ping",
        description="Check the bot's and the PUBG API's response time"
    )
    async def ping_command(self, interaction: discord.Interaction):
        """
        Usage: /ping
        """
        log_event("ping_command_invoked", user_id=interaction.user.id)
        await interaction.response.defer(thinking=True)

        api_latency = await self.bot.pubg_api.get_status_latency()
        avatar = self.bot.user.display_avatar.url if self.bot.user else None
        embed = build_status_embed(self.bot.latency * 1000, api_latency, avatar)
        await interaction.followup.send(embed=embed)

    @app_commands.command(
        name="info",
        description="Returns details about the bot"
    )
    async def info_command(self, interaction: discord.Interaction):
        """
        Usage: /info
        """
        log_event("info_command_invoked", user_id=interaction.user.id)
        channel_count = sum(len(guild.channels) for guild in self.bot.guilds)
        embed = build_info_embed(
            guild_count=len(self.bot.guilds),
            user_count=len(self.bot.users),
            channel_count=channel_count,
            memory_mb=get_memory_usage_mb(),
        )
        await interaction.response.send_message(embed=embed)


async def setup(bot: commands.Bot):
    """
    Setup function for loading the cog.

    Called by bot.load_extension().
    """
    await bot.add_cog(UtilityCog(bot))
