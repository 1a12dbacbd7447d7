"""
Bot class for the PUBG Rank Role Bot.

This module contains the PubgRoleBot class which extends commands.Bot.

Multi-guild support: The bot can work with multiple Discord servers simultaneously.
Every guild gets the same static set of tier roles.
"""

from typing import Optional

import aiohttp
import discord
from discord.ext import commands

from config.settings import ENABLE_MEMBERS_INTENT, PUBG_API_KEY
from runtime import set_bot_client
from services.pubg_api import PubgApiClient


class PubgRoleBot(commands.Bot):
    """
    Custom Bot class for the tier role system.

    Owns the shared aiohttp session and the PUBG API client used by the cogs.
    """

    def __init__(self):
        intents = discord.Intents.default()
        intents.members = ENABLE_MEMBERS_INTENT

        super().__init__(
            command_prefix="!pubg-",
            intents=intents,
        )

        self.http_session: Optional[aiohttp.ClientSession] = None
        self.pubg_api: Optional[PubgApiClient] = None

    async def setup_hook(self):
        """
        Called before the bot connects to Discord.

        Here we:
        1. Open the HTTP session for the PUBG API
        2. Load the cogs with slash commands
        3. Sync the command tree
        """
        self.http_session = aiohttp.ClientSession()
        self.pubg_api = PubgApiClient(self.http_session, PUBG_API_KEY)
        set_bot_client(self)

        if not PUBG_API_KEY:
            print("⚠️ PUBG_API_KEY not set, /role lookups will fail")

        for extension in ("cogs.role", "cogs.utility"):
            try:
                await self.load_extension(extension)
                print(f"✓ {extension} loaded")
            except Exception as e:
                print(f"✗ Error loading {extension}: {e}")

        # Sync slash commands globally
        await self.tree.sync()
        print("✅ Commands synced globally")

    async def close(self):
        if self.http_session is not None and not self.http_session.closed:
            await self.http_session.close()
        await super().close()

    async def on_ready(self):
        """
        Called when the bot has connected to Discord.
        """
        print(f"🤖 Connected as {self.user} (ID: {self.user.id})")
        print(f"📡 Connected to {len(self.guilds)} server(s):")

        for guild in self.guilds:
            manage_roles = "✓" if guild.me.guild_permissions.manage_roles else "✗"
            print(f"   • {guild.name} (ID: {guild.id}) [manage roles: {manage_roles}]")

        print("─" * 40)

        await self.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.watching,
                name="PUBG ranks 🎖️",
            )
        )
