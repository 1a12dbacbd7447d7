"""
Process-wide runtime references shared across bot and dashboard.
"""

from typing import Optional

from discord.ext import commands

_bot_client: Optional[commands.Bot] = None


def set_bot_client(client: Optional[commands.Bot]) -> None:
    global _bot_client
    _bot_client = client


def get_bot_client() -> Optional[commands.Bot]:
    return _bot_client
