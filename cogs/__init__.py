"""
Cogs module for the PUBG Rank Role Bot.

This module contains Discord slash commands organized as Cogs.
"""

from cogs.role import RoleCog
from cogs.utility import UtilityCog

__all__ = [
    "RoleCog",
    "UtilityCog",
]
