"""
=============================================================================
PUBG Rank Role Bot
=============================================================================

Looks up a player's PUBG season stats and keeps exactly one rank tier role
(PUBG-Bronze .. PUBG-GrandMaster) on their Discord member.

Discord.py Version: 2.0+
=============================================================================
"""

from bot import PubgRoleBot
from config.settings import DISCORD_TOKEN
from web.server import start_dashboard_server


def main() -> None:
    if not DISCORD_TOKEN:
        print("❌ ERROR: DISCORD_TOKEN not found!")
        print("Make sure you have a .env file with DISCORD_TOKEN=your_token_here")
        raise SystemExit(1)

    start_dashboard_server()

    print("🚀 Starting PUBG Rank Role Bot...")
    bot = PubgRoleBot()
    bot.run(DISCORD_TOKEN)


if __name__ == "__main__":
    main()
