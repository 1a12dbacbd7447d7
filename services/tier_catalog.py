"""
Tier role catalog for the PUBG Rank Role Bot.

Makes sure every tier role exists on a guild. Roles are only ever
created here, never edited or deleted.

The guild is used through a narrow interface:
- guild.id
- guild.roles: iterable of roles with .name
- await guild.create_role(name=..., colour=..., mentionable=..., reason=...)
"""

import asyncio
from typing import Any, Dict, Iterable, List, Sequence

import discord

from config.settings import TIER_ROLES_MENTIONABLE
from event_logger import log_event
from models.sync_result import TierCreationOutcome
from models.tier import TIER_CATALOG, Tier

# One lock per guild so concurrent /role invocations don't both create a role.
# {guild_id: asyncio.Lock}
_guild_locks: Dict[int, asyncio.Lock] = {}


def _get_guild_lock(guild_id: int) -> asyncio.Lock:
    lock = _guild_locks.get(guild_id)
    if lock is None:
        lock = asyncio.Lock()
        _guild_locks[guild_id] = lock
    return lock


def build_role_index(roles: Iterable[Any]) -> Dict[str, Any]:
    """
    Build a name -> role mapping from a guild's role list.

    If two roles share a name (possible after a creation race in another
    process), the first one listed wins.
    """
    index: Dict[str, Any] = {}
    for role in roles:
        index.setdefault(role.name, role)
    return index


def _creation_failed(guild: Any, tier: Tier, exc: BaseException) -> TierCreationOutcome:
    error = str(exc) or type(exc).__name__
    log_event(
        "tier_role_creation_failed",
        guild_id=guild.id,
        role_name=tier.role_name,
        error=error,
        error_type=type(exc).__name__,
    )
    return TierCreationOutcome(tier=tier, error=error)


async def ensure_all_tiers_exist(
    guild: Any,
    tiers: Sequence[Tier] = TIER_CATALOG,
) -> List[TierCreationOutcome]:
    """
    Create every missing tier role on the guild.

    Each creation is independent: a failure for one tier is logged and
    recorded, and the remaining tiers are still processed. Running this
    twice never creates a second role with the same name.

    Args:
        guild: Guild whose role directory is checked
        tiers: Ordered tier catalog

    Returns:
        One TierCreationOutcome per tier, in catalog order
    """
    outcomes: List[TierCreationOutcome] = []

    async with _get_guild_lock(guild.id):
        index = build_role_index(guild.roles)

        for tier in tiers:
            existing = index.get(tier.role_name)
            if existing is not None:
                outcomes.append(TierCreationOutcome(tier=tier, role=existing, existed=True))
                continue

            try:
                role = await guild.create_role(
                    name=tier.role_name,
                    colour=discord.Colour(tier.color_value),
                    mentionable=TIER_ROLES_MENTIONABLE,
                    reason="PUBG rank tier role",
                )
            except discord.HTTPException as exc:
                print(f"⚠️ Could not create role {tier.role_name} in guild {guild.id}: {exc}")
                outcomes.append(_creation_failed(guild, tier, exc))
                continue
            except Exception as exc:
                # Transport errors (connection reset, timeout) re-raised by discord.py
                print(f"❌ Error creating role {tier.role_name} in guild {guild.id}: {exc!r}")
                outcomes.append(_creation_failed(guild, tier, exc))
                continue

            index[tier.role_name] = role
            log_event(
                "tier_role_created",
                guild_id=guild.id,
                role_name=tier.role_name,
                role_id=getattr(role, "id", None),
            )
            outcomes.append(TierCreationOutcome(tier=tier, role=role, created=True))

    return outcomes


def merge_created_roles(index: Dict[str, Any], outcomes: Iterable[TierCreationOutcome]) -> Dict[str, Any]:
    """
    Add roles created during this run to a role index.

    The Discord cache may not list a freshly created role until the
    gateway event arrives, so the handles returned by create_role are
    merged in explicitly. Roles already indexed keep precedence.
    """
    merged = dict(index)
    for outcome in outcomes:
        if outcome.role is not None:
            merged.setdefault(outcome.tier.role_name, outcome.role)
    return merged


def failed_tiers(outcomes: Iterable[TierCreationOutcome]) -> List[Tier]:
    """Tiers whose role creation failed."""
    return [outcome.tier for outcome in outcomes if not outcome.ok]
