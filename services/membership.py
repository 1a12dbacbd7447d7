"""
Member role reconciliation for the PUBG Rank Role Bot.

Moves a member to "all their non-tier roles + exactly one tier role"
with a single role-list replace. Roles outside the tier taxonomy are
passed through as the same objects, in the same order.

The member is used through a narrow interface:
- member.roles: list of roles with .id and .name
- await member.edit(roles=[...], reason=...)
"""

import asyncio
from typing import Any, Dict, List, Optional, Sequence, Tuple

import aiohttp
import discord

from event_logger import log_event
from models.tier import TIER_CATALOG, Tier, tier_role_names


class RoleNotFoundError(Exception):
    """The target tier's role is not in the guild's role directory."""

    def __init__(self, tier: Tier):
        super().__init__(f"Role {tier.role_name} does not exist in this server")
        self.tier = tier


class MemberUpdateFailedError(Exception):
    """The role-list replace was rejected by Discord or never reached it."""


# discord.py re-raises these after its own retries give up
_TRANSPORT_ERRORS = (aiohttp.ClientError, OSError, asyncio.TimeoutError)


def partition_roles(
    roles: Sequence[Any],
    tiers: Sequence[Tier] = TIER_CATALOG,
) -> Tuple[List[Any], List[Any]]:
    """
    Split a member's roles into (tier_roles, other_roles).

    Both lists keep the original order.
    """
    tier_names = set(tier_role_names(tiers))
    tier_roles = []
    other_roles = []
    for role in roles:
        if role.name in tier_names:
            tier_roles.append(role)
        else:
            other_roles.append(role)
    return tier_roles, other_roles


def compute_desired_roles(
    current_roles: Sequence[Any],
    target_tier: Optional[Tier],
    directory: Dict[str, Any],
    tiers: Sequence[Tier] = TIER_CATALOG,
) -> List[Any]:
    """
    Build the final role list for a member.

    Args:
        current_roles: Roles the member holds now
        target_tier: Tier to assign, or None to hold no tier role
        directory: Role name -> role handle for the guild
        tiers: Tier catalog defining which roles are tier roles

    Returns:
        other_roles, plus the target tier's role if a tier was given

    Raises:
        RoleNotFoundError: If the target tier's role is not in the directory
    """
    _, other_roles = partition_roles(current_roles, tiers)
    desired = list(other_roles)

    if target_tier is not None:
        role = directory.get(target_tier.role_name)
        if role is None:
            raise RoleNotFoundError(target_tier)
        desired.append(role)

    return desired


def _role_ids(roles: Sequence[Any]) -> set:
    return {role.id for role in roles}


def _is_default_role(role: Any) -> bool:
    # @everyone is implicit and can't be sent in a role-list replace
    is_default = getattr(role, "is_default", None)
    return bool(is_default()) if callable(is_default) else False


async def reconcile(
    member: Any,
    target_tier: Optional[Tier],
    directory: Dict[str, Any],
    tiers: Sequence[Tier] = TIER_CATALOG,
) -> Tuple[List[Any], bool]:
    """
    Apply the desired role set to a member in one replace call.

    The member is left untouched when the target role is missing or
    when they already hold exactly the desired set.

    Args:
        member: Guild member whose roles are replaced
        target_tier: Tier to assign, or None for no tier role
        directory: Role name -> role handle for the guild
        tiers: Tier catalog

    Returns:
        (applied_roles, changed) where changed is False if no call was made

    Raises:
        RoleNotFoundError: Target role is missing, nothing was changed
        MemberUpdateFailedError: The replace failed (HTTP or transport error)
    """
    current_roles = list(member.roles)
    desired = compute_desired_roles(current_roles, target_tier, directory, tiers)

    if _role_ids(current_roles) == _role_ids(desired):
        log_event(
            "member_roles_unchanged",
            member_id=getattr(member, "id", None),
            tier=target_tier.name if target_tier else None,
        )
        return desired, False

    payload = [role for role in desired if not _is_default_role(role)]
    try:
        await member.edit(roles=payload, reason="PUBG rank tier sync")
    except discord.HTTPException as exc:
        raise MemberUpdateFailedError(str(exc)) from exc
    except _TRANSPORT_ERRORS as exc:
        raise MemberUpdateFailedError(str(exc) or type(exc).__name__) from exc

    log_event(
        "member_roles_replaced",
        member_id=getattr(member, "id", None),
        tier=target_tier.name if target_tier else None,
        removed=[role.name for role in current_roles if role.id not in _role_ids(desired)],
        role_count=len(payload),
    )
    return desired, True
