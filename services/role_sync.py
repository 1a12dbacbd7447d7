"""
Role sync orchestration for the PUBG Rank Role Bot.

Entry point used by the /role command: classify -> ensure tier roles
exist -> reconcile the member's roles. Each step is awaited before the
next one starts.
"""

from typing import Any, Sequence

from event_logger import log_event
from models.season_stats import SeasonStatsSnapshot
from models.sync_result import SyncResult, SyncStatus
from models.tier import TIER_CATALOG, Tier
from services.membership import RoleNotFoundError, reconcile
from services.rank_classifier import classify
from services.tier_catalog import (
    build_role_index,
    ensure_all_tiers_exist,
    failed_tiers,
    merge_created_roles,
)


async def sync(
    guild: Any,
    member: Any,
    snapshot: SeasonStatsSnapshot,
    tiers: Sequence[Tier] = TIER_CATALOG,
) -> SyncResult:
    """
    Synchronize a member's tier role with their season stats.

    Args:
        guild: Guild whose role directory is used (and may gain tier roles)
        member: Member whose roles are replaced
        snapshot: Player's season stats
        tiers: Ordered tier catalog

    Returns:
        SyncResult:
        - NO_RANKED_DATA: no populated mode, nothing touched
        - ROLE_NOT_FOUND: target role missing after the catalog pass,
          member unchanged
        - APPLIED: member holds exactly the classified tier role
        - PARTIAL_CATALOG_FAILURE: same as APPLIED, but other tier roles
          could not be created this time

    Raises:
        MemberUpdateFailedError: The final role replace failed
    """
    guild_id = getattr(guild, "id", None)
    member_id = getattr(member, "id", None)

    tier = classify(snapshot, tiers)
    if tier is None:
        log_event(
            "role_sync_completed",
            guild_id=guild_id,
            member_id=member_id,
            status=SyncStatus.NO_RANKED_DATA.value,
        )
        return SyncResult(status=SyncStatus.NO_RANKED_DATA)

    outcomes = await ensure_all_tiers_exist(guild, tiers)
    failures = failed_tiers(outcomes)
    directory = merge_created_roles(build_role_index(guild.roles), outcomes)

    try:
        _, changed = await reconcile(member, tier, directory, tiers)
    except RoleNotFoundError:
        log_event(
            "role_sync_failed",
            guild_id=guild_id,
            member_id=member_id,
            status=SyncStatus.ROLE_NOT_FOUND.value,
            tier=tier.name,
        )
        return SyncResult(status=SyncStatus.ROLE_NOT_FOUND, failed_tiers=failures)

    status = SyncStatus.PARTIAL_CATALOG_FAILURE if failures else SyncStatus.APPLIED
    log_event(
        "role_sync_completed",
        guild_id=guild_id,
        member_id=member_id,
        status=status.value,
        tier=tier.name,
        roles_changed=changed,
        failed_tiers=[failed.name for failed in failures],
    )
    return SyncResult(status=status, tier=tier, failed_tiers=failures, roles_changed=changed)
