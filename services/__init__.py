"""
Services module for the PUBG Rank Role Bot.

This module contains business logic for tier classification, tier role
management, member role reconciliation and the PUBG API client.
"""

from services.rank_classifier import (
    classify,
    tier_for_points,
    coerce_rank_points,
)

from services.tier_catalog import (
    build_role_index,
    ensure_all_tiers_exist,
    merge_created_roles,
)

from services.membership import (
    MemberUpdateFailedError,
    RoleNotFoundError,
    compute_desired_roles,
    partition_roles,
    reconcile,
)

from services.role_sync import sync

from services.pubg_api import (
    PlayerNotFoundError,
    PubgApiClient,
    SeasonNotFoundError,
    StatsLookupFailedError,
)

__all__ = [
    # Classification
    "classify",
    "tier_for_points",
    "coerce_rank_points",
    # Catalog
    "build_role_index",
    "ensure_all_tiers_exist",
    "merge_created_roles",
    # Reconciliation
    "MemberUpdateFailedError",
    "RoleNotFoundError",
    "compute_desired_roles",
    "partition_roles",
    "reconcile",
    # Orchestration
    "sync",
    # PUBG API
    "PlayerNotFoundError",
    "PubgApiClient",
    "SeasonNotFoundError",
    "StatsLookupFailedError",
]
