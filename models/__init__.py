"""
Models module for the PUBG Rank Role Bot.

This module contains data structures for tiers, stats snapshots and sync results.
"""

from models.tier import (
    Tier,
    TIER_CATALOG,
    build_tier_catalog,
    get_tier_by_name,
    tier_role_names,
)
from models.season_stats import SeasonStatsSnapshot
from models.sync_result import SyncResult, SyncStatus, TierCreationOutcome

__all__ = [
    # Tiers
    "Tier",
    "TIER_CATALOG",
    "build_tier_catalog",
    "get_tier_by_name",
    "tier_role_names",
    # Stats
    "SeasonStatsSnapshot",
    # Sync results
    "SyncResult",
    "SyncStatus",
    "TierCreationOutcome",
]
