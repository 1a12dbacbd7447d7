"""
Rank classification for the PUBG Rank Role Bot.

Maps a season stats snapshot to a single tier. Pure functions only:
no Discord objects, no network calls.
"""

import math
from typing import Any, Iterable, Optional, Sequence

from models.season_stats import SeasonStatsSnapshot
from models.tier import TIER_CATALOG, Tier


def coerce_rank_points(value: Any) -> float:
    """
    Convert a raw rankPoints value to a float.

    Malformed values (None, strings, NaN) become -inf so they fall to the
    lowest tier instead of being rejected.
    """
    try:
        points = float(value)
    except (TypeError, ValueError):
        return float("-inf")
    if math.isnan(points):
        return float("-inf")
    return points


def tier_for_points(points: Any, tiers: Sequence[Tier] = TIER_CATALOG) -> Tier:
    """
    Map a rank-point value through the tier range table.

    Values below the first bound clamp to the lowest tier, values above
    the last bound land in the highest tier.

    Examples:
        >>> tier_for_points(1450).name
        'Silver'
        >>> tier_for_points(-20).name
        'Bronze'
    """
    value = coerce_rank_points(points)
    selected = tiers[0]
    for tier in tiers:
        if value >= tier.min_points:
            selected = tier
        else:
            break
    return selected


def max_rank_points(values: Iterable[Any]) -> Optional[float]:
    """Highest coerced value, or None when there are no values."""
    coerced = [coerce_rank_points(value) for value in values]
    if not coerced:
        return None
    return max(coerced)


def classify(
    snapshot: SeasonStatsSnapshot,
    tiers: Sequence[Tier] = TIER_CATALOG,
) -> Optional[Tier]:
    """
    Derive the tier for a snapshot.

    Only the best rank points across all populated modes matter. Which
    mode produced them is irrelevant, so ties need no tie-break.

    Args:
        snapshot: Player's season stats
        tiers: Ordered tier catalog

    Returns:
        The tier for the highest rank points, or None when no mode
        has ranked data
    """
    if not snapshot.has_ranked_data():
        return None
    return tier_for_points(max_rank_points(snapshot.rank_point_values()), tiers)
