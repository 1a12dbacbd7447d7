"""
Tier model for the PUBG Rank Role Bot.

A Tier is a named rank category (Bronze..GrandMaster) with a display color
and the lowest rank-point value it covers. The catalog is built once at
import time from config.settings.TIER_DEFINITIONS and never mutated.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from config.settings import TIER_DEFINITIONS, TIER_ROLE_PREFIX


@dataclass(frozen=True)
class Tier:
    """
    One rank tier.

    Attributes:
        ordinal: Position in the catalog, 0 is the lowest tier
        name: Tier name without prefix (e.g. "Gold")
        color: Display color as a hex string (e.g. "F2A900")
        min_points: Lowest rank-point value mapped to this tier
    """

    ordinal: int
    name: str
    color: str
    min_points: float

    @property
    def role_name(self) -> str:
        """Name of the Discord role that represents this tier."""
        return f"{TIER_ROLE_PREFIX}{self.name}"

    @property
    def color_value(self) -> int:
        """Display color as an integer (0xRRGGBB)."""
        return int(self.color.lstrip("#"), 16)


def build_tier_catalog(definitions: Iterable[dict]) -> Tuple[Tier, ...]:
    """
    Build an ordered tier catalog from plain definitions.

    Args:
        definitions: Dicts with "name", "min_points" and "color", lowest first

    Returns:
        Tuple of Tier, ordered by ordinal

    Raises:
        ValueError: If the catalog is empty, names repeat, or bounds
                    are not strictly increasing
    """
    tiers: List[Tier] = []
    for ordinal, definition in enumerate(definitions):
        tiers.append(
            Tier(
                ordinal=ordinal,
                name=str(definition["name"]),
                color=str(definition["color"]),
                min_points=float(definition["min_points"]),
            )
        )

    if not tiers:
        raise ValueError("Tier catalog cannot be empty")

    names = [tier.name for tier in tiers]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate tier names: {names}")

    for lower, upper in zip(tiers, tiers[1:]):
        if upper.min_points <= lower.min_points:
            raise ValueError(
                f"Tier bounds must increase: {lower.name}={lower.min_points}, "
                f"{upper.name}={upper.min_points}"
            )

    return tuple(tiers)


def tier_role_names(tiers: Iterable[Tier]) -> List[str]:
    """Return the role names for every tier, lowest first."""
    return [tier.role_name for tier in tiers]


def get_tier_by_name(name: str, tiers: Optional[Iterable[Tier]] = None) -> Optional[Tier]:
    """
    Find a tier by its bare name or its role name.

    Args:
        name: "Gold" or "PUBG-Gold"
        tiers: Catalog to search (defaults to TIER_CATALOG)
    """
    lookup: Dict[str, Tier] = {}
    for tier in tiers if tiers is not None else TIER_CATALOG:
        lookup[tier.name] = tier
        lookup[tier.role_name] = tier
    return lookup.get(name)


# Process-wide catalog loaded from configuration
TIER_CATALOG: Tuple[Tier, ...] = build_tier_catalog(TIER_DEFINITIONS)
