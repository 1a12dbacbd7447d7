"""
Season stats snapshot for the PUBG Rank Role Bot.

A snapshot holds one player's per-mode rank points for one season.
It is built per command invocation from the PUBG API payload and
never persisted.
"""

from typing import Any, Dict, List, Optional

from config.settings import GAME_MODES


class SeasonStatsSnapshot:
    """
    Per-mode rank points for one player and one season.

    Only populated modes are stored. A mode is populated when the player
    has ranked rounds in it, even if their rank points are literally zero.

    Structure of rank_points:
    {"solo": 1500.0, "squad-fpp": 2210.5, ...}
    """

    def __init__(
        self,
        rank_points: Optional[Dict[str, Any]] = None,
        player_name: Optional[str] = None,
        account_id: Optional[str] = None,
        season_id: Optional[str] = None,
        platform: Optional[str] = None,
    ):
        self.rank_points: Dict[str, Any] = {}
        for mode, points in (rank_points or {}).items():
            if mode not in GAME_MODES:
                raise ValueError(f"Unknown game mode: {mode}")
            self.rank_points[mode] = points

        self.player_name = player_name
        self.account_id = account_id
        self.season_id = season_id
        self.platform = platform

    @classmethod
    def from_api_payload(
        cls,
        payload: dict,
        player_name: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> "SeasonStatsSnapshot":
        """
        Build a snapshot from a /players/{id}/seasons/{season} response.

        Args:
            payload: Decoded JSON:API document
            player_name: Display name used in messages
            platform: Platform shard the stats came from

        Returns:
            SeasonStatsSnapshot with only the populated modes
        """
        data = payload.get("data") or {}
        attributes = data.get("attributes") or {}
        relationships = data.get("relationships") or {}
        mode_stats = attributes.get("gameModeStats") or {}

        rank_points: Dict[str, Any] = {}
        for mode in GAME_MODES:
            stats = mode_stats.get(mode)
            if not isinstance(stats, dict):
                continue
            if not _is_mode_populated(stats):
                continue
            rank_points[mode] = stats.get("rankPoints", 0)

        account_id = ((relationships.get("player") or {}).get("data") or {}).get("id")
        season_id = ((relationships.get("season") or {}).get("data") or {}).get("id")

        return cls(
            rank_points=rank_points,
            player_name=player_name,
            account_id=account_id,
            season_id=season_id,
            platform=platform,
        )

    @property
    def populated_modes(self) -> List[str]:
        """Modes with ranked data, in GAME_MODES order."""
        return [mode for mode in GAME_MODES if mode in self.rank_points]

    def has_ranked_data(self) -> bool:
        return bool(self.rank_points)

    def rank_point_values(self) -> List[Any]:
        """Rank points of every populated mode (raw, unvalidated)."""
        return [self.rank_points[mode] for mode in self.populated_modes]

    def __repr__(self) -> str:
        return (
            f"SeasonStatsSnapshot(player_name={self.player_name!r}, "
            f"season_id={self.season_id!r}, rank_points={self.rank_points!r})"
        )


def _is_mode_populated(stats: dict) -> bool:
    """
    A mode counts when it has ranked rounds.

    Older payloads don't carry roundsPlayed; there the presence of
    rankPoints is enough.
    """
    rounds_played = stats.get("roundsPlayed")
    if rounds_played is None:
        return "rankPoints" in stats
    try:
        return int(rounds_played) > 0
    except (TypeError, ValueError):
        return False
