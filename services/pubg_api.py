"""
PUBG API client for the PUBG Rank Role Bot.

Thin async wrapper over the official PUBG developer API.
The aiohttp session is owned by the bot and shared across commands.
"""

import asyncio
import time
from typing import Any, Dict, List, Optional

import aiohttp

from config.settings import PUBG_API_BASE_URL, PUBG_API_TIMEOUT_SECONDS
from models.season_stats import SeasonStatsSnapshot


class StatsLookupFailedError(Exception):
    """The PUBG API call failed or returned nothing usable."""


class PlayerNotFoundError(StatsLookupFailedError):
    """No player with that name on the platform."""


class SeasonNotFoundError(StatsLookupFailedError):
    """No season matches the requested id."""


class PubgApiClient:
    """
    Async client for the endpoints the bot needs.

    Every error (HTTP status, timeout, connection problem, bad payload)
    surfaces as StatsLookupFailedError or one of its subclasses.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: Optional[str],
        base_url: str = PUBG_API_BASE_URL,
        timeout: float = PUBG_API_TIMEOUT_SECONDS,
    ):
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/vnd.api+json",
        }

    async def _get_json(self, path: str, params: Optional[Dict[str, str]] = None) -> dict:
        """
        GET a JSON:API document.

        Raises:
            PlayerNotFoundError: On 404 (the API uses 404 for unknown players)
            StatsLookupFailedError: On any other failure
        """
        if not self._api_key:
            raise StatsLookupFailedError("PUBG_API_KEY is not configured")

        url = f"{self._base_url}{path}"
        try:
            async with self._session.get(
                url, headers=self.headers, params=params, timeout=self._timeout
            ) as response:
                if response.status == 404:
                    raise PlayerNotFoundError(f"Not found: {path}")
                if response.status == 429:
                    raise StatsLookupFailedError("PUBG API rate limit reached, try again in a minute")
                response.raise_for_status()
                return await response.json(content_type=None)
        except aiohttp.ClientResponseError as exc:
            raise StatsLookupFailedError(f"PUBG API error {exc.status}: {exc.message}") from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise StatsLookupFailedError(f"PUBG API unreachable: {type(exc).__name__}") from exc
        except ValueError as exc:
            raise StatsLookupFailedError("PUBG API returned invalid JSON") from exc

    async def get_player(self, name: str, platform: str) -> Dict[str, Any]:
        """
        Look up a player by exact name.

        Returns:
            The JSON:API player resource ({"id": "account.xxx", "attributes": {...}})
        """
        document = await self._get_json(
            f"/shards/{platform}/players",
            params={"filter[playerNames]": name},
        )
        players = document.get("data") or []
        if not players or not players[0].get("id"):
            raise PlayerNotFoundError(f"Player {name} not found on {platform}")
        return players[0]

    async def get_seasons(self, platform: str) -> List[Dict[str, Any]]:
        document = await self._get_json(f"/shards/{platform}/seasons")
        return document.get("data") or []

    async def resolve_season_id(self, platform: str, season: Optional[str] = None) -> str:
        """
        Resolve a season argument to a full season id.

        Args:
            platform: Platform shard
            season: None or "current" for the current season, a full id
                    ("division.bro.official.pc-2018-10") or its suffix ("2018-10")
        """
        seasons = await self.get_seasons(platform)
        wanted = (season or "current").strip()

        if wanted.lower() == "current":
            for entry in seasons:
                if (entry.get("attributes") or {}).get("isCurrentSeason"):
                    return entry["id"]
            raise SeasonNotFoundError(f"No current season reported for {platform}")

        for entry in seasons:
            if entry.get("id") == wanted:
                return entry["id"]
        for entry in seasons:
            if str(entry.get("id", "")).endswith(wanted):
                return entry["id"]
        raise SeasonNotFoundError(f"Season {wanted} not found on {platform}")

    async def get_season_stats(
        self,
        account_id: str,
        season_id: str,
        platform: str,
        player_name: Optional[str] = None,
    ) -> SeasonStatsSnapshot:
        try:
            document = await self._get_json(
                f"/shards/{platform}/players/{account_id}/seasons/{season_id}"
            )
        except PlayerNotFoundError as exc:
            raise SeasonNotFoundError(
                f"No stats for {player_name or account_id} in season {season_id}"
            ) from exc
        return SeasonStatsSnapshot.from_api_payload(
            document, player_name=player_name, platform=platform
        )

    async def get_player_season_snapshot(
        self,
        name: str,
        platform: str,
        season: Optional[str] = None,
    ) -> SeasonStatsSnapshot:
        """Player lookup + season resolution + stats, in that order."""
        player = await self.get_player(name, platform)
        season_id = await self.resolve_season_id(platform, season)
        return await self.get_season_stats(player["id"], season_id, platform, player_name=name)

    async def get_status_latency(self) -> Optional[float]:
        """
        Round-trip time of GET /status in milliseconds.

        Returns None when the API is unreachable. /status needs no API key.
        """
        started = time.perf_counter()
        try:
            async with self._session.get(
                f"{self._base_url}/status", timeout=self._timeout
            ) as response:
                if response.status != 200:
                    return None
                await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError):
            return None
        return (time.perf_counter() - started) * 1000
