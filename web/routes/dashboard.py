"""
API routes for the admin dashboard.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse
from pydantic import BaseModel

from event_logger import clear_event_log, get_event_log_path, log_event, read_recent_events
from models.tier import TIER_CATALOG
from runtime import get_bot_client
from services.membership import partition_roles
from services.tier_catalog import build_role_index
from web.routes.auth import require_dashboard_auth

router = APIRouter(dependencies=[Depends(require_dashboard_auth)])
JS_SAFE_INTEGER_MAX = 9007199254740991


class ClearLogsRequest(BaseModel):
    confirm: bool = False


def _json_safe(value: Any) -> Any:
    """
    Convert values to JSON-safe primitives for JavaScript clients.

    Discord snowflake IDs exceed JS safe integer range, so convert those
    large integers to strings to avoid precision loss in the browser.
    """
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool) and abs(value) > JS_SAFE_INTEGER_MAX:
        return str(value)
    return value


def _serialize_tier(tier) -> Dict[str, Any]:
    return {
        "ordinal": tier.ordinal,
        "name": tier.name,
        "role_name": tier.role_name,
        "color": f"#{tier.color}",
        "min_points": tier.min_points,
    }


@router.get("/api/status")
def get_status() -> Dict[str, Any]:
    """
    Return bot connection status.
    """
    bot_client = get_bot_client()
    if bot_client is None or bot_client.user is None:
        return {"connected": False, "guild_count": 0, "latency_ms": None}

    return _json_safe({
        "connected": not bot_client.is_closed(),
        "user": str(bot_client.user),
        "user_id": bot_client.user.id,
        "guild_count": len(bot_client.guilds),
        "latency_ms": round(bot_client.latency * 1000, 1),
    })


@router.get("/api/tiers")
def get_tiers() -> List[Dict[str, Any]]:
    """
    Return the tier table, lowest tier first.
    """
    return [_serialize_tier(tier) for tier in TIER_CATALOG]


@router.get("/api/guilds/{guild_id}/tier-roles")
def get_guild_tier_roles(guild_id: int) -> Dict[str, Any]:
    """
    Return which tier roles exist on a guild and how many members hold each.

    Member counts come from the member cache, which is only populated when
    the members intent is enabled. Without it they are reported as null.
    """
    bot_client = get_bot_client()
    if bot_client is None:
        raise HTTPException(status_code=503, detail="Bot is not running.")

    guild = bot_client.get_guild(guild_id)
    if guild is None:
        raise HTTPException(status_code=404, detail=f"Guild {guild_id} not found.")

    members_cached = bool(getattr(bot_client.intents, "members", False))
    index = build_role_index(guild.roles)
    tiers = []
    for tier in TIER_CATALOG:
        role = index.get(tier.role_name)
        member_count = None
        if members_cached:
            member_count = len(role.members) if role is not None else 0
        tiers.append({
            **_serialize_tier(tier),
            "exists": role is not None,
            "role_id": role.id if role is not None else None,
            "member_count": member_count,
        })

    # Members holding more than one tier role break the one-tier invariant
    conflicting = None
    if members_cached:
        conflicting = [
            member.id
            for member in guild.members
            if len(partition_roles(member.roles)[0]) > 1
        ]

    return _json_safe({
        "guild_id": guild.id,
        "guild_name": guild.name,
        "members_cached": members_cached,
        "tiers": tiers,
        "members_with_multiple_tiers": conflicting,
    })


@router.get("/api/events")
def get_events(limit: int = Query(100, ge=1, le=1000)) -> List[Dict[str, Any]]:
    """
    Return the most recent runtime events, oldest first.
    """
    return _json_safe(read_recent_events(limit))


@router.post("/api/admin/logs/clear")
def clear_runtime_logs(payload: ClearLogsRequest) -> Dict[str, Any]:
    """
    Clear runtime event log file (logs/events.jsonl).
    """
    if not payload.confirm:
        raise HTTPException(
            status_code=400,
            detail="Confirmation required. Send {\"confirm\": true}.",
        )

    result = clear_event_log()
    if not result.get("ok"):
        raise HTTPException(
            status_code=500,
            detail=f"Failed to clear logs: {result.get('error', 'unknown error')}",
        )

    # Record this action after truncation so the fresh file has an audit entry.
    log_event(
        "dashboard_admin_clear_logs",
        removed_lines=result.get("removed_lines", 0),
        removed_bytes=result.get("removed_bytes", 0),
    )
    result["logged_action"] = True
    return result


@router.get("/api/admin/logs/download")
def download_runtime_logs() -> FileResponse:
    """
    Download runtime event log file (logs/events.jsonl).
    """
    log_path = get_event_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    if not log_path.exists():
        log_path.touch()

    return FileResponse(
        path=log_path,
        media_type="application/jsonl",
        filename="events.jsonl",
    )
