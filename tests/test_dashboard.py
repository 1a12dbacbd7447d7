import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from fastapi.testclient import TestClient

import event_logger
from config import settings
from fakes import FakeGuild, FakeMember, FakeRole
from models.tier import TIER_CATALOG
from runtime import set_bot_client
from web.app import app

AUTH = ("admin", "secret")


class FakeUser:
    id = 424242

    def __str__(self):
        return "RoleBot#0001"


class FakeBot:
    def __init__(self, guilds, members_intent=True):
        self.guilds = guilds
        self.intents = SimpleNamespace(members=members_intent)
        self.user = FakeUser()
        self.latency = 0.042

    def is_closed(self):
        return False

    def get_guild(self, guild_id):
        return next((guild for guild in self.guilds if guild.id == guild_id), None)


class DashboardTests(unittest.TestCase):
    def setUp(self):
        password = mock.patch.object(settings, "DASHBOARD_PASSWORD", "secret")
        password.start()
        self.addCleanup(password.stop)

        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        log_path = mock.patch.object(event_logger, "_LOG_PATH", Path(self._tmp.name) / "events.jsonl")
        log_path.start()
        self.addCleanup(log_path.stop)

        set_bot_client(None)
        self.addCleanup(set_bot_client, None)
        self.client = TestClient(app)

    def test_requires_auth(self):
        self.assertEqual(self.client.get("/api/tiers").status_code, 401)
        self.assertEqual(self.client.get("/api/tiers", auth=("admin", "wrong")).status_code, 401)

    def test_tiers(self):
        response = self.client.get("/api/tiers", auth=AUTH)
        self.assertEqual(response.status_code, 200)
        tiers = response.json()
        self.assertEqual(len(tiers), len(TIER_CATALOG))
        self.assertEqual(tiers[2]["role_name"], "PUBG-Gold")
        self.assertEqual(tiers[2]["color"], "#F2A900")

    def test_status_without_bot(self):
        response = self.client.get("/api/status", auth=AUTH)
        self.assertEqual(response.json()["connected"], False)

    def test_guild_tier_roles(self):
        gold, silver = FakeRole("PUBG-Gold"), FakeRole("PUBG-Silver")
        guild = FakeGuild(roles=[gold, silver, FakeRole("A")])
        ok_member = FakeMember(guild, roles=[gold])
        bad_member = FakeMember(guild, roles=[gold, silver])
        gold.members = [ok_member, bad_member]
        silver.members = [bad_member]
        guild.members = [ok_member, bad_member]
        set_bot_client(FakeBot([guild]))

        response = self.client.get(f"/api/guilds/{guild.id}/tier-roles", auth=AUTH)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        by_name = {tier["name"]: tier for tier in body["tiers"]}
        self.assertTrue(by_name["Gold"]["exists"])
        self.assertEqual(by_name["Gold"]["member_count"], 2)
        self.assertFalse(by_name["Elite"]["exists"])
        self.assertTrue(body["members_cached"])
        self.assertEqual(body["members_with_multiple_tiers"], [bad_member.id])

    def test_guild_tier_roles_without_members_intent(self):
        gold = FakeRole("PUBG-Gold")
        guild = FakeGuild(roles=[gold])
        set_bot_client(FakeBot([guild], members_intent=False))

        body = self.client.get(f"/api/guilds/{guild.id}/tier-roles", auth=AUTH).json()
        by_name = {tier["name"]: tier for tier in body["tiers"]}
        self.assertFalse(body["members_cached"])
        self.assertTrue(by_name["Gold"]["exists"])
        self.assertIsNone(by_name["Gold"]["member_count"])
        self.assertIsNone(body["members_with_multiple_tiers"])

    def test_unknown_guild(self):
        set_bot_client(FakeBot([]))
        response = self.client.get("/api/guilds/1/tier-roles", auth=AUTH)
        self.assertEqual(response.status_code, 404)

    def test_events_and_clear(self):
        event_logger.log_event("role_sync_completed", status="applied")
        events = self.client.get("/api/events?limit=5", auth=AUTH).json()
        self.assertEqual(events[-1]["event"], "role_sync_completed")

        self.assertEqual(
            self.client.post("/api/admin/logs/clear", json={}, auth=AUTH).status_code,
            400,
        )
        cleared = self.client.post("/api/admin/logs/clear", json={"confirm": True}, auth=AUTH).json()
        self.assertEqual(cleared["removed_lines"], 1)


if __name__ == "__main__":
    unittest.main()
