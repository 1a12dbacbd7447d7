import json
import tempfile
import unittest
from enum import Enum
from pathlib import Path
from unittest import mock

import event_logger


class Color(Enum):
    GOLD = "gold"


class EventLoggerTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.log_path = Path(self._tmp.name) / "logs" / "events.jsonl"
        patcher = mock.patch.object(event_logger, "_LOG_PATH", self.log_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_log_event_appends_json_lines(self):
        event_logger.log_event("tier_role_created", guild_id=1, role_name="PUBG-Gold", tier=Color.GOLD)
        event_logger.log_event("member_roles_replaced", member_id=2, removed={"PUBG-Silver"})

        lines = self.log_path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 2)
        first = json.loads(lines[0])
        self.assertEqual(first["event"], "tier_role_created")
        self.assertEqual(first["tier"], "gold")
        self.assertIn("ts_unix_ms", first)
        self.assertEqual(json.loads(lines[1])["removed"], ["PUBG-Silver"])

    def test_read_recent_events_returns_tail(self):
        for i in range(5):
            event_logger.log_event("evt", index=i)
        with self.log_path.open("a", encoding="utf-8") as fh:
            fh.write("not json\n")

        events = event_logger.read_recent_events(3)
        self.assertEqual([event["index"] for event in events], [3, 4])

    def test_read_recent_events_without_file(self):
        self.assertEqual(event_logger.read_recent_events(10), [])

    def test_clear_event_log(self):
        event_logger.log_event("evt")
        event_logger.log_event("evt")
        result = event_logger.clear_event_log()

        self.assertTrue(result["ok"])
        self.assertEqual(result["removed_lines"], 2)
        self.assertEqual(self.log_path.read_text(encoding="utf-8"), "")
        self.assertEqual(event_logger.get_event_log_path(), self.log_path)


if __name__ == "__main__":
    unittest.main()
