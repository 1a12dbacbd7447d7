import unittest

from fakes import FakeGuild, FakeMember, FakeRole
from models.tier import get_tier_by_name
from services.membership import (
    MemberUpdateFailedError,
    RoleNotFoundError,
    compute_desired_roles,
    partition_roles,
    reconcile,
)
from services.tier_catalog import build_role_index


def _tier_roles(*names):
    return {f"PUBG-{name}": FakeRole(f"PUBG-{name}") for name in names}


class PartitionTests(unittest.TestCase):
    def test_partition_keeps_order(self):
        a, b, c = FakeRole("A"), FakeRole("B"), FakeRole("C")
        gold, silver = FakeRole("PUBG-Gold"), FakeRole("PUBG-Silver")
        tier_roles, other_roles = partition_roles([a, gold, b, silver, c])
        self.assertEqual(tier_roles, [gold, silver])
        self.assertEqual(other_roles, [a, b, c])

    def test_lookalike_names_are_not_tier_roles(self):
        roles = [FakeRole("pubg-gold"), FakeRole("PUBG-Wood"), FakeRole("Gold")]
        tier_roles, other_roles = partition_roles(roles)
        self.assertEqual(tier_roles, [])
        self.assertEqual(other_roles, roles)

    def test_desired_roles_for_no_tier(self):
        a = FakeRole("A")
        desired = compute_desired_roles([a, FakeRole("PUBG-Gold")], None, {})
        self.assertEqual(desired, [a])


class ReconcileTests(unittest.IsolatedAsyncioTestCase):
    async def test_replaces_tier_and_keeps_other_roles(self):
        directory = _tier_roles("Gold", "Diamond")
        a, b = FakeRole("A"), FakeRole("B")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[a, directory["PUBG-Gold"], b])

        applied, changed = await reconcile(member, get_tier_by_name("Diamond"), directory)

        self.assertTrue(changed)
        self.assertEqual(len(member.edit_calls), 1)
        self.assertEqual(member.edit_calls[0], [a, b, directory["PUBG-Diamond"]])
        self.assertEqual(member.role_names(), ["A", "B", "PUBG-Diamond"])
        self.assertIs(member.roles[1], a)
        self.assertIs(member.roles[2], b)
        self.assertIn(directory["PUBG-Diamond"], applied)

    async def test_everyone_role_is_not_sent(self):
        directory = _tier_roles("Gold")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[FakeRole("A")])

        applied, _ = await reconcile(member, get_tier_by_name("Gold"), directory)

        self.assertIs(applied[0], guild.default_role)
        self.assertNotIn(guild.default_role, member.edit_calls[0])

    async def test_multiple_tier_roles_collapse_to_one(self):
        directory = _tier_roles("Bronze", "Silver", "Master")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[directory["PUBG-Bronze"], FakeRole("A"), directory["PUBG-Silver"]])

        await reconcile(member, get_tier_by_name("Master"), directory)

        self.assertEqual(member.role_names(), ["A", "PUBG-Master"])

    async def test_no_tier_removes_tier_roles(self):
        directory = _tier_roles("Gold")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[FakeRole("A"), directory["PUBG-Gold"]])

        applied, changed = await reconcile(member, None, directory)

        self.assertTrue(changed)
        self.assertEqual(member.role_names(), ["A"])

    async def test_missing_target_role_leaves_member_unchanged(self):
        directory = _tier_roles("Gold")
        guild = FakeGuild()
        original = [FakeRole("A"), directory["PUBG-Gold"]]
        member = FakeMember(guild, roles=original)
        before = list(member.roles)

        with self.assertRaises(RoleNotFoundError) as ctx:
            await reconcile(member, get_tier_by_name("Elite"), directory)

        self.assertEqual(ctx.exception.tier.name, "Elite")
        self.assertEqual(member.edit_calls, [])
        self.assertEqual(member.roles, before)

    async def test_already_in_desired_state_makes_no_call(self):
        directory = _tier_roles("Gold")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[FakeRole("A"), directory["PUBG-Gold"]])

        _, changed = await reconcile(member, get_tier_by_name("Gold"), directory)

        self.assertFalse(changed)
        self.assertEqual(member.edit_calls, [])

    async def test_duplicate_named_tier_role_is_swapped_for_directory_role(self):
        directory = _tier_roles("Gold")
        stray_gold = FakeRole("PUBG-Gold")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[stray_gold])

        _, changed = await reconcile(member, get_tier_by_name("Gold"), directory)

        self.assertTrue(changed)
        self.assertEqual(member.roles[1:], [directory["PUBG-Gold"]])

    async def test_edit_failure_is_wrapped(self):
        directory = _tier_roles("Gold", "Silver")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[directory["PUBG-Silver"]], fail_edit=True)
        before = list(member.roles)

        with self.assertRaises(MemberUpdateFailedError):
            await reconcile(member, get_tier_by_name("Gold"), directory)

        self.assertEqual(member.roles, before)
        self.assertEqual(len(member.edit_calls), 1)

    async def test_transport_error_on_edit_is_wrapped(self):
        directory = _tier_roles("Gold", "Silver")
        guild = FakeGuild()
        member = FakeMember(guild, roles=[directory["PUBG-Silver"]], edit_error=OSError("connection reset"))
        before = list(member.roles)

        with self.assertRaises(MemberUpdateFailedError) as ctx:
            await reconcile(member, get_tier_by_name("Gold"), directory)

        self.assertIn("connection reset", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertEqual(member.roles, before)

    async def test_directory_from_guild_roles(self):
        gold = FakeRole("PUBG-Gold")
        guild = FakeGuild(roles=[gold])
        member = FakeMember(guild)

        await reconcile(member, get_tier_by_name("Gold"), build_role_index(guild.roles))

        self.assertEqual(member.roles[1:], [gold])


if __name__ == "__main__":
    unittest.main()
