"""In-Memory Member Inventory - fixture behaviour the service tests rely on."""

import pytest

from noderefs.core.domain_types import MemberScope
from noderefs.core.members import MemberRecord
from noderefs.infrastructure.memory_inventory import InMemoryMemberInventory


async def test_returns_members_in_added_order():
    inventory = InMemoryMemberInventory()
    inventory.add("c", MemberRecord("b"), MemberRecord("a"))
    inventory.add("c", MemberRecord("z"))
    members = await inventory.list_members(MemberScope("c"))
    assert [m.name for m in members] == ["b", "a", "z"]


async def test_records_every_call():
    inventory = InMemoryMemberInventory()
    await inventory.list_members(MemberScope("c"))
    await inventory.list_members(MemberScope("d", "role=worker"))
    assert inventory.calls == [MemberScope("c"), MemberScope("d", "role=worker")]


async def test_injected_failure_raised_until_cleared():
    inventory = InMemoryMemberInventory({"c": [MemberRecord("n")]})
    inventory.fail_with(ConnectionError("down"))
    with pytest.raises(ConnectionError):
        await inventory.list_members(MemberScope("c"))
    inventory.fail_with(None)
    assert len(await inventory.list_members(MemberScope("c"))) == 1


async def test_aclose_is_noop():
    inventory = InMemoryMemberInventory({"c": [MemberRecord("n")]})
    await inventory.aclose()
    assert len(await inventory.list_members(MemberScope("c"))) == 1
