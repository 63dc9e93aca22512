"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - The member listing is a single bulk read; there is no per-ID lookup
    - Implementations provided by shell via dependency injection
    - aclose() releases whatever the accessor owns (HTTP client, engine); it is
      safe to call when nothing is owned

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy; the
      in-memory fixture and the network-backed accessors share no base class
    - Async in Protocol: the listing does IO, but the core functions that consume
      its result are never async themselves - the shell awaits, then calls the core
"""

from collections.abc import Sequence
from typing import Protocol

from noderefs.core.domain_types import MemberScope
from noderefs.core.members import MemberRecord


class MemberInventory(Protocol):
    """Contract for listing registered cluster members - implemented by shell.

    Failures are raised as InventoryUnavailableError; asyncio.CancelledError
    must pass through untouched.
    """
    backend_name: str

    async def list_members(self, scope: MemberScope) -> Sequence[MemberRecord]: ...
    async def aclose(self) -> None: ...
