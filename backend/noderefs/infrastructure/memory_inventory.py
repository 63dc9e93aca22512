"""In-Memory Member Inventory - fixture accessor for tests and dry runs.

Invariants:
    - list_members returns members in the order they were added for that cluster
    - An injected failure is raised as-is on every call until cleared
    - calls records each scope listed, so callers can assert one bulk read per resolution
"""

from collections.abc import Iterable, Sequence

from noderefs.core.domain_types import MemberScope
from noderefs.core.members import MemberRecord


class InMemoryMemberInventory:
    """MemberInventory holding snapshots per cluster."""

    backend_name = "memory"

    def __init__(
        self, members: dict[str, Iterable[MemberRecord]] | None = None,
    ):
        self._members: dict[str, list[MemberRecord]] = {
            cluster: list(records) for cluster, records in (members or {}).items()
        }
        self.failure: BaseException | None = None
        self.calls: list[MemberScope] = []

    def add(self, cluster: str, *records: MemberRecord) -> None:
        self._members.setdefault(cluster, []).extend(records)

    def fail_with(self, error: BaseException | None) -> None:
        self.failure = error

    async def list_members(self, scope: MemberScope) -> Sequence[MemberRecord]:
        self.calls.append(scope)
        if self.failure is not None:
            raise self.failure
        return tuple(self._members.get(scope.cluster, ()))

    async def aclose(self) -> None:
        """Nothing to release."""
