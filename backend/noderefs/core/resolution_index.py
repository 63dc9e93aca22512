"""Resolution Index - provider_id → MemberRecord mapping built from one snapshot.

Invariants:
    - Built fresh per resolution call, discarded afterwards
    - Records with an empty provider_id are never indexed
    - Duplicate provider_id: the later record in snapshot order wins
    - Keys are exact strings; no case folding, trimming or URI parsing

Design Decisions:
    - Last-write-wins is the plain consequence of repeated insertion. Provider IDs
      are unique in practice, so a duplicate is recorded for the shell to log,
      not raised as a data-integrity error
    - Lookups only: callers iterate their own requested list, never the index,
      so output order never depends on mapping iteration order
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from noderefs.core.domain_types import ProviderId
from noderefs.core.members import MemberRecord


@dataclass
class ResolutionIndex:
    """Ephemeral lookup table for one resolution call."""
    by_provider_id: dict[str, MemberRecord] = field(default_factory=dict)
    duplicates: list[ProviderId] = field(default_factory=list)

    def get(self, provider_id: str) -> MemberRecord | None:
        return self.by_provider_id.get(provider_id)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self.by_provider_id

    def __len__(self) -> int:
        return len(self.by_provider_id)


def build_index(snapshot: Iterable[MemberRecord]) -> ResolutionIndex:
    """Index a member snapshot by provider ID. Pure, no IO."""
    index = ResolutionIndex()
    for record in snapshot:
        if not record.provider_id:
            continue
        if record.provider_id in index.by_provider_id:
            index.duplicates.append(ProviderId(record.provider_id))
        index.by_provider_id[record.provider_id] = record
    return index
