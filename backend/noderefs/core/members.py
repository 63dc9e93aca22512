"""Member Records - immutable value types flowing between accessor, core and caller.

Invariants:
    - MemberRecord.name is non-empty; namespace is "" for cluster-scoped members
    - provider_id may be "" (such members can never be matched)
    - ReferenceResult.references follows the caller's requested order, misses omitted
    - ReferenceResult.missing holds every requested ID that did not match, in input order

Design Decisions:
    - frozen dataclasses: a snapshot cannot be mutated while a resolution runs
    - tuples over lists: results compare by value, which makes idempotence checkable
    - missing kept next to references: partial vs. total visibility is explicit
      rather than inferred from an empty collection
"""

from dataclasses import dataclass, field
from datetime import datetime

from noderefs.core.domain_types import ProviderId

NODE_KIND = "Node"
NODE_API_VERSION = "v1"


@dataclass(frozen=True)
class MemberRecord:
    """One registered cluster member as reported by an inventory listing."""
    name: str
    namespace: str = ""
    provider_id: str = ""
    ready_since: datetime | None = None  # None = not Ready or unknown


@dataclass(frozen=True)
class NodeReference:
    """Stable reference to a matched member."""
    name: str
    namespace: str = ""

    @classmethod
    def from_record(cls, record: MemberRecord) -> "NodeReference":
        return cls(name=record.name, namespace=record.namespace)


@dataclass(frozen=True)
class ReferenceResult:
    """Outcome of one resolution call."""
    references: tuple[NodeReference, ...] = ()
    missing: tuple[ProviderId, ...] = ()
    ready: int = 0
    available: int = 0
    duplicate_provider_ids: tuple[ProviderId, ...] = field(default=(), compare=False)

    @property
    def is_partial(self) -> bool:
        """True when some, but not all, requested IDs resolved."""
        return bool(self.references) and bool(self.missing)
