"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ProviderId is compared by exact string equality (no normalization)
    - MemberScope.cluster is the tenant boundary every accessor filters on
    - All valid backend choices encoded as an Enum - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and parse from env vars without custom code
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProviderId = NewType("ProviderId", str)     # e.g. "aws://us-east-1/i-0abc"
ClusterName = NewType("ClusterName", str)


# ─── Scope ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class MemberScope:
    """Boundary a member listing is narrowed to."""
    cluster: ClusterName
    label_selector: str | None = None


# ─── Enums ───────────────────────────────────────────────────────

class InventoryBackend(str, Enum):
    """Which MemberInventory implementation the shell wires in."""
    KUBERNETES = "kubernetes"
    DATABASE = "database"
    MEMORY = "memory"
