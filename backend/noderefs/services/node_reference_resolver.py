"""Node Reference Resolver - fetches one member snapshot and resolves provider IDs.

Invariants:
    - Exactly one list_members call per resolve(), regardless of request size
    - Inventory failures re-raised unchanged (same exception object, never
      masked as NoAvailableMembersError)
    - asyncio.CancelledError during the fetch propagates immediately
    - No state kept between calls: identical snapshot + request → identical result
    - aclose() (or leaving `async with`) releases the accessor's resources

Design Decisions:
    - Accessor injected, not subclassed: the in-memory fixture and the network
      accessors are interchangeable
    - Logging lives here, not in core/: the core stays pure
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from noderefs.config import Settings
from noderefs.core.domain_types import ClusterName, MemberScope
from noderefs.core.errors import (
    ErrorContext, InventoryUnavailableError, NoAvailableMembersError,
)
from noderefs.core.members import ReferenceResult
from noderefs.core.repository_protocols import MemberInventory
from noderefs.core.resolve_references import resolve_references
from noderefs.infrastructure.inventory_factory import build_inventory

logger = logging.getLogger(__name__)


class NodeReferenceResolver:
    """Resolves provider IDs to member references for one cluster scope."""

    def __init__(
        self,
        inventory: MemberInventory,
        scope: MemberScope,
        min_ready_seconds: int = 0,
    ):
        self.inventory = inventory
        self.scope = scope
        self.min_ready_seconds = min_ready_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "NodeReferenceResolver":
        """Wire the configured accessor for settings.cluster_name."""
        return cls(
            build_inventory(settings),
            MemberScope(
                cluster=ClusterName(settings.cluster_name),
                label_selector=settings.label_selector,
            ),
            min_ready_seconds=settings.min_ready_seconds,
        )

    async def resolve(
        self,
        requested: Sequence[str],
        *,
        now: datetime | None = None,
    ) -> ReferenceResult:
        """Resolve requested provider IDs, preserving their order.

        Raises:
            NoAvailableMembersError: requested is non-empty and nothing matched.
            InventoryUnavailableError: the bulk listing failed (propagated as-is).
        """
        requested = list(requested)
        backend = getattr(self.inventory, "backend_name", None)
        log_extra = {
            "cluster": self.scope.cluster,
            "backend": backend,
            "requested_count": len(requested),
        }

        try:
            snapshot = await self.inventory.list_members(self.scope)
        except InventoryUnavailableError as e:
            logger.warning(
                f"Member inventory unavailable: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            raise

        context = ErrorContext(
            cluster=self.scope.cluster, backend=backend,
        )
        try:
            result = resolve_references(
                snapshot, requested,
                min_ready_seconds=self.min_ready_seconds,
                now=now,
                context=context,
            )
        except NoAvailableMembersError as e:
            logger.info(
                e.message,
                extra={**log_extra, "error_code": e.code, "matched_count": 0},
            )
            raise

        if result.duplicate_provider_ids:
            logger.warning(
                "Duplicate provider IDs in member snapshot; last occurrence used",
                extra={
                    **log_extra,
                    "duplicate_provider_ids": list(result.duplicate_provider_ids),
                },
            )
        logger.info(
            "Resolved node references",
            extra={
                **log_extra,
                "matched_count": len(result.references),
                "missing_count": len(result.missing),
                "ready_count": result.ready,
                "available_count": result.available,
            },
        )
        return result

    async def aclose(self) -> None:
        """Release the accessor's client or connection pool."""
        await self.inventory.aclose()

    async def __aenter__(self) -> "NodeReferenceResolver":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
