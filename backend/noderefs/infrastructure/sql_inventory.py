"""SQL Member Inventory - lists cluster members from the cluster_members mirror.

Invariants:
    - One SELECT per list_members call, filtered by scope.cluster
    - Rows returned in id order (insertion order), which is the snapshot order
    - scope.label_selector is ignored: the mirror stores no labels
    - Failures surface as InventoryUnavailableError via DatabaseSessionManager
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select

from noderefs.core.domain_types import MemberScope
from noderefs.core.errors import ErrorContext
from noderefs.core.members import MemberRecord
from noderefs.infrastructure.database import DatabaseSessionManager
from noderefs.models.cluster_member import ClusterMember

logger = logging.getLogger(__name__)


class SqlMemberInventory:
    """MemberInventory backed by a SQL mirror of Node objects."""

    backend_name = "database"

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def list_members(self, scope: MemberScope) -> Sequence[MemberRecord]:
        context = ErrorContext(cluster=scope.cluster, backend=self.backend_name)
        async with self.db_manager.session(context) as db:
            result = await db.execute(
                select(ClusterMember)
                .where(ClusterMember.cluster == scope.cluster)
                .order_by(ClusterMember.id)
            )
            rows = result.scalars().all()
        logger.debug(
            f"Listed {len(rows)} mirrored members",
            extra={"cluster": scope.cluster, "backend": self.backend_name},
        )
        return [row.to_member() for row in rows]

    async def aclose(self) -> None:
        await self.db_manager.dispose()
