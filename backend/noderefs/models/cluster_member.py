"""ClusterMember ORM - mirror of the members registered in a workload cluster.

Invariants:
    - (cluster, namespace, name) is unique
    - provider_id defaults to "" (not yet reported by the kubelet)
    - ready_since is NULL while the member is not Ready
    - id is monotonically increasing: id order is snapshot order

Design Decisions:
    - provider_id indexed but NOT unique: a stale mirror may briefly hold two rows
      with the same ID, and the resolver's last-write-wins rule handles it
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from noderefs.core.members import MemberRecord
from noderefs.db.base import Base


class ClusterMember(Base):
    """ClusterMember entity - one Node as last seen by the mirror."""
    __tablename__ = "cluster_members"
    __table_args__ = (
        UniqueConstraint("cluster", "namespace", "name", name="uq_cluster_member"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cluster: Mapped[str] = mapped_column(String(253), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(253), nullable=False)
    namespace: Mapped[str] = mapped_column(String(253), nullable=False, default="")
    provider_id: Mapped[str] = mapped_column(
        String(1024), nullable=False, default="", index=True,
    )
    ready_since: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_member(self) -> MemberRecord:
        ready_since = self.ready_since
        # SQLite drops tzinfo on the way back
        if ready_since is not None and ready_since.tzinfo is None:
            ready_since = ready_since.replace(tzinfo=timezone.utc)
        return MemberRecord(
            name=self.name,
            namespace=self.namespace,
            provider_id=self.provider_id,
            ready_since=ready_since,
        )
