"""ORM Models - SQLAlchemy declarative models read by the database inventory.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are scoped by cluster; the resolver only ever reads them

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from noderefs.models.cluster_member import ClusterMember  # noqa: F401
