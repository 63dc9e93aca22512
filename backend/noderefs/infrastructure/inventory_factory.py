"""Inventory Factory - wires the MemberInventory named by settings.

Invariants:
    - Exactly one accessor per call; nothing is cached here
    - Unknown backends cannot reach this point (Settings validates the enum)
"""

from noderefs.config import Settings
from noderefs.core.domain_types import InventoryBackend
from noderefs.core.repository_protocols import MemberInventory
from noderefs.infrastructure.database import DatabaseSessionManager
from noderefs.infrastructure.kube_inventory import KubeNodeInventory
from noderefs.infrastructure.memory_inventory import InMemoryMemberInventory
from noderefs.infrastructure.sql_inventory import SqlMemberInventory


def build_inventory(settings: Settings) -> MemberInventory:
    """Build the accessor selected by settings.inventory_backend."""
    if settings.inventory_backend is InventoryBackend.DATABASE:
        return SqlMemberInventory(DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        ))
    if settings.inventory_backend is InventoryBackend.MEMORY:
        return InMemoryMemberInventory()
    return KubeNodeInventory(
        settings.kube_api_url,
        token=settings.kube_token,
        ca_path=settings.kube_ca_path,
        verify_tls=settings.kube_verify_tls,
        timeout_seconds=settings.kube_timeout_seconds,
        page_size=settings.kube_page_size,
    )
