"""Service test fixtures - in-memory inventory wired into a resolver."""

import pytest

from noderefs.core.domain_types import ClusterName, MemberScope
from noderefs.infrastructure.memory_inventory import InMemoryMemberInventory
from noderefs.services.node_reference_resolver import NodeReferenceResolver

CLUSTER = ClusterName("workload-a")


@pytest.fixture
def inventory(node_snapshot):
    return InMemoryMemberInventory({CLUSTER: node_snapshot})


@pytest.fixture
def resolver(inventory):
    return NodeReferenceResolver(inventory, MemberScope(CLUSTER))
