"""Root conftest - shared test configuration and member fixtures."""

import os
from datetime import datetime, timezone

import pytest

from noderefs.core.members import MemberRecord

# Ensure tests never reach a real API server or database
os.environ.setdefault("NODEREFS_INVENTORY_BACKEND", "memory")
os.environ.setdefault("NODEREFS_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

READY_AT = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def node_snapshot() -> list[MemberRecord]:
    """Four nodes spread over three providers, all Ready since READY_AT."""
    return [
        MemberRecord("node-1", provider_id="aws://us-east-1/id-node-1", ready_since=READY_AT),
        MemberRecord("node-2", provider_id="aws://us-west-2/id-node-2", ready_since=READY_AT),
        MemberRecord("gce-node-2", provider_id="gce://us-central1/gce-id-node-2", ready_since=READY_AT),
        MemberRecord("azure-node-4", provider_id="azure://westus2/id-node-4", ready_since=READY_AT),
    ]
