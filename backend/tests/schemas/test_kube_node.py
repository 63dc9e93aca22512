"""Kubernetes Node Schemas - NodeList payloads validate into MemberRecords."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from noderefs.core.members import MemberRecord
from noderefs.schemas.kube_node import KubeNode, KubeNodeList


def test_node_maps_to_member_record():
    node = KubeNode.model_validate({
        "metadata": {"name": "node-1", "labels": {"a": "b"}},
        "spec": {"providerID": "aws://us-east-1/id-node-1", "podCIDR": "10.0.0.0/24"},
        "status": {"conditions": [
            {"type": "Ready", "status": "True", "lastTransitionTime": "2024-01-01T12:00:00Z"},
        ]},
    })
    assert node.to_member() == MemberRecord(
        "node-1", "", "aws://us-east-1/id-node-1",
        datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.mark.parametrize("status", ["False", "Unknown"])
def test_not_ready_condition_has_no_ready_since(status):
    node = KubeNode.model_validate({
        "metadata": {"name": "node-1"},
        "status": {"conditions": [
            {"type": "Ready", "status": status, "lastTransitionTime": "2024-01-01T12:00:00Z"},
        ]},
    })
    assert node.ready_since() is None


def test_bare_node_defaults():
    member = KubeNode.model_validate({"metadata": {"name": "node-1"}}).to_member()
    assert member == MemberRecord("node-1")


def test_node_requires_name():
    with pytest.raises(ValidationError):
        KubeNode.model_validate({"metadata": {"name": ""}})


def test_node_list_continue_token():
    nodes = KubeNodeList.model_validate({
        "metadata": {"continue": "abc", "resourceVersion": "1"},
        "items": [{"metadata": {"name": "n"}}],
    })
    assert nodes.metadata.continue_token == "abc"
    assert len(nodes.items) == 1


def test_empty_node_list():
    nodes = KubeNodeList.model_validate({"kind": "NodeList"})
    assert nodes.items == []
    assert nodes.metadata.continue_token is None


def test_transition_time_without_offset_read_as_utc():
    node = KubeNode.model_validate({
        "metadata": {"name": "node-1"},
        "status": {"conditions": [
            {"type": "Ready", "status": "True", "lastTransitionTime": "2024-01-01T12:00:00"},
        ]},
    })
    assert node.ready_since() == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert node.ready_since().tzinfo is not None
