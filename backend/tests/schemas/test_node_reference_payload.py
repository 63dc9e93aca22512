"""Node Reference Payloads - serialized ReferenceResult shape."""

from noderefs.core.members import NodeReference, ReferenceResult
from noderefs.schemas.node_reference import ReferenceResultPayload


def test_payload_keeps_order_and_counts():
    result = ReferenceResult(
        references=(NodeReference("node-1"), NodeReference("azure-node-4", "ns")),
        missing=("aws:///id-node-100",),
        ready=2,
        available=1,
    )
    payload = ReferenceResultPayload.from_result(result).model_dump(by_alias=True)
    assert payload == {
        "references": [
            {"kind": "Node", "apiVersion": "v1", "name": "node-1", "namespace": ""},
            {"kind": "Node", "apiVersion": "v1", "name": "azure-node-4", "namespace": "ns"},
        ],
        "missing": ["aws:///id-node-100"],
        "ready": 2,
        "available": 1,
        "partial": True,
    }


def test_empty_result_payload():
    payload = ReferenceResultPayload.from_result(ReferenceResult())
    assert payload.references == []
    assert payload.partial is False


def test_payload_json_uses_api_field_names():
    payload = ReferenceResultPayload.from_result(
        ReferenceResult(references=(NodeReference("node-1"),)),
    )
    assert '"apiVersion":"v1"' in payload.model_dump_json(by_alias=True)
