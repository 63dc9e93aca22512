"""Node Reference Payloads - serializable form of a ReferenceResult.

Invariants:
    - references keep the ReferenceResult order
    - kind/apiVersion are fixed to the core Node reference constants
"""

from pydantic import BaseModel, ConfigDict, Field

from noderefs.core.members import (
    NODE_API_VERSION, NODE_KIND, ReferenceResult,
)


class NodeReferencePayload(BaseModel):
    """ObjectReference-shaped pointer to a Node."""
    model_config = ConfigDict(populate_by_name=True)

    kind: str = NODE_KIND
    api_version: str = Field(NODE_API_VERSION, alias="apiVersion")
    name: str
    namespace: str = ""


class ReferenceResultPayload(BaseModel):
    """Status-style summary of one resolution."""
    model_config = ConfigDict(populate_by_name=True)

    references: list[NodeReferencePayload]
    missing: list[str] = Field(default_factory=list)
    ready: int = Field(0, ge=0)
    available: int = Field(0, ge=0)
    partial: bool = False

    @classmethod
    def from_result(cls, result: ReferenceResult) -> "ReferenceResultPayload":
        return cls(
            references=[
                NodeReferencePayload(name=ref.name, namespace=ref.namespace)
                for ref in result.references
            ],
            missing=list(result.missing),
            ready=result.ready,
            available=result.available,
            partial=result.is_partial,
        )
