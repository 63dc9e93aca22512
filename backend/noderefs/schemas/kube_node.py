"""Kubernetes Node Schemas - the subset of a v1 NodeList the inventory needs.

Invariants:
    - Unknown fields are ignored; only metadata.name is required
    - spec.providerID missing → "" (member can never be matched)
    - Ready condition with status "True" → ready_since = lastTransitionTime
    - lastTransitionTime without an offset is read as UTC

Design Decisions:
    - Aliases mirror the API server's camelCase so payloads validate as-is
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from noderefs.core.members import MemberRecord


class _KubeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NodeCondition(_KubeModel):
    type: str
    status: str
    last_transition_time: datetime | None = Field(None, alias="lastTransitionTime")

    @field_validator("last_transition_time")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class NodeStatus(_KubeModel):
    conditions: list[NodeCondition] = Field(default_factory=list)


class NodeSpec(_KubeModel):
    provider_id: str = Field("", alias="providerID")


class ObjectMeta(_KubeModel):
    name: str = Field(min_length=1)
    namespace: str = ""


class KubeNode(_KubeModel):
    metadata: ObjectMeta
    spec: NodeSpec = Field(default_factory=NodeSpec)
    status: NodeStatus = Field(default_factory=NodeStatus)

    def ready_since(self) -> datetime | None:
        for cond in self.status.conditions:
            if cond.type == "Ready" and cond.status == "True":
                return cond.last_transition_time
        return None

    def to_member(self) -> MemberRecord:
        return MemberRecord(
            name=self.metadata.name,
            namespace=self.metadata.namespace,
            provider_id=self.spec.provider_id,
            ready_since=self.ready_since(),
        )


class ListMeta(_KubeModel):
    continue_token: str | None = Field(None, alias="continue")


class KubeNodeList(_KubeModel):
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[KubeNode] = Field(default_factory=list)
