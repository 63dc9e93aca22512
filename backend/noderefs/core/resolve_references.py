"""Reference Resolution - maps requested provider IDs onto indexed members.

Invariants:
    - Output order equals the requested order; misses are omitted, never padded
    - A miss for one ID is not an error; it is listed in ReferenceResult.missing
    - Non-empty request with zero matches raises NoAvailableMembersError
    - Empty request returns an empty result (vacuous success)
    - Duplicated requested IDs yield duplicated references

Design Decisions:
    - Two-tier miss policy: pools scale asynchronously, so partial visibility is
      expected and left to the outer loop; total absence means desync or a
      caller bug and is surfaced
    - Ready/available counting follows machine pool semantics: available means
      Ready for at least min_ready_seconds as of `now`
    - Naive datetimes (ready_since or now) are read as UTC
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from noderefs.core.domain_types import ProviderId
from noderefs.core.errors import ErrorContext, NoAvailableMembersError
from noderefs.core.members import MemberRecord, NodeReference, ReferenceResult
from noderefs.core.resolution_index import ResolutionIndex, build_index


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so mixed inputs stay comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_member_ready(record: MemberRecord) -> bool:
    return record.ready_since is not None


def is_member_available(
    record: MemberRecord, min_ready_seconds: int, now: datetime,
) -> bool:
    """Ready, and has stayed Ready for at least min_ready_seconds."""
    if record.ready_since is None:
        return False
    if min_ready_seconds <= 0:
        return True
    ready_since = as_utc(record.ready_since)
    return ready_since + timedelta(seconds=min_ready_seconds) <= as_utc(now)


def lookup_references(
    index: ResolutionIndex,
    requested: Sequence[str],
    *,
    min_ready_seconds: int = 0,
    now: datetime | None = None,
) -> ReferenceResult:
    """Resolve requested IDs against a prebuilt index. Never raises."""
    now = as_utc(now) if now is not None else datetime.now(timezone.utc)
    references: list[NodeReference] = []
    missing: list[ProviderId] = []
    ready = available = 0

    for provider_id in requested:
        record = index.get(provider_id)
        if record is None:
            missing.append(ProviderId(provider_id))
            continue
        references.append(NodeReference.from_record(record))
        if is_member_ready(record):
            ready += 1
        if is_member_available(record, min_ready_seconds, now):
            available += 1

    return ReferenceResult(
        references=tuple(references),
        missing=tuple(missing),
        ready=ready,
        available=available,
        duplicate_provider_ids=tuple(index.duplicates),
    )


def resolve_references(
    snapshot: Iterable[MemberRecord],
    requested: Sequence[str],
    *,
    min_ready_seconds: int = 0,
    now: datetime | None = None,
    context: ErrorContext | None = None,
) -> ReferenceResult:
    """Resolve provider IDs to member references. Pure, no IO.

    Raises:
        NoAvailableMembersError: requested is non-empty and nothing matched.
    """
    result = lookup_references(
        build_index(snapshot), requested,
        min_ready_seconds=min_ready_seconds, now=now,
    )
    if requested and not result.references:
        raise NoAvailableMembersError(len(requested), context=context)
    return result
