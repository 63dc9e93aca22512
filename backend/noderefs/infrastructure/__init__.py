"""Infrastructure Layer - member inventory accessors and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - All external calls wrapped with timeout and error mapping; none retry

Design Decisions:
    - One module per accessor; each satisfies core.repository_protocols.MemberInventory
"""
