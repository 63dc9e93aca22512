"""Services Layer - imperative shell around the pure resolution core.

Invariants:
    - Services await IO through core.repository_protocols, then call core/ functions
    - No retry or backoff here; the outer reconciliation loop owns that policy
"""
