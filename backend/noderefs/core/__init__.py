"""Core Layer - pure resolution logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - All functions are pure and deterministic given their inputs

Design Decisions:
    - Functional core separated from imperative shell: the shell fetches the
      member snapshot, the core turns it into references
"""
