"""Pydantic Schemas - validation for payloads crossing the system boundary.

Invariants:
    - Schemas validate at system boundary (API server responses, status payloads)
    - Domain dataclasses from core/ are the only types the core sees

Design Decisions:
    - Separate from core/members.py: schemas are wire contracts, members are domain values
"""
