"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation, formatting and query building are pure and deterministic;
      identifiers.new_object_id is the only source of fresh values

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
