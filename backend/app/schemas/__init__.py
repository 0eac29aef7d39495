"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Record ids serialize as "_id", the user reference as "userId"
    - Dates serialize as YYYY-MM-DD strings

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Request fields are checked by core/validation.py, not by Pydantic, so each
      failure carries its own client-facing message
"""
