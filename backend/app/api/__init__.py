"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON, except the landing page
    - Every failure leaves through error_handlers.py as {success, status, message}

Design Decisions:
    - Thin routes delegate to services
"""
