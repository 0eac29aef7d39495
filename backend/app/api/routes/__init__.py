"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain business logic (delegate to services)
    - fallback.router is included last: it matches every path

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
