"""Database Metadata — declarative Base shared by models and migrations.

Invariants:
    - Models and alembic/env.py import Base from here; no engine is created at import
"""
