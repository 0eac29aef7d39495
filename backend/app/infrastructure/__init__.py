"""Infrastructure — database handle, SQL repositories, and logging setup.

Invariants:
    - Only this package (and alembic) imports SQLAlchemy engines and sessions
    - Core modules never import from here
"""
