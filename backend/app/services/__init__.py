"""Services Layer — user and exercise use cases over repository protocols.

Invariants:
    - Services depend on core/repository_protocols.py, never on SQLAlchemy
    - Every error leaving a service is an ExerciseTrackerError

Design Decisions:
    - One service per resource; routes stay thin
"""
